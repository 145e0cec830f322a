from tokengate.models.user import User
from tokengate.models.resources import Advantage, Contact, Project

__all__ = ["User", "Contact", "Advantage", "Project"]
