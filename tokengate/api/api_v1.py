from tokengate.api.v1.auth import router as auth_router
from tokengate.api.v1.users import router as user_router
from tokengate.api.v1.resources import advantages_router, contacts_router, projects_router

__all__ = ["auth_router", "user_router", "contacts_router", "advantages_router", "projects_router"]
