from sqlalchemy.ext.asyncio import AsyncSession

from tokengate.models.resources import Advantage, Contact, Project
from tokengate.repositories.base import BaseRepository


class ContactRepository(BaseRepository[Contact]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Contact)


class AdvantageRepository(BaseRepository[Advantage]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Advantage)


class ProjectRepository(BaseRepository[Project]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Project)
