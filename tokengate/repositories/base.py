from typing import Generic, TypeVar, Type, Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from tokengate.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing the operations shared by every table.

    Usage:
        class ContactRepository(BaseRepository[Contact]):
            def __init__(self, db: AsyncSession):
                super().__init__(db, Contact)
    """

    def __init__(self, db: AsyncSession, model: Type[ModelType]):
        """
        Initialize repository.

        Args:
            db: Async database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def create(self, entity: ModelType) -> ModelType:
        """Insert a new entity and load its generated id."""
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        query = select(self.model).where(self.model.id == entity_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(self, offset: int, limit: int) -> tuple[list[ModelType], int]:
        """
        Get one page of entities ordered by id.

        Args:
            offset: Number of rows to skip
            limit: Maximum number of rows

        Returns:
            The page of entities and the total row count
        """
        total = await self.count()
        query = select(self.model).order_by(self.model.id).offset(offset).limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def count(self) -> int:
        query = select(func.count()).select_from(self.model)
        result = await self.db.execute(query)
        return result.scalar()
