from typing import Generic, Type, TypeVar

from pydantic import BaseModel

from tokengate.core.exceptions import NotFoundException
from tokengate.repositories.base import BaseRepository
from tokengate.schemas.pagination import PaginatedResponse, PaginationParams
import logging

logger = logging.getLogger(__name__)

ResponseType = TypeVar("ResponseType", bound=BaseModel)


class ResourceService(Generic[ResponseType]):
    """Read and create operations for one of the gated catalog tables."""

    def __init__(self, repo: BaseRepository, response_schema: Type[ResponseType]):
        self.repo = repo
        self.response_schema = response_schema
        self.name = repo.model.__tablename__

    async def list_items(self, params: PaginationParams) -> PaginatedResponse[ResponseType]:
        items, total = await self.repo.get_all(params.offset, params.size)
        return PaginatedResponse.create(
            items=[self.response_schema.model_validate(item) for item in items],
            total=total,
            params=params,
        )

    async def get_item(self, entity_id: int) -> ResponseType:
        entity = await self.repo.get_by_id(entity_id)
        if not entity:
            raise NotFoundException(detail=f"{self.name} item {entity_id} not found")
        return self.response_schema.model_validate(entity)

    async def create_item(self, data: BaseModel, created_by: int) -> ResponseType:
        entity = await self.repo.create(self.repo.model(**data.model_dump()))
        logger.info("Created %s id=%s by user_id=%s", self.name, entity.id, created_by)
        return self.response_schema.model_validate(entity)
