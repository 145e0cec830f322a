from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from tokengate.api.deps import (
    claims_dependency,
    get_advantage_service,
    get_contact_service,
    get_project_service,
)
from tokengate.schemas.pagination import PaginatedResponse, PaginationParams
from tokengate.schemas.resources import (
    AdvantageCreate,
    AdvantageResponse,
    ContactCreate,
    ContactResponse,
    ProjectCreate,
    ProjectResponse,
)
from tokengate.services.resource_service import ResourceService

contacts_router = APIRouter()
advantages_router = APIRouter()
projects_router = APIRouter()

contact_service = Annotated[ResourceService[ContactResponse], Depends(get_contact_service)]
advantage_service = Annotated[ResourceService[AdvantageResponse], Depends(get_advantage_service)]
project_service = Annotated[ResourceService[ProjectResponse], Depends(get_project_service)]


@contacts_router.get("/", response_model=PaginatedResponse[ContactResponse])
async def list_contacts(
    claims: claims_dependency,
    service: contact_service,
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
):
    return await service.list_items(PaginationParams(page=page, size=size))

@contacts_router.get("/{contact_id}", response_model=ContactResponse)
async def get_contact(contact_id: int, claims: claims_dependency, service: contact_service):
    return await service.get_item(contact_id)

@contacts_router.post("/", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(body: ContactCreate, claims: claims_dependency, service: contact_service):
    return await service.create_item(body, created_by=claims.id)


@advantages_router.get("/", response_model=PaginatedResponse[AdvantageResponse])
async def list_advantages(
    claims: claims_dependency,
    service: advantage_service,
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
):
    return await service.list_items(PaginationParams(page=page, size=size))

@advantages_router.get("/{advantage_id}", response_model=AdvantageResponse)
async def get_advantage(advantage_id: int, claims: claims_dependency, service: advantage_service):
    return await service.get_item(advantage_id)

@advantages_router.post("/", response_model=AdvantageResponse, status_code=status.HTTP_201_CREATED)
async def create_advantage(body: AdvantageCreate, claims: claims_dependency, service: advantage_service):
    return await service.create_item(body, created_by=claims.id)


@projects_router.get("/", response_model=PaginatedResponse[ProjectResponse])
async def list_projects(
    claims: claims_dependency,
    service: project_service,
    page: int = Query(default=1, ge=1),
    size: int = Query(default=20, ge=1, le=100),
):
    return await service.list_items(PaginationParams(page=page, size=size))

@projects_router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(project_id: int, claims: claims_dependency, service: project_service):
    return await service.get_item(project_id)

@projects_router.post("/", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(body: ProjectCreate, claims: claims_dependency, service: project_service):
    return await service.create_item(body, created_by=claims.id)
