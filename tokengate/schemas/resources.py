from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ContactBase(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)

class ContactCreate(ContactBase):
    pass

class ContactResponse(ContactBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class AdvantageBase(BaseModel):
    title: str = Field(min_length=1)
    description: str

class AdvantageCreate(AdvantageBase):
    pass

class AdvantageResponse(AdvantageBase):
    id: int

    model_config = ConfigDict(from_attributes=True)


class ProjectBase(BaseModel):
    title: str = Field(min_length=1)
    description: str
    url: str | None = None

class ProjectCreate(ProjectBase):
    pass

class ProjectResponse(ProjectBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
