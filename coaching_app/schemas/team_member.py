from pydantic import BaseModel, Field, field_validator
from typing import Optional
from .common import CaseInsensitiveModel

class TeamMemberBase(CaseInsensitiveModel):
    name: str
    pictureurl: Optional[str] = None
    email: str

class TeamMemberCreate(TeamMemberBase):
    pass

class TeamMemberUpdate(CaseInsensitiveModel):
    name: Optional[str] = None
    pictureurl: Optional[str] = None
    email: Optional[str] = None

    @field_validator("name", "email")
    @classmethod
    def not_null(cls, value, info):
        # Only runs for keys present in the body; omitted keys stay unset
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

class TeamMember(BaseModel):
    id: int = Field(serialization_alias="ID")
    name: str = Field(serialization_alias="Name")
    pictureurl: Optional[str] = Field(None, serialization_alias="PictureURL")
    email: str = Field(serialization_alias="Email")

    class Config:
        from_attributes = True
