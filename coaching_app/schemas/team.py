from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from .common import CaseInsensitiveModel
from .team_member import TeamMember

class TeamBase(CaseInsensitiveModel):
    name: str
    logourl: Optional[str] = None

class TeamCreate(TeamBase):
    pass

class TeamUpdate(CaseInsensitiveModel):
    name: Optional[str] = None
    logourl: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_null(cls, value):
        if value is None:
            raise ValueError("name cannot be null")
        return value

class Team(BaseModel):
    id: int = Field(serialization_alias="ID")
    name: str = Field(serialization_alias="Name")
    logourl: Optional[str] = Field(None, serialization_alias="LogoURL")
    members: List[TeamMember] = Field([], serialization_alias="Members")

    class Config:
        from_attributes = True
