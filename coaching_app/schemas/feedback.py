import datetime
import enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

from .common import CaseInsensitiveModel, MAX_ID


class TargetType(str, enum.Enum):
    TEAM = "team"
    MEMBER = "member"


class FeedbackTarget(NamedTuple):
    """The team or member a feedback entry is about."""
    kind: TargetType
    id: int


class FeedbackCreate(CaseInsensitiveModel):
    content: str
    targetid: int = Field(..., ge=0, le=MAX_ID)
    targettype: TargetType

    @field_validator("targettype", mode="before")
    @classmethod
    def check_target_type(cls, value):
        allowed = [t.value for t in TargetType]
        if isinstance(value, TargetType) or value in allowed:
            return value
        raise ValueError(f"Invalid TargetType. Must be '{allowed[0]}' or '{allowed[1]}'.")

    @property
    def target(self) -> FeedbackTarget:
        return FeedbackTarget(kind=self.targettype, id=self.targetid)


class Feedback(BaseModel):
    id: int = Field(serialization_alias="ID")
    content: str = Field(serialization_alias="Content")
    targetid: int = Field(serialization_alias="TargetID")
    targettype: TargetType = Field(serialization_alias="TargetType")
    created_at: Optional[datetime.datetime] = Field(None, serialization_alias="CreatedAt")

    class Config:
        from_attributes = True
