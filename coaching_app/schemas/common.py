from typing import Any

from pydantic import BaseModel, model_validator


class CaseInsensitiveModel(BaseModel):
    """Request model whose JSON keys are matched regardless of case.

    Clients send ``targetID``, ``PictureURL`` and ``pictureurl`` interchangeably;
    all fields on subclasses are declared lowercase.
    """

    @model_validator(mode="before")
    @classmethod
    def _lowercase_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key.lower() if isinstance(key, str) else key: value for key, value in data.items()}
        return data


class Message(BaseModel):
    message: str


# Row ids must fit a signed 64-bit INTEGER column on every supported backend
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1
