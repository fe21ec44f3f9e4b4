from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime


class MemberAdd(BaseModel):
    """Add a member to a group."""
    user_id: str = Field(..., min_length=1, max_length=100)
    display_name: str = Field(..., min_length=1, max_length=100)

    model_config = ConfigDict(str_strip_whitespace=True)


class MemberResponse(BaseModel):
    user_id: str
    display_name: str
    joined_at: datetime

    model_config = {"from_attributes": True}


class GroupCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    currency: Optional[str] = Field(None, max_length=10)
    members: List[MemberAdd] = []

    model_config = ConfigDict(str_strip_whitespace=True)


class GroupUpdate(BaseModel):
    """Partial group edit. Only the fields sent are changed."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    currency: Optional[str] = Field(None, min_length=1, max_length=10)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("name", "currency")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value


class GroupResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    currency: str
    members: List[MemberResponse]
    created_at: datetime
    updated_at: datetime
