from typing import List, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field
from settleup.models.base import MongoModel
from settleup.core.config import settings

# Embedded documents don't need MongoModel (no separate _id)
class Member(BaseModel):
    user_id: str
    display_name: str
    joined_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class Group(MongoModel):
    name: str
    description: Optional[str] = None
    currency: str = Field(default_factory=lambda: settings.DEFAULT_CURRENCY)
    members: List[Member] = []
    is_deleted: bool = False

    def member_ids(self) -> List[str]:
        return [member.user_id for member in self.members]

    def has_member(self, user_id: str) -> bool:
        return any(member.user_id == user_id for member in self.members)
