from typing import Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId

from settleup.core.config import settings
from settleup.models.group import Group, Member
from settleup.schemas.group import GroupCreate, GroupUpdate, MemberAdd


class GroupRepository:
    """Group and membership database operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.groups

    async def create_group(self, group_data: GroupCreate) -> Group:
        """Create a new group with its initial members."""
        group = Group(
            name=group_data.name,
            description=group_data.description,
            currency=group_data.currency or settings.DEFAULT_CURRENCY,
            members=[
                Member(user_id=m.user_id, display_name=m.display_name)
                for m in group_data.members
            ],
        )
        await self.collection.insert_one(group.model_dump(by_alias=True))
        return group

    async def get_group(self, group_id: str) -> Optional[Group]:
        """Get group by ID."""
        if not ObjectId.is_valid(group_id):
            return None
        doc = await self.collection.find_one({
            "_id": ObjectId(group_id),
            "is_deleted": False
        })
        if doc:
            return Group(**doc)
        return None

    async def add_member(self, group_id: str, member_data: MemberAdd) -> Optional[Group]:
        """Append a member to the group."""
        if not ObjectId.is_valid(group_id):
            return None
        member = Member(user_id=member_data.user_id, display_name=member_data.display_name)
        result = await self.collection.update_one(
            {"_id": ObjectId(group_id), "is_deleted": False},
            {
                "$push": {"members": member.model_dump()},
                "$set": {"updated_at": datetime.now(timezone.utc)}
            }
        )
        if result.matched_count == 0:
            return None
        return await self.get_group(group_id)

    async def update_group(self, group_id: str, group_data: GroupUpdate) -> Optional[Group]:
        """Update name, description or currency; unset fields are left alone."""
        if not ObjectId.is_valid(group_id):
            return None
        changes = group_data.model_dump(exclude_unset=True)
        changes["updated_at"] = datetime.now(timezone.utc)
        result = await self.collection.update_one(
            {"_id": ObjectId(group_id), "is_deleted": False},
            {"$set": changes}
        )
        if result.matched_count == 0:
            return None
        return await self.get_group(group_id)
