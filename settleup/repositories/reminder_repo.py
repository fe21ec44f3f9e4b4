from typing import List
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId

from settleup.models.reminder import PaymentReminder


class ReminderRepository:
    """Payment reminder records."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.payment_reminders

    async def create_reminder(self, reminder: PaymentReminder) -> PaymentReminder:
        await self.collection.insert_one(reminder.model_dump(by_alias=True))
        return reminder

    async def list_by_group(self, group_id: str) -> List[PaymentReminder]:
        if not ObjectId.is_valid(group_id):
            return []
        cursor = self.collection.find({"group_id": ObjectId(group_id)}).sort("created_at", -1)
        docs = await cursor.to_list(None)
        return [PaymentReminder(**doc) for doc in docs]
