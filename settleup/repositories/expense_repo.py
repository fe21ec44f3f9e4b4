from typing import List, Optional
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId

from settleup.models.expense import Expense


class ExpenseRepository:
    """Repository for group expenses and their embedded splits."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.expenses

    async def create_expense(self, expense: Expense) -> Expense:
        await self.collection.insert_one(expense.model_dump(by_alias=True))
        return expense

    async def get_expense(self, group_id: str, expense_id: str) -> Optional[Expense]:
        if not (ObjectId.is_valid(group_id) and ObjectId.is_valid(expense_id)):
            return None
        doc = await self.collection.find_one({
            "_id": ObjectId(expense_id),
            "group_id": ObjectId(group_id),
            "is_deleted": False
        })
        if doc:
            return Expense(**doc)
        return None

    async def update_expense(self, expense: Expense) -> bool:
        """Overwrite the editable fields and splits of an active expense."""
        result = await self.collection.update_one(
            {"_id": expense.id, "group_id": expense.group_id, "is_deleted": False},
            {"$set": expense.model_dump(
                include={"description", "amount_cents", "paid_by", "category",
                         "expense_date", "splits", "updated_at"}
            )}
        )
        return result.matched_count == 1

    async def list_by_group(self, group_id: str) -> List[Expense]:
        """Active expenses of a group, newest first."""
        if not ObjectId.is_valid(group_id):
            return []
        cursor = self.collection.find({
            "group_id": ObjectId(group_id),
            "is_deleted": False
        }).sort("expense_date", -1)
        docs = await cursor.to_list(None)
        return [Expense(**doc) for doc in docs]

    async def delete_expense(self, group_id: str, expense_id: str) -> bool:
        """Soft delete. Returns False when no active expense matched."""
        if not (ObjectId.is_valid(group_id) and ObjectId.is_valid(expense_id)):
            return False
        result = await self.collection.update_one(
            {
                "_id": ObjectId(expense_id),
                "group_id": ObjectId(group_id),
                "is_deleted": False
            },
            {"$set": {"is_deleted": True, "updated_at": datetime.now(timezone.utc)}}
        )
        return result.modified_count == 1
