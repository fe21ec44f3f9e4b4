"""
Expense model - one shared cost inside a group.

All amounts are stored as integer cents. A well formed expense has splits
summing to ``amount_cents`` (within a cent per split), but nothing here
enforces that; see ``settleup.utils.ledger_validation``.
"""

from typing import List, Optional
from datetime import datetime, timezone
from decimal import Decimal
from pydantic import BaseModel, Field
from settleup.models.base import MongoModel, PyObjectId
from settleup.utils.money import from_cents

class Split(BaseModel):
    user_id: str
    amount_cents: int  # Owed by user_id

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)

class Expense(MongoModel):
    group_id: PyObjectId
    description: str
    amount_cents: int
    paid_by: str  # Member user_id
    category: Optional[str] = None
    expense_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    splits: List[Split] = []
    is_deleted: bool = False

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)
