from typing import Optional, List
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

MAX_EXPENSE_AMOUNT = Decimal("999999999")


class SplitBase(BaseModel):
    user_id: str
    amount: Decimal = Field(..., ge=0)

    model_config = {"from_attributes": True}


class ExpenseCreate(BaseModel):
    """
    New shared expense.

    Either pass explicit ``splits`` or let the amount be divided equally
    over ``split_between`` (all group members when omitted).
    """
    description: str = Field(..., min_length=1, max_length=500)
    amount: Decimal = Field(..., gt=0, le=MAX_EXPENSE_AMOUNT)
    paid_by: str
    category: Optional[str] = Field(None, max_length=100)
    expense_date: Optional[datetime] = None
    split_between: Optional[List[str]] = None
    splits: Optional[List[SplitBase]] = None

    model_config = ConfigDict(str_strip_whitespace=True)


class ExpenseResponse(BaseModel):
    id: str
    group_id: str
    description: str
    amount: Decimal
    paid_by: str
    category: Optional[str] = None
    expense_date: datetime
    splits: List[SplitBase]
    created_at: datetime


class ExpenseUpdate(ExpenseCreate):
    """Full replacement of an expense; splits are rebuilt the same way as on create."""
    pass
