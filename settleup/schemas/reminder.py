from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class ReminderCreate(BaseModel):
    """Remind a debtor about a suggested settlement."""
    from_user_id: str
    to_user_id: str
    amount: Decimal = Field(..., gt=0)
    message: Optional[str] = Field(None, max_length=1000)

    model_config = ConfigDict(str_strip_whitespace=True)


class ReminderResponse(BaseModel):
    id: str
    group_id: str
    from_user_id: str
    to_user_id: str
    amount: Decimal
    message: Optional[str] = None
    notification_text: str
    created_at: datetime
