from typing import Optional
from decimal import Decimal
from settleup.models.base import MongoModel, PyObjectId
from settleup.utils.money import from_cents

class PaymentReminder(MongoModel):
    group_id: PyObjectId
    from_user_id: str  # Creditor sending the reminder
    to_user_id: str    # Debtor being reminded
    amount_cents: int
    message: Optional[str] = None
    notification_text: str

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)
