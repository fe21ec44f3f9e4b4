import logging
from typing import Optional
from decimal import Decimal
from motor.motor_asyncio import AsyncIOMotorDatabase

from settleup.models.reminder import PaymentReminder
from settleup.repositories.group_repo import GroupRepository
from settleup.repositories.reminder_repo import ReminderRepository
from settleup.schemas.reminder import ReminderCreate
from settleup.utils.ledger_validation import validate_reminder_parties
from settleup.utils.money import round_currency, to_cents

logger = logging.getLogger(__name__)


def build_reminder_text(currency: str, amount: Decimal, message: Optional[str] = None) -> str:
    """Notification body shown to the debtor, e.g. 'You owe USD 12.50: "pizza"'."""
    text = f"You owe {currency} {round_currency(amount):.2f}"
    note = (message or "").strip()
    if note:
        text += f': "{note}"'
    return text


class ReminderService:
    @staticmethod
    async def send(db: AsyncIOMotorDatabase, group_id: str, reminder_in: ReminderCreate) -> Optional[PaymentReminder]:
        """
        Store a payment reminder for the debtor.

        Delivery is left to the notification layer; this only records the
        reminder and its rendered text. Returns None if the group is unknown.
        """
        group = await GroupRepository(db).get_group(group_id)
        if group is None:
            return None

        validate_reminder_parties(reminder_in.from_user_id, reminder_in.to_user_id, group.member_ids())

        message = (reminder_in.message or "").strip() or None
        reminder = PaymentReminder(
            group_id=group.id,
            from_user_id=reminder_in.from_user_id,
            to_user_id=reminder_in.to_user_id,
            amount_cents=to_cents(reminder_in.amount),
            message=message,
            notification_text=build_reminder_text(group.currency, reminder_in.amount, message),
        )
        reminder = await ReminderRepository(db).create_reminder(reminder)
        logger.info("Reminder %s queued for %s in group %s", reminder.id, reminder.to_user_id, group_id)
        return reminder

    @staticmethod
    async def list_for_group(db: AsyncIOMotorDatabase, group_id: str):
        group = await GroupRepository(db).get_group(group_id)
        if group is None:
            return None
        return await ReminderRepository(db).list_by_group(group_id)
