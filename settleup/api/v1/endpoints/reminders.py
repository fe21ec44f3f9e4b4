from typing import List
from fastapi import APIRouter, HTTPException, Depends, status

from settleup.db.mongo import get_db
from settleup.models.reminder import PaymentReminder
from settleup.schemas.reminder import ReminderCreate, ReminderResponse
from settleup.services.reminder_service import ReminderService
from settleup.utils.ledger_validation import LedgerValidationError

router = APIRouter()


def to_reminder_response(reminder: PaymentReminder) -> ReminderResponse:
    return ReminderResponse(
        id=str(reminder.id),
        group_id=str(reminder.group_id),
        from_user_id=reminder.from_user_id,
        to_user_id=reminder.to_user_id,
        amount=reminder.amount,
        message=reminder.message,
        notification_text=reminder.notification_text,
        created_at=reminder.created_at
    )


@router.post("/{group_id}/reminders", response_model=ReminderResponse, status_code=status.HTTP_201_CREATED)
async def send_reminder(group_id: str, reminder_in: ReminderCreate, db = Depends(get_db)):
    """Remind a member about a pending payment."""
    try:
        reminder = await ReminderService.send(db, group_id, reminder_in)
    except LedgerValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )
    if reminder is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return to_reminder_response(reminder)


@router.get("/{group_id}/reminders", response_model=List[ReminderResponse])
async def list_reminders(group_id: str, db = Depends(get_db)):
    reminders = await ReminderService.list_for_group(db, group_id)
    if reminders is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return [to_reminder_response(reminder) for reminder in reminders]
