"""Ledger validation utilities."""
from typing import Collection, List

from settleup.models.expense import Split


class LedgerValidationError(Exception):
    """Custom exception for expense and reminder validation errors."""
    pass


def validate_expense_splits(
    paid_by: str,
    amount_cents: int,
    splits: List[Split],
    member_ids: Collection[str],
) -> None:
    """
    Validate an expense before it is written.

    Rules:
    - payer must be a group member
    - at least one split, each for a distinct group member
    - split amounts must be non-negative
    - split sum must equal the amount, allowing one cent of drift per split
    """
    if paid_by not in member_ids:
        raise LedgerValidationError(f"Payer '{paid_by}' is not a member of this group")

    if not splits:
        raise LedgerValidationError("Expense must be split between at least one member")

    seen = set()
    for split in splits:
        if split.user_id not in member_ids:
            raise LedgerValidationError(f"Split member '{split.user_id}' is not a member of this group")
        if split.user_id in seen:
            raise LedgerValidationError(f"Member '{split.user_id}' appears in more than one split")
        seen.add(split.user_id)

        if split.amount_cents < 0:
            raise LedgerValidationError(
                f"Split for '{split.user_id}' has negative amount: {split.amount}"
            )

    split_sum = sum(split.amount_cents for split in splits)
    if abs(split_sum - amount_cents) > len(splits):
        raise LedgerValidationError(
            f"Split sum ({split_sum} cents) does not equal expense amount ({amount_cents} cents)"
        )


def validate_reminder_parties(from_user_id: str, to_user_id: str, member_ids: Collection[str]) -> None:
    """Both sides of a reminder must be distinct group members."""
    if from_user_id == to_user_id:
        raise LedgerValidationError("Cannot send a reminder to yourself")
    for user_id in (from_user_id, to_user_id):
        if user_id not in member_ids:
            raise LedgerValidationError(f"User '{user_id}' is not a member of this group")
