import logging
from typing import List, Optional, Union
from datetime import datetime, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase

from settleup.models.expense import Expense, Split
from settleup.models.group import Group
from settleup.repositories.expense_repo import ExpenseRepository
from settleup.repositories.group_repo import GroupRepository
from settleup.schemas.expense import ExpenseCreate, ExpenseUpdate
from settleup.services.split_service import split_equally
from settleup.utils.ledger_validation import LedgerValidationError, validate_expense_splits
from settleup.utils.money import to_cents

logger = logging.getLogger(__name__)


def build_splits(group: Group, expense_in: Union[ExpenseCreate, ExpenseUpdate]) -> List[Split]:
    """
    Explicit splits as given, otherwise an equal split over ``split_between``
    (all members when omitted). Sending both is rejected.
    """
    if expense_in.splits is not None and expense_in.split_between is not None:
        raise LedgerValidationError("Pass either splits or split_between, not both")

    if expense_in.splits is not None:
        return [
            Split(user_id=split.user_id, amount_cents=to_cents(split.amount))
            for split in expense_in.splits
        ]

    participants = expense_in.split_between
    if participants is None:
        participants = group.member_ids()
    return split_equally(expense_in.amount, participants)


class ExpenseService:
    @staticmethod
    async def create(db: AsyncIOMotorDatabase, group_id: str, expense_in: ExpenseCreate) -> Optional[Expense]:
        """
        Record a shared expense in a group.

        Returns None if the group does not exist.
        Raises LedgerValidationError if payer or splits are inconsistent.
        """
        group = await GroupRepository(db).get_group(group_id)
        if group is None:
            return None

        splits = build_splits(group, expense_in)
        amount_cents = to_cents(expense_in.amount)
        validate_expense_splits(expense_in.paid_by, amount_cents, splits, group.member_ids())

        expense = Expense(
            group_id=group.id,
            description=expense_in.description,
            amount_cents=amount_cents,
            paid_by=expense_in.paid_by,
            category=expense_in.category,
            expense_date=expense_in.expense_date or datetime.now(timezone.utc),
            splits=splits,
        )
        expense = await ExpenseRepository(db).create_expense(expense)
        logger.info(
            "Expense %s added to group %s: %s split %d ways",
            expense.id, group_id, expense.amount, len(splits),
        )
        return expense

    @staticmethod
    async def update(
        db: AsyncIOMotorDatabase, group_id: str, expense_id: str, expense_in: ExpenseUpdate
    ) -> Optional[Expense]:
        """
        Replace an expense and its splits.

        Returns None if the group or expense does not exist.
        """
        group = await GroupRepository(db).get_group(group_id)
        if group is None:
            return None

        repo = ExpenseRepository(db)
        existing = await repo.get_expense(group_id, expense_id)
        if existing is None:
            return None

        splits = build_splits(group, expense_in)
        amount_cents = to_cents(expense_in.amount)
        validate_expense_splits(expense_in.paid_by, amount_cents, splits, group.member_ids())

        updated = existing.model_copy(update={
            "description": expense_in.description,
            "amount_cents": amount_cents,
            "paid_by": expense_in.paid_by,
            "category": expense_in.category,
            "expense_date": expense_in.expense_date or existing.expense_date,
            "splits": splits,
            "updated_at": datetime.now(timezone.utc),
        })
        if not await repo.update_expense(updated):
            return None
        logger.info("Expense %s in group %s updated: %s split %d ways", expense_id, group_id, updated.amount, len(splits))
        return updated

    @staticmethod
    async def list_for_group(db: AsyncIOMotorDatabase, group_id: str) -> Optional[List[Expense]]:
        group = await GroupRepository(db).get_group(group_id)
        if group is None:
            return None
        return await ExpenseRepository(db).list_by_group(group_id)

    @staticmethod
    async def delete(db: AsyncIOMotorDatabase, group_id: str, expense_id: str) -> bool:
        deleted = await ExpenseRepository(db).delete_expense(group_id, expense_id)
        if deleted:
            logger.info("Expense %s deleted from group %s", expense_id, group_id)
        return deleted
