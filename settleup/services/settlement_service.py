"""
Settlement optimizer - turns net balances into peer-to-peer payments.

Greedy largest-first matching of creditors against debtors. This keeps the
number of payments low in practice but is not a guaranteed minimum.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from motor.motor_asyncio import AsyncIOMotorDatabase

from settleup.core.config import settings
from settleup.models.expense import Expense
from settleup.models.group import Group
from settleup.repositories.expense_repo import ExpenseRepository
from settleup.repositories.group_repo import GroupRepository
from settleup.schemas.balance import Balance, GroupSummary, Settlement
from settleup.services.balance_service import compute_balances
from settleup.utils.money import from_cents, to_cents

logger = logging.getLogger(__name__)


@dataclass
class _Position:
    user_id: str
    display_name: str
    remaining: int  # Cents, always positive


def compute_optimal_settlements(
    balances: Sequence[Balance],
    tolerance_cents: Optional[int] = None,
) -> List[Settlement]:
    """
    Compute the payments that bring every balance to zero.

    Balances within ``tolerance_cents`` of zero are treated as settled.
    When the balances do not sum to zero the walk stops once either side
    runs out and the residual is left unmatched.
    """
    if tolerance_cents is None:
        tolerance_cents = settings.SETTLEMENT_TOLERANCE_CENTS
    # A zero tolerance would never let an exhausted position advance
    tolerance_cents = max(tolerance_cents, 1)

    creditors: List[_Position] = []
    debtors: List[_Position] = []
    for balance in balances:
        cents = to_cents(balance.balance)
        if cents > tolerance_cents:
            creditors.append(_Position(balance.user_id, balance.display_name, cents))
        elif cents < -tolerance_cents:
            debtors.append(_Position(balance.user_id, balance.display_name, -cents))

    # Stable sorts: equal balances keep their input order
    creditors.sort(key=lambda p: p.remaining, reverse=True)
    debtors.sort(key=lambda p: p.remaining, reverse=True)

    settlements: List[Settlement] = []
    i = 0  # creditor cursor
    j = 0  # debtor cursor

    while i < len(creditors) and j < len(debtors):
        creditor = creditors[i]
        debtor = debtors[j]

        amount = min(creditor.remaining, debtor.remaining)
        if amount > tolerance_cents:
            settlements.append(Settlement(
                from_user_id=debtor.user_id,
                from_user_name=debtor.display_name,
                to_user_id=creditor.user_id,
                to_user_name=creditor.display_name,
                amount=from_cents(amount),
            ))

        creditor.remaining -= amount
        debtor.remaining -= amount

        if creditor.remaining < tolerance_cents:
            i += 1
        if debtor.remaining < tolerance_cents:
            j += 1

    residual = sum(p.remaining for p in creditors[i:]) - sum(p.remaining for p in debtors[j:])
    if residual:
        logger.debug("Balances do not net to zero; %s left unmatched", from_cents(residual))

    return settlements


def summarize_group(group: Group, expenses: Sequence[Expense]) -> GroupSummary:
    """Balances plus suggested settlements for one group."""
    balances = compute_balances(group.members, expenses)
    settlements = compute_optimal_settlements(balances)
    return GroupSummary(
        group_id=str(group.id),
        currency=group.currency,
        balances=balances,
        settlements=settlements,
        is_settled=not settlements,
    )


class SettlementService:
    @staticmethod
    async def load_group_ledger(
        db: AsyncIOMotorDatabase, group_id: str
    ) -> Optional[Tuple[Group, List[Expense]]]:
        """Fetch a group and its active expenses, or None if the group is unknown."""
        group = await GroupRepository(db).get_group(group_id)
        if group is None:
            return None
        expenses = await ExpenseRepository(db).list_by_group(group_id)
        return group, expenses

    @staticmethod
    async def get_group_summary(db: AsyncIOMotorDatabase, group_id: str) -> Optional[GroupSummary]:
        ledger = await SettlementService.load_group_ledger(db, group_id)
        if ledger is None:
            return None
        group, expenses = ledger
        summary = summarize_group(group, expenses)
        logger.info(
            "Group %s: %d members, %d expenses, %d suggested settlements",
            group_id, len(group.members), len(expenses), len(summary.settlements),
        )
        return summary
