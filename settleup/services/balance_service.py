"""
Balance aggregation - reduces a group's expenses to one net balance per member.

Algorithm:
1. Seed every member at zero (so inactive members still show up)
2. Credit each payer with the full expense amount
3. Debit each split member with their share

References to users that are not in the member list are skipped. Nothing
here validates amounts; that happens when expenses are written.
"""

from typing import Dict, List, Sequence

from settleup.models.expense import Expense
from settleup.models.group import Member
from settleup.schemas.balance import Balance
from settleup.utils.money import from_cents, to_cents


def compute_balances(members: Sequence[Member], expenses: Sequence[Expense]) -> List[Balance]:
    """
    Compute net balances for ``members`` from ``expenses``.

    Returns one Balance per member, in member order. Pure: no I/O and no
    state kept between calls.
    """
    net: Dict[str, int] = {}
    names: Dict[str, str] = {}
    for member in members:
        net[member.user_id] = 0
        names[member.user_id] = member.display_name

    for expense in expenses:
        if expense.paid_by in net:
            net[expense.paid_by] += to_cents(expense.amount)

        for split in expense.splits:
            if split.user_id in net:
                net[split.user_id] -= to_cents(split.amount)

    return [
        Balance(user_id=user_id, display_name=names[user_id], balance=from_cents(cents))
        for user_id, cents in net.items()
    ]
