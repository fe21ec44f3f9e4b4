from typing import List, Sequence
from decimal import Decimal

from settleup.models.expense import Split
from settleup.utils.money import to_cents


def split_equally(amount: Decimal, user_ids: Sequence[str]) -> List[Split]:
    """
    Divide ``amount`` equally over ``user_ids``.

    Everyone gets the floored cent share; leftover cents go one each to the
    last users so the splits add up to the amount exactly
    (100.00 over three -> 33.33, 33.33, 33.34).
    """
    if not user_ids:
        return []

    total_cents = to_cents(amount)
    share, remainder = divmod(total_cents, len(user_ids))
    first_with_extra = len(user_ids) - remainder

    return [
        Split(user_id=user_id, amount_cents=share + (1 if index >= first_with_extra else 0))
        for index, user_id in enumerate(user_ids)
    ]
