import pytest
from decimal import Decimal

from settleup.services.split_service import split_equally


def test_three_way_split_puts_extra_cent_last():
    splits = split_equally(Decimal("100"), ["alice", "bob", "carol"])

    assert [s.user_id for s in splits] == ["alice", "bob", "carol"]
    assert [s.amount for s in splits] == [Decimal("33.33"), Decimal("33.33"), Decimal("33.34")]


@pytest.mark.parametrize("amount, n", [("10", 4), ("0.05", 3), ("999.99", 7), ("1", 1)])
def test_splits_sum_to_amount(amount, n):
    splits = split_equally(Decimal(amount), [f"user{i}" for i in range(n)])

    assert sum(s.amount for s in splits) == Decimal(amount)
    shares = [s.amount_cents for s in splits]
    assert max(shares) - min(shares) <= 1


def test_small_amount_spreads_remainder():
    splits = split_equally(Decimal("0.05"), ["a", "b", "c"])

    assert [s.amount_cents for s in splits] == [1, 2, 2]


def test_no_members_no_splits():
    assert split_equally(Decimal("10"), []) == []
