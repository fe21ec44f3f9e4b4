import pytest

from settleup.models.expense import Split
from settleup.utils.ledger_validation import (
    LedgerValidationError,
    validate_expense_splits,
    validate_reminder_parties,
)

MEMBERS = {"alice", "bob", "carol"}


def splits(**cents):
    return [Split(user_id=user_id, amount_cents=amount) for user_id, amount in cents.items()]


def test_valid_expense_passes():
    validate_expense_splits("alice", 10000, splits(alice=3333, bob=3333, carol=3334), MEMBERS)


def test_rounding_drift_within_one_cent_per_split_passes():
    validate_expense_splits("alice", 10000, splits(alice=3333, bob=3333, carol=3333), MEMBERS)


def test_payer_must_be_member():
    with pytest.raises(LedgerValidationError, match="Payer 'mallory'"):
        validate_expense_splits("mallory", 1000, splits(alice=1000), MEMBERS)


def test_split_member_must_be_member():
    with pytest.raises(LedgerValidationError, match="'mallory' is not a member"):
        validate_expense_splits("alice", 1000, splits(alice=500, mallory=500), MEMBERS)


def test_needs_at_least_one_split():
    with pytest.raises(LedgerValidationError, match="at least one member"):
        validate_expense_splits("alice", 1000, [], MEMBERS)


def test_duplicate_split_member():
    duplicated = [Split(user_id="bob", amount_cents=500), Split(user_id="bob", amount_cents=500)]
    with pytest.raises(LedgerValidationError, match="more than one split"):
        validate_expense_splits("alice", 1000, duplicated, MEMBERS)


def test_negative_split():
    with pytest.raises(LedgerValidationError, match="negative amount"):
        validate_expense_splits("alice", 1000, splits(alice=1500, bob=-500), MEMBERS)


def test_split_sum_mismatch():
    with pytest.raises(LedgerValidationError, match="does not equal expense amount"):
        validate_expense_splits("alice", 1000, splits(alice=400, bob=400), MEMBERS)


def test_reminder_parties():
    validate_reminder_parties("alice", "bob", MEMBERS)

    with pytest.raises(LedgerValidationError, match="yourself"):
        validate_reminder_parties("alice", "alice", MEMBERS)
    with pytest.raises(LedgerValidationError, match="'mallory' is not a member"):
        validate_reminder_parties("alice", "mallory", MEMBERS)
