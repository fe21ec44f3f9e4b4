import pytest
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from fastapi.testclient import TestClient

from settleup.main import app
from settleup.db.mongo import get_db
from settleup.models.expense import Expense, Split
from settleup.models.group import Group, Member

GROUP_ID = "507f1f77bcf86cd799439011"


def mock_cursor(docs):
    """Motor-style cursor: sync find()/sort(), async to_list()."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=docs)
    return cursor


@pytest.fixture
def mock_db():
    """Database double with the collections the repositories touch."""
    db = MagicMock()
    for collection in (db.groups, db.expenses, db.payment_reminders):
        collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
        collection.find_one = AsyncMock(return_value=None)
        collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1, modified_count=1))
        collection.find = MagicMock(return_value=mock_cursor([]))
    return db


@pytest.fixture
def members():
    return [
        Member(user_id="alice", display_name="Alice"),
        Member(user_id="bob", display_name="Bob"),
        Member(user_id="carol", display_name="Carol"),
    ]


@pytest.fixture
def group(members):
    return Group(id=ObjectId(GROUP_ID), name="Goa Trip", currency="INR", members=members)


@pytest.fixture
def group_doc(group):
    """The group as it comes back from MongoDB."""
    return group.model_dump(by_alias=True)


@pytest.fixture
def make_expense():
    """Build an expense from whole amounts: make_expense("alice", 100, {"bob": 50, ...})."""
    def _make(paid_by, amount, shares, description="Dinner"):
        return Expense(
            group_id=ObjectId(GROUP_ID),
            description=description,
            amount_cents=round(amount * 100),
            paid_by=paid_by,
            splits=[
                Split(user_id=user_id, amount_cents=round(share * 100))
                for user_id, share in shares.items()
            ],
        )
    return _make


@pytest.fixture
def client(mock_db):
    """FastAPI test client backed by the mocked database (lifespan not started)."""
    app.dependency_overrides[get_db] = lambda: mock_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_cursor():
    return mock_cursor
