from bson import ObjectId
from fastapi import status


def test_optimize_settlements(client):
    response = client.post(
        "/api/v1/settlements/optimize",
        json={
            "balances": [
                {"user_id": "a", "display_name": "Asha", "balance": "30"},
                {"user_id": "b", "display_name": "Ben", "balance": "-30"},
            ]
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == [{
        "from_user_id": "b",
        "from_user_name": "Ben",
        "to_user_id": "a",
        "to_user_name": "Asha",
        "amount": "30.00",
    }]


def test_optimize_empty(client):
    response = client.post("/api/v1/settlements/optimize", json={"balances": []})

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_group_balances(client, mock_db, group, group_doc, make_expense, make_cursor):
    mock_db.groups.find_one.return_value = group_doc
    expense = make_expense("alice", 100, {"alice": 33.33, "bob": 33.33, "carol": 33.34})
    mock_db.expenses.find.return_value = make_cursor([expense.model_dump(by_alias=True)])

    response = client.get(f"/api/v1/groups/{group.id}/balances")

    assert response.status_code == status.HTTP_200_OK
    assert [(b["user_id"], b["balance"]) for b in response.json()] == [
        ("alice", "66.67"), ("bob", "-33.33"), ("carol", "-33.34")
    ]


def test_group_settlements(client, mock_db, group, group_doc, make_expense, make_cursor):
    mock_db.groups.find_one.return_value = group_doc
    expense = make_expense("alice", 100, {"alice": 33.33, "bob": 33.33, "carol": 33.34})
    mock_db.expenses.find.return_value = make_cursor([expense.model_dump(by_alias=True)])

    response = client.get(f"/api/v1/groups/{group.id}/settlements")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["currency"] == "INR"
    assert data["is_settled"] is False
    assert [(s["from_user_id"], s["to_user_id"], s["amount"]) for s in data["settlements"]] == [
        ("carol", "alice", "33.34"),
        ("bob", "alice", "33.33"),
    ]


def test_group_without_expenses_is_settled(client, mock_db, group, group_doc):
    mock_db.groups.find_one.return_value = group_doc

    data = client.get(f"/api/v1/groups/{group.id}/settlements").json()

    assert data["is_settled"] is True
    assert data["settlements"] == []
    assert all(b["balance"] == "0.00" for b in data["balances"])


def test_group_settlements_not_found(client):
    assert client.get(f"/api/v1/groups/{ObjectId()}/settlements").status_code == status.HTTP_404_NOT_FOUND
    assert client.get(f"/api/v1/groups/{ObjectId()}/balances").status_code == status.HTTP_404_NOT_FOUND
