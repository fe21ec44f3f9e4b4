"""
Balance and settlement schemas.

These are the data contract between the balance aggregator and the
settlement optimizer, and what the group views return.
"""
from typing import List
from decimal import Decimal
from pydantic import BaseModel


class Balance(BaseModel):
    """Net position of one member. Positive means the member is owed money."""
    user_id: str
    display_name: str
    balance: Decimal

    model_config = {"from_attributes": True}


class Settlement(BaseModel):
    """A proposed payment from a debtor to a creditor."""
    from_user_id: str
    from_user_name: str
    to_user_id: str
    to_user_name: str
    amount: Decimal


class GroupSummary(BaseModel):
    group_id: str
    currency: str
    balances: List[Balance]
    settlements: List[Settlement]
    is_settled: bool


class SettlementOptimizeRequest(BaseModel):
    balances: List[Balance]
