from typing import List
from fastapi import APIRouter, HTTPException, Depends, status

from settleup.db.mongo import get_db
from settleup.schemas.balance import Balance, GroupSummary, Settlement, SettlementOptimizeRequest
from settleup.services.settlement_service import SettlementService, compute_optimal_settlements

router = APIRouter()


@router.post("/settlements/optimize", response_model=List[Settlement])
async def optimize_settlements(payload: SettlementOptimizeRequest):
    """Suggest payments for an arbitrary set of balances."""
    return compute_optimal_settlements(payload.balances)


@router.get("/groups/{group_id}/balances", response_model=List[Balance])
async def get_group_balances(group_id: str, db = Depends(get_db)):
    """Net balance of every group member."""
    summary = await SettlementService.get_group_summary(db, group_id)
    if summary is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return summary.balances


@router.get("/groups/{group_id}/settlements", response_model=GroupSummary)
async def get_group_settlements(group_id: str, db = Depends(get_db)):
    """Balances plus the suggested payments that settle the group."""
    summary = await SettlementService.get_group_summary(db, group_id)
    if summary is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return summary
