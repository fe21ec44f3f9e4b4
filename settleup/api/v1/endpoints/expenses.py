from typing import List
from fastapi import APIRouter, HTTPException, Depends, status

from settleup.db.mongo import get_db
from settleup.models.expense import Expense
from settleup.schemas.expense import ExpenseCreate, ExpenseResponse, ExpenseUpdate, SplitBase
from settleup.services.expense_service import ExpenseService
from settleup.utils.ledger_validation import LedgerValidationError

router = APIRouter()


def to_expense_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=str(expense.id),
        group_id=str(expense.group_id),
        description=expense.description,
        amount=expense.amount,
        paid_by=expense.paid_by,
        category=expense.category,
        expense_date=expense.expense_date,
        splits=[SplitBase(user_id=s.user_id, amount=s.amount) for s in expense.splits],
        created_at=expense.created_at
    )


@router.post("/{group_id}/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def create_expense(group_id: str, expense_in: ExpenseCreate, db = Depends(get_db)):
    """Add a shared expense. Without explicit splits the amount is split equally."""
    try:
        expense = await ExpenseService.create(db, group_id, expense_in)
    except LedgerValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )
    if expense is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return to_expense_response(expense)


@router.get("/{group_id}/expenses", response_model=List[ExpenseResponse])
async def list_expenses(group_id: str, db = Depends(get_db)):
    expenses = await ExpenseService.list_for_group(db, group_id)
    if expenses is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Group not found"
        )
    return [to_expense_response(expense) for expense in expenses]


@router.put("/{group_id}/expenses/{expense_id}", response_model=ExpenseResponse)
async def update_expense(group_id: str, expense_id: str, expense_in: ExpenseUpdate, db = Depends(get_db)):
    """Replace an expense and its splits."""
    try:
        expense = await ExpenseService.update(db, group_id, expense_id, expense_in)
    except LedgerValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc)
        )
    if expense is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
    return to_expense_response(expense)


@router.delete("/{group_id}/expenses/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_expense(group_id: str, expense_id: str, db = Depends(get_db)):
    if not await ExpenseService.delete(db, group_id, expense_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )
