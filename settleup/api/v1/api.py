from fastapi import APIRouter
from settleup.api.v1.endpoints import groups, expenses, settlements, reminders

api_router = APIRouter()

api_router.include_router(groups.router, prefix="/groups", tags=["groups"])
api_router.include_router(expenses.router, prefix="/groups", tags=["expenses"])
api_router.include_router(reminders.router, prefix="/groups", tags=["reminders"])
api_router.include_router(settlements.router, tags=["settlements"])
