from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from core.use_cases.ledger_use_cases import admin_top_up, cancel_transaction, list_transactions
from infrastructure.db.sqlite import SQLiteUserRepository
from infrastructure.web.dependencies import get_user_repo, get_current_session
from infrastructure.web.schemas import Notice, TransactionItem, UserResponse, transaction_item, user_response


router = APIRouter(prefix="/transactions", tags=["transactions"], dependencies=[Depends(get_current_session)])


class TopUpRequest(BaseModel):
    user_id: int
    amount: int = Field(..., description="Сумма в рупиях, > 0")

class TopUpResponse(BaseModel):
    message: str
    user: UserResponse
    transaction: TransactionItem


@router.get("", response_model=List[TransactionItem])
def get_transactions(repo: SQLiteUserRepository = Depends(get_user_repo)):
    return [transaction_item(tx) for tx in list_transactions(repo)]

@router.post("/top-up", response_model=TopUpResponse, status_code=201)
def post_top_up(payload: TopUpRequest, repo: SQLiteUserRepository = Depends(get_user_repo)):
    user, tx = admin_top_up(repo, payload.user_id, payload.amount)
    return TopUpResponse(
        message=f"Balance increased by Rp {payload.amount:,}",
        user=user_response(user),
        transaction=transaction_item(tx),
    )

@router.delete("/{tx_id}", response_model=Notice)
def delete_transaction(tx_id: int, repo: SQLiteUserRepository = Depends(get_user_repo)):
    cancel_transaction(repo, tx_id)
    return Notice(message="Transaction cancelled")
