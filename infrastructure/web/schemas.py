from dataclasses import asdict
from typing import Optional

from pydantic import BaseModel

from core.entities.transaction import Transaction
from core.entities.user import User


# текст уведомления для оператора после действия
class Notice(BaseModel):
    message: str

class UserResponse(BaseModel):
    id: int
    username: str
    email: str
    role: str
    status: str
    balance: int
    is_premium: bool
    premium_until: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    created_at: str
    updated_at: str

class TransactionItem(BaseModel):
    id: int
    user_id: int
    type: str
    amount: int
    status: str
    description: Optional[str] = None
    created_at: str

def user_response(user: User) -> UserResponse:
    return UserResponse(**asdict(user))

def transaction_item(tx: Transaction) -> TransactionItem:
    return TransactionItem(**asdict(tx))
