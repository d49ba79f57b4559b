from typing import List, Tuple

from loguru import logger

from core.entities.transaction import Transaction, ADMIN_TOP_UP, CREDIT_TYPES
from core.entities.user import User
from core.errors import RecordNotFound, ValidationFailure
from core.repositories.user_repository import UserRepository


ADMIN_TOP_UP_DESCRIPTION = "Manual top-up by admin"


def admin_top_up(repo: UserRepository, user_id: int, amount: int) -> Tuple[User, Transaction]:
    if user_id is None:
        raise ValidationFailure("Select a user")
    if amount is None or amount <= 0:
        raise ValidationFailure("Amount must be positive")
    user, tx = repo.credit_with_transaction(
        user_id=user_id,
        amount=int(amount),
        type=ADMIN_TOP_UP,
        status="completed",
        description=ADMIN_TOP_UP_DESCRIPTION,
    )
    logger.info(f"Admin top-up {amount} for user {user_id}, tx {tx.id}, balance now {user.balance}")
    return user, tx


def cancel_transaction(repo: UserRepository, tx_id: int) -> Transaction:
    """Удаляет только запись транзакции; баланс пользователя не откатывается."""
    tx = repo.get_transaction(tx_id)
    if tx is None:
        raise RecordNotFound("Transaction not found")
    repo.delete_transaction(tx_id)
    if tx.type in CREDIT_TYPES and tx.status == "completed":
        logger.warning(
            f"Transaction {tx_id} ({tx.type}, {tx.amount}) cancelled; "
            f"balance of user {tx.user_id} was not reversed"
        )
    else:
        logger.info(f"Transaction {tx_id} cancelled")
    return tx


def list_transactions(repo: UserRepository) -> List[Transaction]:
    return repo.list_transactions()
