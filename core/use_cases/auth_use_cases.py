from typing import Optional

from loguru import logger
from passlib.context import CryptContext

from core.entities.operator import Operator
from core.errors import ValidationFailure
from core.repositories.operator_repository import OperatorRepository


pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)

def register_operator(repo: OperatorRepository, email: str, password: str) -> Operator:
    email = email.strip().lower()
    if not email or not password:
        raise ValidationFailure("Email and password are required")
    existing = repo.get_by_email(email)
    if existing is not None:
        raise ValidationFailure("Operator with this email already exists")
    operator = repo.create_operator(email=email, password_hash=get_password_hash(password))
    logger.info(f"Operator {operator.id} registered")
    return operator

def ensure_operator(repo: OperatorRepository, email: str, password: str) -> Optional[Operator]:
    """Создаёт первичного оператора из окружения, если его ещё нет"""
    if not email or not password:
        return None
    existing = repo.get_by_email(email.strip().lower())
    if existing is not None:
        return existing
    return register_operator(repo, email, password)

def authenticate_operator(repo: OperatorRepository, email: str, password: str) -> Optional[Operator]:
    email = email.strip().lower()
    operator = repo.get_by_email(email)
    if not operator:
        logger.warning(f"Login attempt for unknown operator {email}")
        return None
    if not verify_password(password, operator.password_hash):
        logger.warning(f"Wrong password for operator {operator.id}")
        return None
    return operator
