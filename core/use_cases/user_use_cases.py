from typing import List, Tuple

from loguru import logger

from core.entities.user import User, ROLES, STATUSES
from core.errors import RecordNotFound, ValidationFailure
from core.repositories.user_repository import UserRepository


def _flip(value: str, pair: Tuple[str, str], field: str) -> str:
    if value not in pair:
        raise ValidationFailure(f"Unknown {field} '{value}'")
    return pair[1] if value == pair[0] else pair[0]


def get_user(repo: UserRepository, user_id: int) -> User:
    user = repo.get_by_id(user_id)
    if user is None:
        raise RecordNotFound("User not found")
    return user


def list_users(repo: UserRepository) -> List[User]:
    return repo.list_users()


def list_user_choices(repo: UserRepository) -> List[Tuple[int, str, str]]:
    return repo.list_user_choices()


def toggle_status(repo: UserRepository, user_id: int) -> User:
    user = get_user(repo, user_id)
    new_status = _flip(user.status, STATUSES, "status")
    updated = repo.update_status(user_id, new_status)
    logger.info(f"User {user_id} status {user.status} -> {new_status}")
    return updated


def toggle_role(repo: UserRepository, user_id: int) -> User:
    user = get_user(repo, user_id)
    new_role = _flip(user.role, ROLES, "role")
    updated = repo.update_role(user_id, new_role)
    logger.info(f"User {user_id} role {user.role} -> {new_role}")
    return updated
