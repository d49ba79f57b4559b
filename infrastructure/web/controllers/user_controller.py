from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.use_cases.user_use_cases import list_users, list_user_choices, get_user, toggle_status, toggle_role
from infrastructure.db.sqlite import SQLiteUserRepository
from infrastructure.web.dependencies import get_user_repo, get_current_session
from infrastructure.web.schemas import UserResponse, user_response


router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(get_current_session)])


class UserChoice(BaseModel):
    id: int
    username: str
    email: str

class UserActionResponse(BaseModel):
    message: str
    user: UserResponse


@router.get("", response_model=List[UserResponse])
def get_users(repo: SQLiteUserRepository = Depends(get_user_repo)):
    return [user_response(u) for u in list_users(repo)]

# для формы пополнения: id, имя, email по алфавиту
@router.get("/choices", response_model=List[UserChoice])
def get_user_choices(repo: SQLiteUserRepository = Depends(get_user_repo)):
    return [UserChoice(id=i, username=u, email=e) for i, u, e in list_user_choices(repo)]

@router.get("/{user_id}", response_model=UserResponse)
def get_user_detail(user_id: int, repo: SQLiteUserRepository = Depends(get_user_repo)):
    return user_response(get_user(repo, user_id))

@router.post("/{user_id}/toggle-status", response_model=UserActionResponse)
def post_toggle_status(user_id: int, repo: SQLiteUserRepository = Depends(get_user_repo)):
    updated = toggle_status(repo, user_id)
    message = "User blocked" if updated.status == "blocked" else "User unblocked"
    return UserActionResponse(message=message, user=user_response(updated))

@router.post("/{user_id}/toggle-role", response_model=UserActionResponse)
def post_toggle_role(user_id: int, repo: SQLiteUserRepository = Depends(get_user_repo)):
    updated = toggle_role(repo, user_id)
    return UserActionResponse(message=f"User role changed to {updated.role}", user=user_response(updated))
