from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.entities.admin_view import AdminView
from core.use_cases.navigation_use_cases import menu, navigate
from infrastructure.web.dependencies import get_current_session


router = APIRouter(prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(get_current_session)])


class MenuItem(BaseModel):
    view: str
    title: str
    description: str

class NavigateRequest(BaseModel):
    current: AdminView
    action: str  # login | open | back | logout
    target: Optional[AdminView] = None

class NavigateResponse(BaseModel):
    view: AdminView


@router.get("", response_model=List[MenuItem])
def get_menu():
    return [MenuItem(**item) for item in menu()]

@router.post("/navigate", response_model=NavigateResponse)
def post_navigate(payload: NavigateRequest):
    return NavigateResponse(view=navigate(payload.current, payload.action, payload.target))
