from dataclasses import asdict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.use_cases.stats_use_cases import compute_stats
from infrastructure.db.sqlite import SQLiteUserRepository
from infrastructure.db.sqlite_content import SQLiteContentRepository
from infrastructure.web.dependencies import get_user_repo, get_content_repo, get_current_session


router = APIRouter(prefix="/stats", tags=["stats"], dependencies=[Depends(get_current_session)])


class StatsResponse(BaseModel):
    total_users: int
    total_posts: int
    total_comments: int
    total_transactions: int
    total_revenue: int
    active_users: int
    premium_users: int
    blocked_users: int


@router.get("", response_model=StatsResponse)
def get_stats(
    users: SQLiteUserRepository = Depends(get_user_repo),
    content: SQLiteContentRepository = Depends(get_content_repo),
):
    return StatsResponse(**asdict(compute_stats(users, content)))
