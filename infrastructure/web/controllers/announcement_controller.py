from dataclasses import asdict
from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from core.use_cases.announcement_use_cases import list_announcements, create_announcement, toggle_announcement
from infrastructure.db.sqlite_catalog import SQLiteAnnouncementRepository
from infrastructure.web.dependencies import get_announcement_repo, get_current_session


router = APIRouter(prefix="/announcements", tags=["announcements"], dependencies=[Depends(get_current_session)])


class AnnouncementRequest(BaseModel):
    title: str = ""
    content: str = ""
    type: str = "general"  # general | maintenance | update | promotion | warning

class AnnouncementItem(BaseModel):
    id: int
    title: str
    content: str
    type: str
    is_active: bool
    created_at: str


@router.get("", response_model=List[AnnouncementItem])
def get_announcements(repo: SQLiteAnnouncementRepository = Depends(get_announcement_repo)):
    return [AnnouncementItem(**asdict(a)) for a in list_announcements(repo)]

@router.post("", response_model=AnnouncementItem, status_code=201)
def post_announcement(payload: AnnouncementRequest, repo: SQLiteAnnouncementRepository = Depends(get_announcement_repo)):
    announcement = create_announcement(repo, title=payload.title, content=payload.content, type=payload.type)
    return AnnouncementItem(**asdict(announcement))

@router.post("/{announcement_id}/toggle", response_model=AnnouncementItem)
def post_toggle_announcement(announcement_id: int, repo: SQLiteAnnouncementRepository = Depends(get_announcement_repo)):
    return AnnouncementItem(**asdict(toggle_announcement(repo, announcement_id)))
