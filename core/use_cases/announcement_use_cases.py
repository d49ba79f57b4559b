from typing import List

from loguru import logger

from core.entities.announcement import Announcement, ANNOUNCEMENT_TYPES
from core.errors import ValidationFailure
from core.repositories.catalog_repository import AnnouncementRepository


def list_announcements(repo: AnnouncementRepository) -> List[Announcement]:
    return repo.list_announcements()


def create_announcement(repo: AnnouncementRepository, title: str, content: str,
                        type: str = "general") -> Announcement:
    title = (title or "").strip()
    content = (content or "").strip()
    if not title or not content:
        raise ValidationFailure("Announcement title and content are required")
    if type not in ANNOUNCEMENT_TYPES:
        raise ValidationFailure(f"Unknown announcement type '{type}'")
    announcement = repo.create_announcement(title=title, content=content, type=type, is_active=True)
    logger.info(f"Announcement {announcement.id} published ({type})")
    return announcement


def toggle_announcement(repo: AnnouncementRepository, announcement_id: int) -> Announcement:
    current = repo.get_announcement(announcement_id)
    updated = repo.set_active(announcement_id, not current.is_active)
    logger.info(f"Announcement {announcement_id} is_active -> {updated.is_active}")
    return updated
