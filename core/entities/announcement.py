from dataclasses import dataclass
from typing import Optional

ANNOUNCEMENT_TYPES = ("general", "maintenance", "update", "promotion", "warning")


@dataclass
class Announcement:
    id: Optional[int]
    title: str
    content: str
    type: str = "general"
    is_active: bool = True
    created_at: str = ""
