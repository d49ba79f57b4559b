from dataclasses import dataclass
from typing import Optional


@dataclass
class Post:
    id: Optional[int]
    user_id: int
    content: str
    image_url: Optional[str] = None
    likes_count: int = 0
    comments_count: int = 0
    created_at: str = ""
