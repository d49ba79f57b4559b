from dataclasses import dataclass
from typing import Optional


@dataclass
class Comment:
    id: Optional[int]
    user_id: int
    post_id: int
    content: str
    status: str = "active"
    created_at: str = ""
