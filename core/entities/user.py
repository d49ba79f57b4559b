from dataclasses import dataclass
from typing import Optional


ROLES = ("user", "premium")
STATUSES = ("active", "blocked")


@dataclass
class User:
    id: Optional[int]
    username: str
    email: str
    role: str = "user"         # user | premium
    status: str = "active"     # active | blocked
    balance: int = 0           # рупии, не может быть < 0
    is_premium: bool = False
    premium_until: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    bio: Optional[str] = None
    created_at: str = ""
    updated_at: str = ""
