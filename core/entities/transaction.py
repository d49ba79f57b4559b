from dataclasses import dataclass
from typing import Optional

ADMIN_TOP_UP = "admin_top_up"
CREDIT_TYPES = ("top_up", ADMIN_TOP_UP)


@dataclass
class Transaction:
    id: Optional[int]
    user_id: int
    type: str               # "top_up" | "admin_top_up" | "send" ...
    amount: int             # всегда > 0
    status: str             # "pending" | "completed" ...
    description: Optional[str]
    created_at: str
