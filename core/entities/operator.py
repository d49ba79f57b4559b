from dataclasses import dataclass
from typing import Optional


@dataclass
class Operator:
    id: Optional[int]
    email: str
    password_hash: str
    created_at: str
