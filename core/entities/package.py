from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class Package:
    id: Optional[int]
    name: str
    description: str
    price: int
    duration_days: int
    features: List[str] = field(default_factory=list)
    is_active: bool = True
    created_at: str = ""
