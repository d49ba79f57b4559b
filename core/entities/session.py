from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


@dataclass
class AdminSession:
    """Сессия оператора: кто вошёл и до какого момента сессия действительна"""
    operator_id: int
    email: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at
