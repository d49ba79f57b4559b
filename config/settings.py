import os
from dataclasses import dataclass, field
from typing import List


DEFAULT_BLOCKED_WORDS = "anjing,babi,bangsat,bodoh,tolol,goblok,idiot,sial"


def _split_csv(value: str) -> List[str]:
    return [item.strip().lower() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-change-me")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
    DB_PATH: str = os.getenv("DB_PATH", "./arvinmatch.db")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR: str = os.getenv("LOG_DIR", "")

    # первичный оператор, создаётся при старте если задан
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "")

    BLOCKED_WORDS: List[str] = field(
        default_factory=lambda: _split_csv(os.getenv("BLOCKED_WORDS", DEFAULT_BLOCKED_WORDS))
    )
    CORS_ORIGINS: List[str] = field(
        default_factory=lambda: [
            o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()
        ]
    )

settings = Settings()
