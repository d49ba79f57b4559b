import sqlite3
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from fastapi import Depends, HTTPException, Header, status
from jose import jwt, JWTError
from loguru import logger

from config.settings import settings
from core.entities.operator import Operator
from core.entities.session import AdminSession
from infrastructure.db.sqlite import connect, SQLiteUserRepository
from infrastructure.db.sqlite_content import SQLiteContentRepository
from infrastructure.db.sqlite_catalog import (
    SQLitePackageRepository,
    SQLiteAnnouncementRepository,
    SQLiteSettingsRepository,
)
from infrastructure.db.sqlite_operators import SQLiteOperatorRepository


def get_db():
    conn = connect(settings.DB_PATH)
    try:
        yield conn
    finally:
        conn.close()

def get_user_repo(conn: sqlite3.Connection = Depends(get_db)) -> SQLiteUserRepository:
    return SQLiteUserRepository(conn)

def get_content_repo(conn: sqlite3.Connection = Depends(get_db)) -> SQLiteContentRepository:
    return SQLiteContentRepository(conn)

def get_package_repo(conn: sqlite3.Connection = Depends(get_db)) -> SQLitePackageRepository:
    return SQLitePackageRepository(conn)

def get_announcement_repo(conn: sqlite3.Connection = Depends(get_db)) -> SQLiteAnnouncementRepository:
    return SQLiteAnnouncementRepository(conn)

def get_settings_repo(conn: sqlite3.Connection = Depends(get_db)) -> SQLiteSettingsRepository:
    return SQLiteSettingsRepository(conn)

def get_operator_repo(conn: sqlite3.Connection = Depends(get_db)) -> SQLiteOperatorRepository:
    return SQLiteOperatorRepository(conn)

def get_blocked_words() -> Tuple[str, ...]:
    return tuple(settings.BLOCKED_WORDS)


# jwt сессия оператора: явный срок жизни вместо флага "вошёл"
def create_session_token(operator: Operator, expires_delta: Optional[timedelta] = None) -> Tuple[str, AdminSession]:
    issued_at = datetime.now(timezone.utc)
    expires_at = issued_at + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    session = AdminSession(
        operator_id=operator.id,
        email=operator.email,
        issued_at=issued_at,
        expires_at=expires_at,
    )
    to_encode = {
        "sub": str(operator.id),
        "email": operator.email,
        "iat": int(issued_at.timestamp()),
        "exp": expires_at,
    }
    token = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return token, session

def get_bearer_token(authorization: Optional[str] = Header(None)) -> str:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return authorization.split(" ", 1)[1]

def get_current_session(
    token: str = Depends(get_bearer_token),
    repo: SQLiteOperatorRepository = Depends(get_operator_repo),
) -> AdminSession:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        sub = payload.get("sub")
        if sub is None:
            raise credentials_exception
        session = AdminSession(
            operator_id=int(sub),
            email=payload.get("email", ""),
            issued_at=datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc),
            expires_at=datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc),
        )
    except (JWTError, KeyError, ValueError):
        raise credentials_exception

    if session.is_expired():
        logger.info(f"Expired session for operator {session.operator_id}")
        raise credentials_exception
    if repo.get_by_id(session.operator_id) is None:
        raise credentials_exception
    return session
