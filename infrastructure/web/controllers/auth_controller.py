from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from loguru import logger
from pydantic import BaseModel, EmailStr

from core.entities.session import AdminSession
from core.use_cases.auth_use_cases import authenticate_operator
from infrastructure.db.sqlite_operators import SQLiteOperatorRepository
from infrastructure.web.dependencies import get_operator_repo, create_session_token, get_current_session
from infrastructure.web.schemas import Notice


router = APIRouter(prefix="", tags=["auth"])

basic_security = HTTPBasic()


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime

class SessionResponse(BaseModel):
    operator_id: int
    email: EmailStr
    issued_at: datetime
    expires_at: datetime


@router.post("/login", response_model=TokenResponse)
def login(
    credentials: HTTPBasicCredentials = Depends(basic_security),
    repo: SQLiteOperatorRepository = Depends(get_operator_repo),
):
    operator = authenticate_operator(repo, email=credentials.username, password=credentials.password)
    if not operator:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    token, session = create_session_token(operator)
    logger.info(f"Operator {operator.id} logged in, session until {session.expires_at.isoformat()}")
    return TokenResponse(access_token=token, expires_at=session.expires_at)

@router.get("/me", response_model=SessionResponse)
def get_session(session: AdminSession = Depends(get_current_session)):
    return SessionResponse(
        operator_id=session.operator_id,
        email=session.email,
        issued_at=session.issued_at,
        expires_at=session.expires_at,
    )

# токен без состояния: клиент забывает его, срок жизни ограничен exp
@router.post("/logout", response_model=Notice)
def logout(session: AdminSession = Depends(get_current_session)):
    logger.info(f"Operator {session.operator_id} logged out")
    return Notice(message="Logged out")
