from typing import Tuple

from fastapi import Depends, Query, Request, status, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.auth_util import decode_access_token
from app.config import Settings
from app.database import get_db
from app.log import get_logger
from app.model.users import User
from app.repository import UserRepository
from app.schema.auth_schema import TokenPayload

log = get_logger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login", auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pagination_params(
    page: int = Query(1, ge=1), limit: int = Query(10, gt=0, le=100)
) -> Tuple[int, int]:
    return page, limit


def get_token(
    token: str = Depends(oauth2_scheme),
    settings: Settings = Depends(get_app_settings),
) -> TokenPayload:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        payload = decode_access_token(token, settings)
        token_data = TokenPayload(**payload)
    except (JWTError, ValidationError) as e:
        log.info("Rejected access token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e
    return token_data


def get_current_user(
    db: Session = Depends(get_db), token: TokenPayload = Depends(get_token)
) -> User:
    user = UserRepository(db).get(token.sub)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
