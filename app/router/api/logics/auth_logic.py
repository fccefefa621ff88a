from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.auth_util import create_access_token, get_password_hash, verify_password
from app.config import Settings
from app.log import get_logger
from app.model.users import User
from app.repository import UserRepository
from app.schema.auth_schema import AuthOut, LoginRequest, UserRegister
from app.schema.user_schema import UserOut

log = get_logger(__name__)


def _auth_response(user: User, settings: Settings) -> AuthOut:
    access_token = create_access_token(
        subject=user.id,
        email=user.email,
        first_name=user.first_name,
        settings=settings,
    )
    return AuthOut(access_token=access_token, user=UserOut.model_validate(user))


def register_logic(db: Session, request: UserRegister, settings: Settings) -> AuthOut:
    """
    Register a new user and sign them in.

    Raises:
        HTTPException: 400 when the email has already been registered.
    """
    users = UserRepository(db)
    if users.get_by_email(request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email has already been registered",
        )

    fields = request.model_dump(exclude={"password"})
    fields["hashed_password"] = get_password_hash(request.password)
    user = users.create(**fields)
    log.info("Registered user %s", user.id)
    return _auth_response(user, settings)


def login_logic(db: Session, request: LoginRequest, settings: Settings) -> AuthOut:
    """
    Verify credentials and issue an access token.

    Raises:
        HTTPException: 401 for an unknown email or a wrong password.
    """
    users = UserRepository(db)
    user = users.get_by_email(request.email)
    if not user or not verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    users.update(user, {"last_login_at": datetime.now(timezone.utc)})
    return _auth_response(user, settings)
