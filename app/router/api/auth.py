from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.model.users import User
from app.router.api.logics.auth_logic import login_logic, register_logic
from app.router.dependencies import get_app_settings, get_current_user
from app.schema.auth_schema import AuthOut, LoginRequest, UserRegister
from app.schema.base_schema import MessageOut
from app.schema.user_schema import UserOut


router = APIRouter()


@router.post("/register", response_model=AuthOut, status_code=status.HTTP_201_CREATED)
def register(request: UserRegister,
             db: Session = Depends(get_db),
             settings: Settings = Depends(get_app_settings)):
    """Register a new user and return an access token for them.

    Args:
        request (UserRegister): email, password, firstName, lastName and optional profile fields
        db (Session): Database session

    Raises:
        HTTPException: 400 when the email has already been registered

    Returns:
        AuthOut: access token and the created user
    """
    return register_logic(db, request, settings)


@router.post("/login", response_model=AuthOut, status_code=status.HTTP_200_OK)
def login(request: LoginRequest,
          db: Session = Depends(get_db),
          settings: Settings = Depends(get_app_settings)):
    """Login with email and password.

    Args:
        request (LoginRequest): email and password
        db (Session): Database session

    Raises:
        HTTPException: 401 when the credentials are incorrect

    Returns:
        AuthOut: access token and the user
    """
    return login_logic(db, request, settings)


@router.get("/me", response_model=UserOut, status_code=status.HTTP_200_OK)
def me(user: User = Depends(get_current_user)):
    """Return the user the bearer token belongs to."""
    return UserOut.model_validate(user)


@router.post("/logout", response_model=MessageOut, status_code=status.HTTP_200_OK)
def logout(user: User = Depends(get_current_user)):
    # tokens are stateless, the client drops its copy
    return MessageOut(message="Logout successful")
