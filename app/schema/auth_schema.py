from datetime import date
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from app.model.users import EmploymentStatus
from app.schema.base_schema import CamelModel
from app.schema.user_schema import UserOut


class Token(BaseModel):
    """Bearer Access Token"""

    access_token: str
    token_type: str


class TokenPayload(BaseModel):
    """Payload for Bearer Access Token"""
    sub: str  # user id
    email: Optional[EmailStr] = None
    first_name: str
    exp: int
    iat: int


class AuthOut(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut


class UserRegister(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    date_of_birth: Optional[date] = None
    location: Optional[str] = None
    employment_status: EmploymentStatus = EmploymentStatus.seeking


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
