from pydantic import BaseModel, EmailStr
from datetime import datetime

from app.models.user import UserRole


class UserBase(BaseModel):
    name: str
    email: EmailStr


class UserCreate(UserBase):
    password: str
    role: UserRole = UserRole.PLAYER


class UserSignIn(BaseModel):
    email: EmailStr
    password: str


class UserInDB(UserBase):
    id: int
    role: UserRole
    created_at: datetime

    class Config:
        from_attributes = True


class UserResponse(UserInDB):
    pass


class AuthResponse(BaseModel):
    token: str
    user: UserResponse
    message: str
