from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.database import get_db
from app.crud import user as crud
from app.schemas.user import UserCreate, UserSignIn, UserResponse, AuthResponse
from app.services.auth import (
    authenticate_user,
    create_user_token,
    get_password_hash,
    get_current_user,
)
from app.models.user import User
import logging

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(user: UserCreate, db: Session = Depends(get_db)):
    if crud.get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already registered")

    db_user = crud.create_user(
        db,
        email=user.email,
        name=user.name,
        hashed_password=get_password_hash(user.password),
        role=user.role,
    )
    logger.info("User registered: %s (%s)", db_user.email, db_user.role.value)
    return {
        "token": create_user_token(db_user),
        "user": db_user,
        "message": "User created successfully",
    }


@router.post("/signin", response_model=AuthResponse)
def signin(credentials: UserSignIn, db: Session = Depends(get_db)):
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return {
        "token": create_user_token(user),
        "user": user,
        "message": "Login successful",
    }


@router.get("/me", response_model=UserResponse)
def read_users_me(current_user: User = Depends(get_current_user)):
    return current_user
