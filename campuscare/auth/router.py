import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from campuscare.auth.schemas import RegisterRequest, LoginRequest, TokenResponse, UserResponse
from campuscare.auth.auth import (
    get_db,
    hash_password,
    verify_password,
    create_access_token,
    get_current_user,
)
from campuscare.db.models import User
from campuscare.db.repository import UserRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

@router.post("/register", response_model=UserResponse)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    users = UserRepository(db)
    if users.get_by_username(req.username):
        raise HTTPException(status_code=400, detail="Username already exists")

    user = users.create(
        username = req.username,
        email = req.email,
        password_hash = hash_password(req.password),
    )
    logger.info("registered user %s", user.id)
    return user

@router.post("/login", response_model=TokenResponse)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = UserRepository(db).get_by_username(req.username)
    if not user or not verify_password(req.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": user.id})
    return TokenResponse(access_token=token)

@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
