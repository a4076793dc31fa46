import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pawpost.api.schemas.schemas import RegisterRequest, LoginRequest, AuthResponse, UserResponse
from pawpost.core.database import get_db
from pawpost.core.errors import Unauthorized
from pawpost.core.security import hash_password, verify_password
from pawpost.stores.userStore import UserStore

router = APIRouter(tags=["Auth"])

logger = logging.getLogger("pawpost.auth")


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    hashed_pw = hash_password(body.password)
    new_user = UserStore(db).create(body.email, hashed_pw)
    logger.info("Registered user %s", new_user.id)
    return {"message": "User registered", "user": UserResponse.model_validate(new_user)}


@router.post("/login", response_model=AuthResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = UserStore(db).find_by_email(body.email)
    if not verify_password(body.password, user.password):
        raise Unauthorized(f"wrong password for user {user.id}")

    return {"message": "Login successful", "user": UserResponse.model_validate(user)}
