# picstash/api/routes/users.py
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from picstash.database import get_db
from picstash.schemas.user import UserCreate, UserCreateResponse, UserResponse
from picstash.services import user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserCreateResponse, status_code=status.HTTP_201_CREATED)
def create_new_user(
    user_data: Optional[UserCreate] = None,
    db: Session = Depends(get_db)
):
    """Register a user"""
    new_user = user_service.register_user(db, user_data or UserCreate())

    return UserCreateResponse(
        message="user created successfully.",
        new_user=UserResponse.model_validate(new_user)
    )
