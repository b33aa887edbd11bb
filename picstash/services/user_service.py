# picstash/services/user_service.py
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from picstash.core.exceptions import ConflictError, InternalError, ValidationError
from picstash.core.validation import is_email_valid, is_request_body_valid
from picstash.models.user import User
from picstash.schemas.user import UserCreate


def does_user_exist(db: Session, email: str) -> bool:
    """Is the email already registered"""
    return db.query(User).filter(User.email == email).first() is not None


def register_user(db: Session, data: UserCreate) -> User:
    """
    Register a user.
    Check order: required fields, duplicate email, email format.
    """

    if not is_request_body_valid(data.username, data.email):
        raise ValidationError("Username and Email is required.")

    try:
        exists = does_user_exist(db, data.email)
    except SQLAlchemyError as e:
        logger.error(f"User lookup failed: {e}")
        raise InternalError("Internal server error", str(e))

    if exists:
        raise ConflictError("User already exists")

    if not is_email_valid(data.email):
        raise ValidationError("Please give valid email.")

    try:
        new_user = User(username=data.username, email=data.email)
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"User creation failed: {e}")
        raise InternalError("Internal server error", str(e))

    logger.info(f"User created: {new_user.id} ({new_user.email})")
    return new_user
