# picstash/schemas/user.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional


class UserCreate(BaseModel):
    """Registration request (fields checked by the service, not here)"""
    username: Optional[str] = None
    email: Optional[str] = None


class UserResponse(BaseModel):
    """User response"""
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class UserCreateResponse(BaseModel):
    """Registration response"""
    message: str
    new_user: UserResponse

    class Config:
        alias_generator = to_camel
        populate_by_name = True
