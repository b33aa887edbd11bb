# picstash/schemas/photo.py
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class PhotoCreate(CamelModel):
    """Save photo request"""
    image_url: Optional[str] = None
    description: Optional[str] = None
    alt_description: Optional[str] = None
    tags: Optional[List[str]] = None
    user_id: Optional[int] = None


class TagsAppend(CamelModel):
    """Append tags request"""
    tags: Optional[List[str]] = None


class RemotePhoto(CamelModel):
    """Unsplash search result"""
    image_url: str
    alt_description: Optional[str] = None
    description: Optional[str] = None


class TagName(CamelModel):
    name: str


class PhotoResponse(CamelModel):
    """Saved photo response"""
    id: int
    image_url: str
    description: Optional[str] = None
    alt_description: Optional[str] = None
    user_id: Optional[int] = None
    date_saved: datetime


class PhotoWithTagsResponse(PhotoResponse):
    """Saved photo with its tag names"""
    tags: List[TagName] = []


class MessageResponse(BaseModel):
    message: str
