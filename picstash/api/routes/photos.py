# picstash/api/routes/photos.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from picstash.api.deps import get_unsplash_client
from picstash.database import get_db
from picstash.schemas.photo import (
    MessageResponse,
    PhotoCreate,
    PhotoResponse,
    PhotoWithTagsResponse,
    RemotePhoto,
    TagsAppend,
)
from picstash.services import photo_service, unsplash_service
from picstash.services.unsplash_service import UnsplashClient

router = APIRouter(prefix="/api/photos", tags=["photos"])

# /search and /tag/search are declared before /{photo_id}


@router.get("/search", response_model=List[RemotePhoto])
async def search_images(
    query_term: Optional[str] = Query(None, alias="queryTerm"),
    client: UnsplashClient = Depends(get_unsplash_client)
):
    """Search Unsplash by free text"""
    return await unsplash_service.search_images(client, query_term)


@router.get("/tag/search", response_model=List[PhotoWithTagsResponse])
def search_by_tag(
    query_tag: Optional[str] = Query(None, alias="queryTag"),
    sort: str = Query("ASC"),
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    """Saved photos by tag, sorted by save date"""
    return photo_service.search_by_tag(db, query_tag, sort, user_id)


@router.post("", response_model=MessageResponse)
def save_photo(
    data: Optional[PhotoCreate] = None,
    db: Session = Depends(get_db)
):
    """Save a photo with its tags"""
    photo_service.save_photo(db, data or PhotoCreate())
    return MessageResponse(message="Photo saved successfully.")


@router.post("/{photo_id}/tags", response_model=MessageResponse)
def add_tags_by_photo_id(
    photo_id: str,
    data: Optional[TagsAppend] = None,
    db: Session = Depends(get_db)
):
    """Append tags to a saved photo"""
    photo_service.add_tags(db, photo_id, data or TagsAppend())
    return MessageResponse(message="Tags added successfully.")


@router.get("/{photo_id}", response_model=PhotoResponse)
def get_photo(photo_id: str, db: Session = Depends(get_db)):
    """Saved photo by id"""
    return photo_service.get_photo(db, photo_id)
