# picstash/services/photo_service.py
from typing import List, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from picstash.core.exceptions import InternalError, NotFoundError, ValidationError
from picstash.core.validation import (
    MAX_TAGS_PER_PHOTO,
    are_tags_empty,
    are_tags_valid,
    is_image_url_valid,
    parse_photo_id,
)
from picstash.models.photo import Photo
from picstash.models.tag import Tag
from picstash.schemas.photo import PhotoCreate, TagsAppend
from picstash.services import search_history_service

TAGS_LIMIT_MESSAGE = "Tags must be 5 or less and does not have more than 20 characters."
SORT_ORDERS = ("ASC", "DESC")


def get_photo_with_tags(db: Session, photo_id: int) -> Photo | None:
    """Photo with its tags loaded"""
    return db.query(Photo)\
        .options(selectinload(Photo.tags))\
        .filter(Photo.id == photo_id)\
        .first()


def save_photo(db: Session, data: PhotoCreate) -> Photo:
    """Save a photo and its tags in one transaction"""

    if not data.image_url or not is_image_url_valid(data.image_url):
        raise ValidationError("Invalid Image Url.")

    tags = data.tags or []
    if not are_tags_valid(tags):
        raise ValidationError(TAGS_LIMIT_MESSAGE)

    try:
        photo = Photo(
            image_url=data.image_url,
            description=data.description,
            alt_description=data.alt_description,
            user_id=data.user_id
        )
        photo.tags = [Tag(name=name) for name in tags]
        db.add(photo)
        db.commit()
        db.refresh(photo)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Photo save failed: {e}")
        raise InternalError("Error while saving photo.", str(e))

    logger.info(f"Photo saved: {photo.id} with {len(tags)} tags")
    return photo


def add_tags(db: Session, photo_id: str, data: TagsAppend) -> None:
    """Append tags to a saved photo, never going over 5 in total"""

    pk = parse_photo_id(photo_id)

    try:
        photo = get_photo_with_tags(db, pk) if pk is not None else None
    except SQLAlchemyError as e:
        logger.error(f"Photo lookup failed for {photo_id}: {e}")
        raise InternalError("Error while adding tags", str(e))

    if not photo:
        raise NotFoundError("Photo not found.")

    tags = data.tags or []
    if are_tags_empty(tags):
        raise ValidationError("Tags must be non-empty and have non-empty strings.")

    if not are_tags_valid(tags):
        raise ValidationError(TAGS_LIMIT_MESSAGE)

    existing_count = len(photo.tags)
    logger.debug(f"Photo {pk} has {existing_count} tags before append")

    if existing_count + len(tags) > MAX_TAGS_PER_PHOTO:
        raise ValidationError("Tags must be 5 or less.")

    try:
        db.add_all([Tag(name=name, photo_id=pk) for name in tags])
        db.commit()
        updated_count = db.query(Tag).filter(Tag.photo_id == pk).count()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Adding tags to photo {pk} failed: {e}")
        raise InternalError("Error while adding tags", str(e))

    logger.debug(f"Photo {pk} has {updated_count} tags after append")


def get_photo(db: Session, photo_id: str) -> Photo:
    """Saved photo by id"""

    pk = parse_photo_id(photo_id)
    if pk is None:
        raise ValidationError("Invalid photo ID.")

    try:
        photo = db.query(Photo).filter(Photo.id == pk).first()
    except SQLAlchemyError as e:
        # no detail for this one
        logger.error(f"Photo lookup failed for {pk}: {e}")
        raise InternalError("Internal server error")

    if not photo:
        raise NotFoundError("Photo not found.")

    return photo


def search_by_tag(
    db: Session,
    query_tag: Optional[str],
    sort: str = "ASC",
    user_id: Optional[str] = None
) -> List[Photo]:
    """Saved photos carrying the tag, ordered by save date"""

    if not query_tag:
        raise ValidationError("A string tag is required.")

    # history is logged even when the sort value is rejected below
    if user_id:
        try:
            search_history_service.record_search(db, user_id, query_tag)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Recording search history failed: {e}")
            raise InternalError("Internal server error")

    if sort not in SORT_ORDERS:
        raise ValidationError("Invalid sort parameter.")

    try:
        photo_ids = [
            row.photo_id for row in db.query(Tag.photo_id)
            .filter(Tag.name == query_tag)
            .distinct()
            .all()
        ]

        if photo_ids:
            if sort.upper() == "DESC":
                order = (Photo.date_saved.desc(), Photo.id.desc())
            else:
                order = (Photo.date_saved.asc(), Photo.id.asc())

            photos = db.query(Photo)\
                .options(selectinload(Photo.tags))\
                .filter(Photo.id.in_(photo_ids))\
                .order_by(*order)\
                .all()
    except SQLAlchemyError as e:
        logger.error(f"Tag search failed for '{query_tag}': {e}")
        raise InternalError("Internal server error")

    if not photo_ids:
        raise NotFoundError("Tag not found.")

    return photos
