# picstash/core/validation.py
import math
import re
from typing import Optional

IMAGE_URL_PREFIX = "https://images.unsplash.com/"
MAX_TAGS_PER_PHOTO = 5
MAX_TAG_LENGTH = 20

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_request_body_valid(username: Optional[str], email: Optional[str]) -> bool:
    """Both username and email are required"""
    return bool(username) and bool(email)


def is_email_valid(email: str) -> bool:
    """local@domain.tld shape"""
    return EMAIL_REGEX.match(email) is not None


def validate_query_term(query_term: Optional[str]) -> Optional[dict]:
    """Return an error payload when the search term is missing"""
    if not query_term:
        return {"message": "Query term is required."}
    return None


def is_image_url_valid(image_url: str) -> bool:
    return image_url.startswith(IMAGE_URL_PREFIX)


def are_tags_valid(tags: list[str]) -> bool:
    """At most 5 tags, none longer than 20 characters"""
    return len(tags) <= MAX_TAGS_PER_PHOTO and all(len(tag) <= MAX_TAG_LENGTH for tag in tags)


def are_tags_empty(tags: list[str]) -> bool:
    """True for an empty list or a list holding an empty string"""
    return len(tags) == 0 or not all(len(tag) > 0 for tag in tags)


def parse_photo_id(raw: str) -> Optional[int]:
    """Positive integer id, or None"""
    try:
        photo_id = int(raw)
    except (TypeError, ValueError):
        return None
    if photo_id <= 0:
        return None
    return photo_id


def is_number(raw: Optional[str]) -> bool:
    if not raw:
        return False
    try:
        value = float(raw)
    except ValueError:
        return False
    return math.isfinite(value)
