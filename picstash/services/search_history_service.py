# picstash/services/search_history_service.py
from typing import List, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from picstash.core.exceptions import InternalError, NotFoundError, ValidationError
from picstash.core.validation import is_number
from picstash.models.search_history import SearchHistory
from picstash.models.user import User
from picstash.schemas.search_history import SearchHistoryResponse


def record_search(db: Session, user_id: str, query: str) -> Optional[SearchHistory]:
    """Log a tag search for a known user; unknown ids are skipped"""
    try:
        user_pk = int(user_id)
    except ValueError:
        logger.debug(f"Search history skipped, user id is not an integer: {user_id!r}")
        return None

    if db.get(User, user_pk) is None:
        logger.debug(f"Search history skipped, unknown user {user_pk}")
        return None

    entry = SearchHistory(user_id=user_pk, query=query)
    db.add(entry)
    db.commit()

    logger.info(f"Search history recorded: user {user_pk} -> '{query}'")
    return entry


def get_search_history(db: Session, user_id: Optional[str]) -> List[SearchHistoryResponse]:
    """All logged searches of a user (query and timestamp only)"""

    if not is_number(user_id):
        raise ValidationError("User Id is required. And it should be a number.")

    value = float(user_id)
    user_pk = int(value) if value.is_integer() else value

    try:
        rows = db.query(SearchHistory.query, SearchHistory.timestamp)\
            .filter(SearchHistory.user_id == user_pk)\
            .order_by(SearchHistory.id)\
            .all()
    except SQLAlchemyError as e:
        logger.error(f"Search history lookup failed for user {user_id}: {e}")
        raise InternalError("Internal server error", str(e))

    if not rows:
        raise NotFoundError("No search history found for the user.")

    return [SearchHistoryResponse(query=row.query, timestamp=row.timestamp) for row in rows]
