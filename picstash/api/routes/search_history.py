# picstash/api/routes/search_history.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from picstash.database import get_db
from picstash.schemas.search_history import SearchHistoryResponse
from picstash.services import search_history_service

router = APIRouter(prefix="/api/search-history", tags=["search history"])


@router.get("", response_model=List[SearchHistoryResponse])
def get_search_history(
    user_id: Optional[str] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    """Tag searches logged for a user"""
    return search_history_service.get_search_history(db, user_id)
