# picstash/schemas/search_history.py
from pydantic import BaseModel
from datetime import datetime


class SearchHistoryResponse(BaseModel):
    """One logged tag search"""
    query: str
    timestamp: datetime

    class Config:
        from_attributes = True
