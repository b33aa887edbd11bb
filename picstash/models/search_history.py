# picstash/models/search_history.py
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from picstash.database import Base
from picstash.models.photo import utc_now


class SearchHistory(Base):
    """Tag search log entry"""
    __tablename__ = "search_history"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    query = Column(String, nullable=False)
    timestamp = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    user = relationship("User", back_populates="search_history")

    def __repr__(self):
        return f"<SearchHistory {self.user_id} {self.query}>"
