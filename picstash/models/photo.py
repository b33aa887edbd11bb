# picstash/models/photo.py
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from picstash.database import Base


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Photo(Base):
    """Saved photo model"""
    __tablename__ = "photos"

    id = Column(Integer, primary_key=True, index=True)
    image_url = Column(String, nullable=False)
    description = Column(String)
    alt_description = Column(String)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

    # Timestamps
    date_saved = Column(DateTime(timezone=True), default=utc_now, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="photos")
    tags = relationship("Tag", back_populates="photo", order_by="Tag.id")

    def __repr__(self):
        return f"<Photo {self.id} {self.image_url}>"
