# picstash/models/tag.py
from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from picstash.database import Base


class Tag(Base):
    """Tag attached to a saved photo (max 5 per photo)"""
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(20), nullable=False, index=True)
    photo_id = Column(Integer, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False, index=True)

    photo = relationship("Photo", back_populates="tags")

    def __repr__(self):
        return f"<Tag {self.name}>"
