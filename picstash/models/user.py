# picstash/models/user.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from picstash.database import Base


class User(Base):
    """User model"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)

    # Relationships
    photos = relationship("Photo", back_populates="user")
    search_history = relationship(
        "SearchHistory",
        back_populates="user",
        order_by="SearchHistory.id"
    )

    def __repr__(self):
        return f"<User {self.email}>"
