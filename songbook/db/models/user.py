# ============================================================================
# FILE: songbook/db/models/user.py
# ============================================================================
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from songbook.db.base import Base

class User(Base):
    """User model for authentication and user-owned playlists"""
    __tablename__ = "users"
    
    username = Column(String, primary_key=True, index=True)
    password = Column(String, nullable=False)  # bcrypt hash
    first_name = Column(String, nullable=True)
    last_name = Column(String, nullable=True)
    email = Column(String, nullable=False)
    img_url = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    playlists = relationship(
        "Playlist",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Playlist.id",
    )
