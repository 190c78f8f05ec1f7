# ============================================================================
# FILE: moodplaylist/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from moodplaylist.db.base import Base, utcnow

class User(Base):
    """User model for authentication and ownership of songs and playlists"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    last_login_at = Column(DateTime, nullable=True)
    password_reset_token = Column(String, unique=True, index=True, nullable=True)
    password_reset_expires_at = Column(DateTime, nullable=True)

    # Relationships
    songs = relationship("Song", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    playlists = relationship("Playlist", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
