# ============================================================================
# FILE: moodplaylist/db/models/mood.py
# ============================================================================
from sqlalchemy import Column, Integer, String, Text
from moodplaylist.db.base import Base

class Mood(Base):
    """Fixed mood taxonomy, seeded at startup"""
    __tablename__ = "moods"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    color = Column(String, nullable=False, default="#808080")
    description = Column(Text, nullable=True)
