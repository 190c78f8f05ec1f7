# ============================================================================
# FILE: moodplaylist/db/seed.py
# ============================================================================
from sqlalchemy.orm import Session
from moodplaylist.db.models.mood import Mood
from moodplaylist.db.session import unit_of_work
import logging

logger = logging.getLogger(__name__)

DEFAULT_MOODS = [
    {"name": "Happy", "color": "#FFD700", "description": "Upbeat and joyful songs"},
    {"name": "Sad", "color": "#4682B4", "description": "Melancholic and emotional songs"},
    {"name": "Relaxed", "color": "#98FB98", "description": "Calm and peaceful songs"},
    {"name": "Energetic", "color": "#FF4500", "description": "High-energy and motivating songs"},
    {"name": "Romantic", "color": "#FF69B4", "description": "Love songs and romantic ballads"},
    {"name": "Focus", "color": "#9370DB", "description": "Songs for concentration and work"},
]

def seed_moods(db: Session) -> int:
    """Insert any default mood that is missing. Returns how many were added."""
    existing = {name for (name,) in db.query(Mood.name).all()}
    missing = [m for m in DEFAULT_MOODS if m["name"] not in existing]
    if not missing:
        return 0

    with unit_of_work(db):
        db.add_all(Mood(**m) for m in missing)
    logger.info(f"Seeded {len(missing)} moods")
    return len(missing)
