# ============================================================================
# FILE: moodplaylist/services/mood_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy.orm import Session
from moodplaylist.config import settings
from moodplaylist.core.cache import cache, MOODS_CACHE_KEY
from moodplaylist.db.models.mood import Mood
from moodplaylist.schemas.mood import MoodResponse
import logging

logger = logging.getLogger(__name__)

class MoodService:
    """Read access to the fixed mood taxonomy"""

    def __init__(self, cache_backend=cache):
        self.cache = cache_backend

    def list_moods(self, db: Session) -> List[MoodResponse]:
        """All moods ordered by name, served from cache when possible"""
        cached = self.cache.get_cache(MOODS_CACHE_KEY)
        if cached is not None:
            return [MoodResponse(**item) for item in cached]

        moods = [MoodResponse.model_validate(m) for m in db.query(Mood).order_by(Mood.name).all()]
        self.cache.set_cache(
            MOODS_CACHE_KEY,
            [m.model_dump() for m in moods],
            expire=settings.CACHE_EXPIRE_SECONDS,
        )
        return moods

    def get_mood(self, db: Session, mood_id: int) -> Optional[Mood]:
        return db.query(Mood).filter(Mood.id == mood_id).first()

# Create singleton instance
mood_service = MoodService()
