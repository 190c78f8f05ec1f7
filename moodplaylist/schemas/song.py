# ============================================================================
# FILE: moodplaylist/schemas/song.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from moodplaylist.core.media import MediaKind
from moodplaylist.schemas.mood import MoodResponse

class SongCreate(BaseModel):
    """Schema for creating a song"""
    title: str
    artist: str
    media_url: Optional[str] = None
    media_kind: MediaKind = MediaKind.YOUTUBE
    mood_ids: List[int] = []

class SongUpdate(SongCreate):
    """Schema for updating a song; replaces every field and the mood set"""

class SongResponse(BaseModel):
    """Schema for song response"""
    id: int
    title: str
    artist: str
    media_url: Optional[str] = None
    media_kind: MediaKind
    video_id: str = ""
    created_at: datetime
    moods: List[MoodResponse] = []

    class Config:
        from_attributes = True

class PlaybackResponse(BaseModel):
    """Schema for the resolved playback URL of a song"""
    song_id: int
    url: str
    is_fallback: bool
