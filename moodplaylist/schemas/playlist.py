# ============================================================================
# FILE: moodplaylist/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime
from moodplaylist.config import settings
from moodplaylist.schemas.song import SongResponse

class PlaylistGenerate(BaseModel):
    """Schema for generating a playlist from a mood"""
    mood_id: int
    count: int = settings.PLAYLIST_DEFAULT_SONGS
    name: str

class PlaylistRegenerate(BaseModel):
    """Schema for redrawing an existing playlist"""
    count: int = settings.PLAYLIST_DEFAULT_SONGS

class PlaylistUpdate(BaseModel):
    """Schema for renaming a playlist"""
    name: str

class PlaylistSongResponse(BaseModel):
    """Schema for one entry of a playlist"""
    position: int
    song: SongResponse

    class Config:
        from_attributes = True

class PlaylistResponse(BaseModel):
    """Schema for playlist response"""
    id: int
    name: str
    mood_id: Optional[int] = None
    created_at: datetime
    entries: List[PlaylistSongResponse] = []

    class Config:
        from_attributes = True
