# ============================================================================
# FILE: moodplaylist/api/v1/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from moodplaylist.db.session import get_db
from moodplaylist.api.dependencies import get_current_user
from moodplaylist.core.media import resolve_playable_url
from moodplaylist.schemas.song import SongCreate, SongUpdate, SongResponse, PlaybackResponse
from moodplaylist.services.song_service import song_service
from moodplaylist.db.models.user import User

router = APIRouter()

@router.get("", response_model=List[SongResponse])
async def list_my_songs(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get all songs of the current user, newest first
    Requires authentication
    """
    return song_service.list_songs(db, current_user.id)

@router.post("", response_model=SongResponse, status_code=201)
async def create_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Add a song with its mood tags
    Requires authentication
    """
    return song_service.create_song(db, current_user.id, song_data)

@router.get("/by-mood/{mood_id}", response_model=List[SongResponse])
async def list_songs_by_mood(
    mood_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get the current user's songs tagged with a mood
    Requires authentication
    """
    return song_service.list_songs_by_mood(db, mood_id, current_user.id)

@router.get("/{song_id}", response_model=SongResponse)
async def get_song(
    song_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get a specific song
    Requires authentication and ownership
    """
    song = song_service.get_song(db, song_id, current_user.id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    return song

@router.get("/{song_id}/play", response_model=PlaybackResponse)
async def get_playback_url(
    song_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Resolve the URL the player should load for a song
    Falls back to a default video when the song has nothing playable
    """
    song = song_service.get_song(db, song_id, current_user.id)
    if not song:
        raise HTTPException(status_code=404, detail="Song not found")
    playback = resolve_playable_url(song)
    return PlaybackResponse(song_id=song.id, url=playback.url, is_fallback=playback.is_fallback)

@router.put("/{song_id}", response_model=SongResponse)
async def update_song(
    song_id: int,
    song_data: SongUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Replace a song's details and mood tags
    Requires authentication and ownership
    """
    return song_service.update_song(db, song_id, current_user.id, song_data)

@router.delete("/{song_id}")
async def delete_song(
    song_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a song
    Requires authentication and ownership
    """
    success = song_service.delete_song(db, song_id, current_user.id)
    if not success:
        raise HTTPException(status_code=404, detail="Song not found")
    return {"message": "Song deleted successfully"}
