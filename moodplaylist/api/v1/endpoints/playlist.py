# ============================================================================
# FILE: moodplaylist/api/v1/endpoints/playlist.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from moodplaylist.db.session import get_db
from moodplaylist.api.dependencies import get_current_user
from moodplaylist.schemas.playlist import (
    PlaylistGenerate,
    PlaylistRegenerate,
    PlaylistUpdate,
    PlaylistResponse,
)
from moodplaylist.services.playlist_service import playlist_service
from moodplaylist.db.models.user import User

router = APIRouter()

@router.get("/my-playlists", response_model=List[PlaylistResponse])
async def get_my_playlists(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get all playlists for the current user
    Requires authentication
    """
    return playlist_service.get_user_playlists(db, current_user.id)

@router.post("/generate", response_model=PlaylistResponse, status_code=201)
async def generate_playlist(
    request: PlaylistGenerate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Generate a randomized playlist from the current user's songs of a mood
    Requires authentication
    """
    return playlist_service.generate_playlist(db, current_user.id, request)

@router.get("/{playlist_id}", response_model=PlaylistResponse)
async def get_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get a specific playlist
    Requires authentication and ownership
    """
    playlist = playlist_service.get_playlist(db, playlist_id, current_user.id)
    if not playlist:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return playlist

@router.post("/{playlist_id}/regenerate", response_model=PlaylistResponse)
async def regenerate_playlist(
    playlist_id: int,
    request: PlaylistRegenerate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Redraw a playlist from its mood, replacing all of its songs
    Requires authentication and ownership
    """
    return playlist_service.regenerate_playlist(db, playlist_id, current_user.id, request.count)

@router.put("/{playlist_id}", response_model=PlaylistResponse)
async def rename_playlist(
    playlist_id: int,
    update_data: PlaylistUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Rename a playlist
    Requires authentication and ownership
    """
    return playlist_service.rename_playlist(db, playlist_id, current_user.id, update_data.name)

@router.delete("/{playlist_id}")
async def delete_playlist(
    playlist_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a playlist
    Requires authentication and ownership
    """
    success = playlist_service.delete_playlist(db, playlist_id, current_user.id)
    if not success:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return {"message": "Playlist deleted successfully"}
