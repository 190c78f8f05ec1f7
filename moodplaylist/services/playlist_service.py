# ============================================================================
# FILE: moodplaylist/services/playlist_service.py
# ============================================================================
from typing import List, Optional
import random
from sqlalchemy import delete
from sqlalchemy.orm import Session, selectinload
from moodplaylist.config import settings
from moodplaylist.core.exceptions import (
    EmptyPoolError,
    MoodPlaylistError,
    NotFoundError,
    ValidationError,
)
from moodplaylist.db.models.playlist import Playlist, PlaylistSong
from moodplaylist.db.models.song import Song, SongMood
from moodplaylist.db.session import unit_of_work
from moodplaylist.schemas.playlist import PlaylistGenerate
from moodplaylist.services.association_service import association_service
from moodplaylist.services.mood_service import mood_service
from moodplaylist.services.song_service import song_service
import logging

logger = logging.getLogger(__name__)

class PlaylistService:
    """Service layer for mood playlist generation and management"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _hydrated(self, db: Session):
        """Playlist query with entries, their songs and the songs' moods loaded"""
        return db.query(Playlist).options(
            selectinload(Playlist.entries)
            .selectinload(PlaylistSong.song)
            .selectinload(Song.song_moods)
            .selectinload(SongMood.mood)
        )

    def _validate_count(self, count: int) -> None:
        if not settings.PLAYLIST_MIN_SONGS <= count <= settings.PLAYLIST_MAX_SONGS:
            raise ValidationError(
                f"Count must be between {settings.PLAYLIST_MIN_SONGS} and {settings.PLAYLIST_MAX_SONGS}"
            )

    def _validate_name(self, name: str) -> str:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Playlist name is required")
        return name

    def draw_songs(self, pool: List[Song], count: int) -> List[Song]:
        """
        Uniform random selection without replacement.
        Shuffles a copy of the pool (Fisher-Yates) and keeps the first
        min(count, len(pool)) songs, so the whole pool is used when it is
        not larger than `count`.
        """
        shuffled = list(pool)
        self.rng.shuffle(shuffled)
        return shuffled[:count]

    def _draw_from_mood(self, db: Session, user_id: int, mood_id: int, count: int) -> List[Song]:
        pool = song_service.list_songs_by_mood(db, mood_id, user_id)
        if not pool:
            raise EmptyPoolError(f"No songs tagged with mood {mood_id}")
        return self.draw_songs(pool, count)

    def get_user_playlists(self, db: Session, user_id: int) -> List[Playlist]:
        """Get all playlists for a user, newest first"""
        return (
            self._hydrated(db)
            .filter(Playlist.user_id == user_id)
            .order_by(Playlist.created_at.desc(), Playlist.id.desc())
            .all()
        )

    def get_playlist(self, db: Session, playlist_id: int, user_id: int) -> Optional[Playlist]:
        """Get a specific playlist (verify ownership)"""
        return (
            self._hydrated(db)
            .filter(Playlist.id == playlist_id, Playlist.user_id == user_id)
            .populate_existing()
            .first()
        )

    def generate_playlist(self, db: Session, user_id: int, request: PlaylistGenerate) -> Playlist:
        """Draw songs of a mood into a new, ordered playlist"""
        self._validate_count(request.count)
        name = self._validate_name(request.name)
        if not mood_service.get_mood(db, request.mood_id):
            raise NotFoundError("Mood not found")

        selected = self._draw_from_mood(db, user_id, request.mood_id, request.count)
        try:
            with unit_of_work(db):
                playlist = Playlist(user_id=user_id, mood_id=request.mood_id, name=name)
                db.add(playlist)
                db.flush()
                playlist_id = playlist.id
                association_service.replace_playlist_songs(db, playlist_id, [s.id for s in selected])
        except MoodPlaylistError as e:
            logger.error(f"Error generating playlist: {e}")
            raise

        logger.info(f"Playlist generated: {playlist_id} for user {user_id} with {len(selected)} songs")
        return self.get_playlist(db, playlist_id, user_id)

    def regenerate_playlist(self, db: Session, playlist_id: int, user_id: int, count: int) -> Playlist:
        """Redraw a playlist from its mood, replacing all of its entries"""
        self._validate_count(count)
        playlist = db.query(Playlist).filter(
            Playlist.id == playlist_id,
            Playlist.user_id == user_id
        ).first()
        if not playlist:
            raise NotFoundError("Playlist not found")
        if playlist.mood_id is None:
            raise ValidationError("Playlist has no mood to regenerate from")

        selected = self._draw_from_mood(db, user_id, playlist.mood_id, count)
        try:
            with unit_of_work(db):
                association_service.replace_playlist_songs(db, playlist_id, [s.id for s in selected])
        except MoodPlaylistError as e:
            logger.error(f"Error regenerating playlist {playlist_id}: {e}")
            raise

        logger.info(f"Playlist regenerated: {playlist_id}")
        return self.get_playlist(db, playlist_id, user_id)

    def rename_playlist(self, db: Session, playlist_id: int, user_id: int, name: str) -> Playlist:
        """Change a playlist's display name"""
        name = self._validate_name(name)
        playlist = db.query(Playlist).filter(
            Playlist.id == playlist_id,
            Playlist.user_id == user_id
        ).first()
        if not playlist:
            raise NotFoundError("Playlist not found")

        with unit_of_work(db):
            playlist.name = name

        logger.info(f"Playlist renamed: {playlist_id}")
        return self.get_playlist(db, playlist_id, user_id)

    def delete_playlist(self, db: Session, playlist_id: int, user_id: int) -> bool:
        """Delete a playlist and its entries"""
        playlist = db.query(Playlist.id).filter(
            Playlist.id == playlist_id,
            Playlist.user_id == user_id
        ).first()
        if not playlist:
            return False

        try:
            with unit_of_work(db):
                association_service.replace_playlist_songs(db, playlist_id, [])
                db.execute(delete(Playlist).where(Playlist.id == playlist_id, Playlist.user_id == user_id))
        except MoodPlaylistError as e:
            logger.error(f"Error deleting playlist: {e}")
            raise

        logger.info(f"Playlist deleted: {playlist_id}")
        return True

# Create singleton instance
playlist_service = PlaylistService()
