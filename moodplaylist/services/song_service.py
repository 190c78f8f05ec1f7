# ============================================================================
# FILE: moodplaylist/services/song_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import select, delete
from sqlalchemy.orm import Session, selectinload
from moodplaylist.core.exceptions import NotFoundError, ValidationError, MoodPlaylistError
from moodplaylist.core.media import MediaKind, is_http_url
from moodplaylist.db.models.song import Song, SongMood
from moodplaylist.db.models.playlist import PlaylistSong
from moodplaylist.db.session import unit_of_work
from moodplaylist.schemas.song import SongCreate, SongUpdate
from moodplaylist.services.association_service import association_service
import logging

logger = logging.getLogger(__name__)

class SongService:
    """Service layer for song operations, always scoped to the owning user"""

    def _hydrated(self, db: Session):
        """Song query with its mood tags loaded up front"""
        return db.query(Song).options(
            selectinload(Song.song_moods).selectinload(SongMood.mood)
        )

    def _clean_fields(self, song_data: SongCreate) -> dict:
        title = (song_data.title or "").strip()
        artist = (song_data.artist or "").strip()
        if not title:
            raise ValidationError("Title is required")
        if not artist:
            raise ValidationError("Artist is required")

        media_url = (song_data.media_url or "").strip() or None
        if song_data.media_kind == MediaKind.YOUTUBE and media_url and not is_http_url(media_url):
            raise ValidationError("Media URL must be an http(s) URL")

        return {
            "title": title,
            "artist": artist,
            "media_url": media_url,
            "media_kind": song_data.media_kind,
        }

    def list_songs(self, db: Session, user_id: int) -> List[Song]:
        """Get all songs for a user, newest first"""
        return (
            self._hydrated(db)
            .filter(Song.user_id == user_id)
            .order_by(Song.created_at.desc(), Song.id.desc())
            .all()
        )

    def get_song(self, db: Session, song_id: int, user_id: int) -> Optional[Song]:
        """Get a specific song (verify ownership)"""
        return (
            self._hydrated(db)
            .filter(Song.id == song_id, Song.user_id == user_id)
            .populate_existing()
            .first()
        )

    def list_songs_by_mood(self, db: Session, mood_id: int, user_id: int) -> List[Song]:
        """Get the user's songs tagged with a mood, newest first"""
        tagged = select(SongMood.song_id).where(SongMood.mood_id == mood_id)
        return (
            self._hydrated(db)
            .filter(Song.user_id == user_id, Song.id.in_(tagged))
            .order_by(Song.created_at.desc(), Song.id.desc())
            .all()
        )

    def create_song(self, db: Session, user_id: int, song_data: SongCreate) -> Song:
        """Create a song and its mood tags as one unit"""
        fields = self._clean_fields(song_data)
        try:
            with unit_of_work(db):
                song = Song(user_id=user_id, **fields)
                db.add(song)
                db.flush()
                song_id = song.id
                association_service.replace_song_moods(db, song_id, song_data.mood_ids)
        except MoodPlaylistError as e:
            logger.error(f"Error creating song: {e}")
            raise

        logger.info(f"Song created: {song_id} for user {user_id}")
        return self.get_song(db, song_id, user_id)

    def update_song(self, db: Session, song_id: int, user_id: int, song_data: SongUpdate) -> Song:
        """Replace a song's fields and its whole mood set"""
        fields = self._clean_fields(song_data)
        song = db.query(Song).filter(Song.id == song_id, Song.user_id == user_id).first()
        if not song:
            raise NotFoundError("Song not found")

        try:
            with unit_of_work(db):
                for key, value in fields.items():
                    setattr(song, key, value)
                db.flush()
                association_service.replace_song_moods(db, song_id, song_data.mood_ids)
        except MoodPlaylistError as e:
            logger.error(f"Error updating song {song_id}: {e}")
            raise

        logger.info(f"Song updated: {song_id}")
        return self.get_song(db, song_id, user_id)

    def delete_song(self, db: Session, song_id: int, user_id: int) -> bool:
        """Delete a song with its mood tags and playlist entries"""
        song = db.query(Song.id).filter(Song.id == song_id, Song.user_id == user_id).first()
        if not song:
            return False

        try:
            with unit_of_work(db):
                affected = list(db.scalars(
                    select(PlaylistSong.playlist_id).where(PlaylistSong.song_id == song_id)
                ))
                db.execute(delete(SongMood).where(SongMood.song_id == song_id))
                db.execute(delete(PlaylistSong).where(PlaylistSong.song_id == song_id))
                db.execute(delete(Song).where(Song.id == song_id, Song.user_id == user_id))
                association_service.compact_playlist_positions(db, affected)
        except MoodPlaylistError as e:
            logger.error(f"Error deleting song {song_id}: {e}")
            raise

        logger.info(f"Song deleted: {song_id}")
        return True

# Create singleton instance
song_service = SongService()
