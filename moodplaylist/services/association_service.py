# ============================================================================
# FILE: moodplaylist/services/association_service.py
# ============================================================================
from typing import Iterable, List
from sqlalchemy import select, delete, insert
from sqlalchemy.orm import Session
from moodplaylist.db.models.song import SongMood
from moodplaylist.db.models.playlist import PlaylistSong
import logging

logger = logging.getLogger(__name__)

def _unique(ids: Iterable[int]) -> List[int]:
    """Drop duplicate ids, keeping first occurrence order"""
    return list(dict.fromkeys(ids))

class AssociationService:
    """
    Replace-set primitives for the junction tables.

    These never commit: callers run them inside ``unit_of_work`` so a
    failure rolls back to the previous set. Referenced ids are not checked
    here; a missing mood or song trips the foreign key and surfaces as
    ReferentialIntegrityError from the unit of work.
    """

    def replace_song_moods(self, db: Session, song_id: int, mood_ids: Iterable[int]) -> bool:
        """Make the song's mood tags exactly `mood_ids`. Returns False if nothing changed."""
        target = _unique(mood_ids)
        current = set(db.scalars(select(SongMood.mood_id).where(SongMood.song_id == song_id)))
        if current == set(target):
            return False

        db.execute(delete(SongMood).where(SongMood.song_id == song_id))
        if target:
            db.execute(
                insert(SongMood),
                [{"song_id": song_id, "mood_id": mood_id} for mood_id in target],
            )
        logger.debug(f"Song {song_id} moods replaced: {sorted(current)} -> {target}")
        return True

    def replace_playlist_songs(self, db: Session, playlist_id: int, song_ids: Iterable[int]) -> bool:
        """Make the playlist hold exactly `song_ids`, in that order, at positions 0..k-1"""
        target = _unique(song_ids)
        current = list(db.scalars(
            select(PlaylistSong.song_id)
            .where(PlaylistSong.playlist_id == playlist_id)
            .order_by(PlaylistSong.position)
        ))
        if current == target:
            return False

        self._write_playlist_rows(db, playlist_id, target)
        logger.debug(f"Playlist {playlist_id} now holds {len(target)} songs")
        return True

    def compact_playlist_positions(self, db: Session, playlist_ids: Iterable[int]) -> None:
        """Renumber each playlist to dense positions 0..k-1, keeping the current order"""
        for playlist_id in _unique(playlist_ids):
            rows = db.execute(
                select(PlaylistSong.song_id, PlaylistSong.position)
                .where(PlaylistSong.playlist_id == playlist_id)
                .order_by(PlaylistSong.position)
            ).all()
            if [position for _, position in rows] == list(range(len(rows))):
                continue
            self._write_playlist_rows(db, playlist_id, [song_id for song_id, _ in rows])

    def _write_playlist_rows(self, db: Session, playlist_id: int, song_ids: List[int]) -> None:
        db.execute(delete(PlaylistSong).where(PlaylistSong.playlist_id == playlist_id))
        if song_ids:
            db.execute(
                insert(PlaylistSong),
                [
                    {"playlist_id": playlist_id, "song_id": song_id, "position": position}
                    for position, song_id in enumerate(song_ids)
                ],
            )

# Create singleton instance
association_service = AssociationService()
