# ============================================================================
# FILE: moodplaylist/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from moodplaylist.db.base import Base, utcnow

class Playlist(Base):
    """Playlist generated from a mood"""
    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    mood_id = Column(Integer, ForeignKey("moods.id"), nullable=True)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="playlists")
    mood = relationship("Mood")
    entries = relationship(
        "PlaylistSong",
        back_populates="playlist",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="PlaylistSong.position",
    )

    @property
    def songs(self):
        return [entry.song for entry in self.entries]

class PlaylistSong(Base):
    """Junction table for playlist songs; position gives the play order"""
    __tablename__ = "playlist_songs"

    playlist_id = Column(Integer, ForeignKey("playlists.id", ondelete="CASCADE"), primary_key=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), primary_key=True, index=True)
    position = Column(Integer, nullable=False)

    # Relationships
    playlist = relationship("Playlist", back_populates="entries")
    song = relationship("Song", back_populates="playlist_songs")

    __table_args__ = (
        UniqueConstraint("playlist_id", "position", name="uq_playlist_songs_position"),
    )
