# ============================================================================
# FILE: moodplaylist/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship
from moodplaylist.core.media import MediaKind, extract_youtube_video_id
from moodplaylist.db.base import Base, utcnow

class Song(Base):
    """A user's song with its media reference"""
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title = Column(String, nullable=False)
    artist = Column(String, nullable=False)
    media_url = Column(String, nullable=True)
    media_kind = Column(
        Enum(MediaKind, name="media_kind", values_callable=lambda kinds: [k.value for k in kinds]),
        nullable=False,
        default=MediaKind.YOUTUBE,
    )
    created_at = Column(DateTime, default=utcnow, nullable=False)

    # Relationships
    user = relationship("User", back_populates="songs")
    song_moods = relationship("SongMood", back_populates="song", cascade="all, delete-orphan", passive_deletes=True)
    playlist_songs = relationship("PlaylistSong", back_populates="song", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        Index("ix_songs_user_created", "user_id", "created_at"),
    )

    @property
    def moods(self):
        return sorted((sm.mood for sm in self.song_moods), key=lambda m: m.name)

    @property
    def mood_ids(self):
        return {sm.mood_id for sm in self.song_moods}

    @property
    def video_id(self) -> str:
        if self.media_kind != MediaKind.YOUTUBE:
            return ""
        return extract_youtube_video_id(self.media_url or "")

class SongMood(Base):
    """Junction table for song mood tags"""
    __tablename__ = "song_moods"

    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), primary_key=True)
    mood_id = Column(Integer, ForeignKey("moods.id"), primary_key=True, index=True)

    # Relationships
    song = relationship("Song", back_populates="song_moods")
    mood = relationship("Mood")
