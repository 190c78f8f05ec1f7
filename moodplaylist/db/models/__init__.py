from moodplaylist.db.models.user import User
from moodplaylist.db.models.mood import Mood
from moodplaylist.db.models.song import Song, SongMood
from moodplaylist.db.models.playlist import Playlist, PlaylistSong

__all__ = ["User", "Mood", "Song", "SongMood", "Playlist", "PlaylistSong"]
