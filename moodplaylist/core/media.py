# ============================================================================
# FILE: moodplaylist/core/media.py
# ============================================================================
import enum
from typing import NamedTuple
from urllib.parse import urlparse, parse_qs
from moodplaylist.config import settings

class MediaKind(str, enum.Enum):
    """Kind of media a song points at"""
    YOUTUBE = "youtube"
    LOCAL_AUDIO = "local_audio"
    LOCAL_VIDEO = "local_video"

def is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)

def _host_is(host: str, domain: str) -> bool:
    """True for the domain itself or one of its subdomains"""
    return host == domain or host.endswith("." + domain)

def extract_youtube_video_id(url: str) -> str:
    """
    Extract the video ID from the common YouTube URL shapes:
    youtu.be/<id>, youtube.com/watch?v=<id>, /embed/<id> and /shorts/<id>.
    Returns an empty string for anything else.
    """
    if not url:
        return ""
    parsed = urlparse(url.strip())
    host = (parsed.hostname or "").lower()

    if _host_is(host, "youtu.be"):
        return parsed.path.strip("/").split("/")[0]

    if _host_is(host, "youtube.com"):
        if parsed.path == "/watch":
            return parse_qs(parsed.query).get("v", [""])[0]
        parts = [p for p in parsed.path.split("/") if p]
        if len(parts) >= 2 and parts[0] in ("embed", "shorts", "v"):
            return parts[1]

    return ""

def get_fallback_url() -> str:
    """Video played when a song has nothing playable"""
    return settings.FALLBACK_VIDEO_URL

class Playback(NamedTuple):
    url: str
    is_fallback: bool

def resolve_playable_url(song) -> Playback:
    """
    Return the URL the player should load for a song, and whether it is
    the fallback video.
    Local files are never served (upload is not supported), so anything
    other than a recognizable YouTube link falls back.
    """
    if song.media_kind == MediaKind.YOUTUBE and song.media_url:
        if extract_youtube_video_id(song.media_url):
            return Playback(song.media_url, False)
    return Playback(get_fallback_url(), True)
