# ============================================================================
# FILE: moodplaylist/core/exceptions.py
# ============================================================================

class MoodPlaylistError(Exception):
    """Base class for errors raised by the service layer"""

    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__name__


class NotFoundError(MoodPlaylistError):
    """Song, playlist or mood does not exist or is not owned by the caller.

    Both cases are reported the same way so ownership is never leaked.
    """

    status_code = 404


class ValidationError(MoodPlaylistError):
    """A required field is empty or a value is out of range"""

    status_code = 422


class EmptyPoolError(MoodPlaylistError):
    """No songs of the user carry the requested mood"""

    status_code = 409


class ReferentialIntegrityError(MoodPlaylistError):
    """An association points at a row that does not exist"""

    status_code = 409


class StoreError(MoodPlaylistError):
    """Underlying persistence failure"""

    status_code = 500
