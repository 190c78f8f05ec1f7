# ============================================================================
# FILE: moodplaylist/api/v1/router.py
# ============================================================================
from fastapi import APIRouter
from moodplaylist.api.v1.endpoints import moods, playlist, songs, user

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(moods.router, prefix="/moods", tags=["moods"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(playlist.router, prefix="/playlist", tags=["playlist"])
api_router.include_router(user.router, prefix="/user", tags=["user"])
