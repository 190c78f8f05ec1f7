# ============================================================================
# FILE: moodplaylist/main.py
# ============================================================================
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from moodplaylist.api.v1.router import api_router
from moodplaylist.core.exceptions import MoodPlaylistError
from moodplaylist.core.logging import setup_logging
from moodplaylist.config import settings
import logging

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Create FastAPI app instance
app = FastAPI(
    title="Mood Playlist Generator API",
    description="Tag your songs with moods and generate randomized playlists",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API v1 router
app.include_router(api_router, prefix="/api/v1")

@app.exception_handler(MoodPlaylistError)
async def service_error_handler(request: Request, exc: MoodPlaylistError):
    """Turn service-layer errors into JSON responses"""
    detail = exc.message
    if exc.status_code >= 500:
        # Server-side details stay in the log
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        detail = "Internal server error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail, "error": exc.__class__.__name__},
    )

@app.on_event("startup")
async def startup_event():
    """Initialize services on startup"""
    logger.info("Starting Mood Playlist Generator API")
    # Create database tables and seed the mood taxonomy
    from moodplaylist.db.base import Base
    from moodplaylist.db.session import engine, SessionLocal
    from moodplaylist.db.seed import seed_moods
    import moodplaylist.db.models  # noqa: F401  registers every table on Base
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        seed_moods(db)
    finally:
        db.close()

@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("Shutting down Mood Playlist Generator API")

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.get("/")
async def root():
    return {"message": settings.APP_NAME, "version": "1.0.0", "docs": "/docs"}
