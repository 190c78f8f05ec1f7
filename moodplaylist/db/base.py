# ============================================================================
# FILE: moodplaylist/db/base.py
# ============================================================================
from datetime import datetime, timezone
from sqlalchemy.orm import declarative_base

Base = declarative_base()

def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite does not keep tzinfo"""
    return datetime.now(timezone.utc).replace(tzinfo=None)
