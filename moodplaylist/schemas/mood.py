# ============================================================================
# FILE: moodplaylist/schemas/mood.py
# ============================================================================
from pydantic import BaseModel
from typing import Optional

class MoodResponse(BaseModel):
    """Schema for mood response"""
    id: int
    name: str
    color: str
    description: Optional[str] = None

    class Config:
        from_attributes = True
