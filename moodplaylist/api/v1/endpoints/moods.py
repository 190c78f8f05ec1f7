# ============================================================================
# FILE: moodplaylist/api/v1/endpoints/moods.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from moodplaylist.db.session import get_db
from moodplaylist.schemas.mood import MoodResponse
from moodplaylist.services.mood_service import mood_service

router = APIRouter()

@router.get("", response_model=List[MoodResponse])
async def list_moods(db: Session = Depends(get_db)):
    """
    List the mood taxonomy
    Public, no authentication needed
    """
    return mood_service.list_moods(db)

@router.get("/{mood_id}", response_model=MoodResponse)
async def get_mood(mood_id: int, db: Session = Depends(get_db)):
    mood = mood_service.get_mood(db, mood_id)
    if not mood:
        raise HTTPException(status_code=404, detail="Mood not found")
    return mood
