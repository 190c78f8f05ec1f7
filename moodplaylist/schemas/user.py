# ============================================================================
# FILE: moodplaylist/schemas/user.py
# ============================================================================
from pydantic import BaseModel, EmailStr
from typing import Optional
from datetime import datetime

class UserCreate(BaseModel):
    """Schema for user registration"""
    username: str
    email: EmailStr
    password: str

class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    username: str
    email: str
    created_at: datetime
    last_login_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class Token(BaseModel):
    """Schema for JWT token response"""
    access_token: str
    token_type: str = "bearer"

class PasswordResetRequest(BaseModel):
    """Schema for requesting a password reset"""
    email: EmailStr

class PasswordResetConfirm(BaseModel):
    """Schema for setting a new password with a reset token"""
    token: str
    new_password: str
