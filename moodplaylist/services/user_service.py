# ============================================================================
# FILE: moodplaylist/services/user_service.py
# ============================================================================
from datetime import timedelta
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from moodplaylist.config import settings
from moodplaylist.core.exceptions import MoodPlaylistError, ValidationError
from moodplaylist.core.security import (
    generate_reset_token,
    get_password_hash,
    password_needs_rehash,
    verify_password,
)
from moodplaylist.db.base import utcnow
from moodplaylist.db.models.user import User
from moodplaylist.db.session import unit_of_work
from moodplaylist.schemas.user import UserCreate
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for user operations"""

    def normalize_signup(self, user_data: UserCreate) -> Tuple[str, str]:
        """Return the (username, email) that will be stored, rejecting blank credentials"""
        username = (user_data.username or "").strip()
        if not username:
            raise ValidationError("Username is required")
        if not (user_data.password or "").strip():
            raise ValidationError("Password is required")
        return username, user_data.email.lower()

    def create_user(self, db: Session, user_data: UserCreate) -> User:
        """Create a new user account"""
        username, email = self.normalize_signup(user_data)
        try:
            with unit_of_work(db):
                user = User(
                    username=username,
                    email=email,
                    hashed_password=get_password_hash(user_data.password)
                )
                db.add(user)
        except MoodPlaylistError as e:
            logger.error(f"Error creating user: {e}")
            raise
        db.refresh(user)
        logger.info(f"User created: {user.username}")
        return user

    def get_user_by_id(self, db: Session, user_id: int) -> Optional[User]:
        return db.query(User).filter(User.id == user_id).first()

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        """Get user by username"""
        return db.query(User).filter(User.username == username).first()

    def get_user_by_email(self, db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email.lower()).first()

    def authenticate_user(self, db: Session, username: str, password: str) -> Optional[User]:
        """Authenticate user with username and password, stamping the login time"""
        user = self.get_user_by_username(db, username)
        if not user:
            return None
        if not verify_password(password, user.hashed_password):
            return None

        with unit_of_work(db):
            if password_needs_rehash(user.hashed_password):
                user.hashed_password = get_password_hash(password)
            user.last_login_at = utcnow()
        db.refresh(user)
        return user

    def create_password_reset_token(self, db: Session, email: str) -> Optional[str]:
        """Issue a reset token for the account with this email, if any"""
        user = self.get_user_by_email(db, email)
        if not user:
            return None

        token = generate_reset_token()
        with unit_of_work(db):
            user.password_reset_token = token
            user.password_reset_expires_at = utcnow() + timedelta(
                minutes=settings.PASSWORD_RESET_EXPIRE_MINUTES
            )
        logger.info(f"Password reset requested for user {user.id}")
        return token

    def reset_password(self, db: Session, token: str, new_password: str) -> bool:
        """Set a new password if the token is known and not expired"""
        if not token or not new_password:
            return False
        user = db.query(User).filter(User.password_reset_token == token).first()
        if not user:
            return False
        if user.password_reset_expires_at is None or user.password_reset_expires_at < utcnow():
            logger.info(f"Expired password reset token used for user {user.id}")
            return False

        with unit_of_work(db):
            user.hashed_password = get_password_hash(new_password)
            user.password_reset_token = None
            user.password_reset_expires_at = None
        logger.info(f"Password reset for user {user.id}")
        return True

# Create singleton instance
user_service = UserService()
