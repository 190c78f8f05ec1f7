# ============================================================================
# FILE: moodplaylist/api/dependencies.py
# ============================================================================
from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session
from moodplaylist.db.session import get_db
from moodplaylist.core.security import decode_access_token
from moodplaylist.db.models.user import User
from moodplaylist.services.user_service import user_service

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/user/login")

def _credentials_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the bearer token to its user, raising 401 otherwise
    The token subject is the user id
    """
    payload = decode_access_token(token)
    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _credentials_error()

    user = user_service.get_user_by_id(db, user_id)
    if user is None:
        raise _credentials_error()
    return user
