# tests/conftest.py
import random

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from moodplaylist.core.cache import RedisCache
from moodplaylist.core.security import create_access_token
from moodplaylist.db.base import Base
from moodplaylist.db.models import Mood, User
from moodplaylist.db.seed import seed_moods
from moodplaylist.db.session import enable_sqlite_foreign_keys, get_db
from moodplaylist.schemas.song import SongCreate
from moodplaylist.services.song_service import song_service


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(eng)
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    seed_moods(session)
    yield session
    session.close()


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    """Run every test with caching disabled."""
    from moodplaylist.services import mood_service as mood_module
    monkeypatch.setattr(mood_module.mood_service, "cache", RedisCache(url=None))


@pytest.fixture
def moods(db):
    """Seeded moods keyed by name."""
    return {m.name: m for m in db.query(Mood).all()}


def _make_user(db, username):
    user = User(username=username, email=f"{username}@example.com", hashed_password="x")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db):
    return _make_user(db, "alice")


@pytest.fixture
def other_user(db):
    return _make_user(db, "bob")


@pytest.fixture
def make_song(db):
    """
    Usage:
      make_song(user, "Title", [mood_id, ...])
    """
    def _make(owner, title, mood_ids=(), artist="Artist", media_url=None):
        data = SongCreate(title=title, artist=artist, media_url=media_url, mood_ids=list(mood_ids))
        return song_service.create_song(db, owner.id, data)
    return _make


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def client(db):
    from moodplaylist.main import app

    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    # Not used as a context manager so startup does not touch the real database
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user):
    token = create_access_token({"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}
