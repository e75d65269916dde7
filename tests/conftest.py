"""Shared fixtures: an in-memory database seeded with two users."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from songbook.config import settings
from songbook.core.security import get_password_hash
from songbook.db.base import Base
from songbook.db.models.playlist import Playlist, PlaylistSong
from songbook.db.models.user import User
from songbook.db.session import make_engine
from songbook.main import init_db


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def seed(db):
    """Users u1/u2, each with a favorites playlist holding one song ('1' and '2')."""
    for n in (1, 2):
        db.add(User(
            username=f"u{n}",
            password=get_password_hash(f"password{n}"),
            first_name=f"U{n}F",
            last_name=f"U{n}L",
            email=f"u{n}@email.com",
            img_url=settings.DEFAULT_USER_IMG_URL,
        ))
    db.flush()

    favorites = []
    for n in (1, 2):
        playlist = Playlist(
            name=settings.FAVORITES_PLAYLIST_NAME,
            img_url=settings.FAVORITES_PLAYLIST_IMG_URL,
            username=f"u{n}",
        )
        db.add(playlist)
        db.flush()
        db.add(PlaylistSong(playlist_id=playlist.id, song_id=str(n)))
        favorites.append(playlist.id)

    db.commit()
    return {"favorites": {"u1": favorites[0], "u2": favorites[1]}}
