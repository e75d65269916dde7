"""Tests for database session wiring."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.orm import Session

from songbook.db import session as db_session


class TestGetDb:

    def test_yields_session(self):
        gen = db_session.get_db()
        db = next(gen)
        assert isinstance(db, Session)
        gen.close()

    def test_closes_session_on_exit(self, monkeypatch):
        fake = MagicMock()
        monkeypatch.setattr(db_session, "SessionLocal", lambda: fake)

        gen = db_session.get_db()
        assert next(gen) is fake
        fake.close.assert_not_called()

        with pytest.raises(StopIteration):
            next(gen)
        fake.close.assert_called_once()

    def test_closes_session_on_error(self, monkeypatch):
        fake = MagicMock()
        monkeypatch.setattr(db_session, "SessionLocal", lambda: fake)

        gen = db_session.get_db()
        next(gen)
        with pytest.raises(RuntimeError):
            gen.throw(RuntimeError("request failed"))
        fake.close.assert_called_once()


def test_sqlite_engine_enforces_foreign_keys():
    engine = db_session.make_engine("sqlite://")
    with engine.connect() as conn:
        assert conn.exec_driver_sql("PRAGMA foreign_keys").scalar() == 1
    engine.dispose()
