import pytest

from app import database
from app.database import engine_options, get_db, normalize_database_url


@pytest.mark.parametrize("url,expected", [
    (None, "sqlite:///./salon_booking.db"),
    ("", "sqlite:///./salon_booking.db"),
    ("postgres://u:p@host/db", "postgresql://u:p@host/db"),
    ("postgresql://u:p@host/db", "postgresql://u:p@host/db"),
])
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_sqlite_engine_has_no_pool_sizing():
    options = engine_options("sqlite:///./salon_booking.db")

    assert options["connect_args"] == {"check_same_thread": False}
    assert "pool_size" not in options


def test_postgres_engine_is_pooled():
    options = engine_options("postgresql://u:p@host/db", echo=True)

    assert options["pool_pre_ping"] is True
    assert options["echo"] is True


class RecordingSession:
    def __init__(self):
        self.calls = []

    def rollback(self):
        self.calls.append("rollback")

    def close(self):
        self.calls.append("close")


def test_get_db_rolls_back_when_request_fails(monkeypatch):
    session = RecordingSession()
    monkeypatch.setattr(database, "SessionLocal", lambda: session)

    dependency = get_db()
    assert next(dependency) is session
    with pytest.raises(RuntimeError):
        dependency.throw(RuntimeError("boom"))

    assert session.calls == ["rollback", "close"]


def test_get_db_only_closes_on_success(monkeypatch):
    session = RecordingSession()
    monkeypatch.setattr(database, "SessionLocal", lambda: session)

    dependency = get_db()
    next(dependency)
    dependency.close()

    assert session.calls == ["close"]
