import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

SQLITE_FALLBACK_URL = "sqlite:///./salon_booking.db"

def normalize_database_url(url: str) -> str:
    """Fall back to a local SQLite file and accept Heroku-style postgres:// URLs"""
    if not url:
        return SQLITE_FALLBACK_URL
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql://", 1)
    return url

def engine_options(url: str, echo: bool = False) -> dict:
    if url.startswith("sqlite"):
        # sync routes run on worker threads
        return {"echo": echo, "connect_args": {"check_same_thread": False}}
    return {
        "echo": echo,
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 1800
    }

database_url = normalize_database_url(settings.DATABASE_URL)
logger.info(f"Database backend: {database_url.split(':', 1)[0]}")

engine = create_engine(database_url, **engine_options(database_url, settings.DEBUG))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """One session per request; anything left uncommitted by a failed request is rolled back"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
