# File: app/api/deps.py

from collections.abc import Generator

from sqlalchemy.orm import Session

from app.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped SQLAlchemy session.

    Services commit their own writes; anything left pending when a handler
    raises is rolled back before the session goes back to the pool.
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
