from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from app.log import get_logger

log = get_logger(__name__)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Returns a generator that yields a database session

    The session factory is created by ``create_app`` and kept on the
    application state, so every app instance talks to its own database.

    Yields:
        Session: A database session object.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
