"""
This is the canonical Unit of Work boundary for Rundown. All transactional changes must go through this.

Do not open ad hoc sessions elsewhere.
"""

from __future__ import annotations

import contextlib
from collections.abc import Callable, Generator

from sqlalchemy.orm import Session

from . import db as db_module


@contextlib.contextmanager
def session(factory: Callable[[], Session] | None = None) -> Generator[Session, None, None]:
    """
    Database session context manager.

    Provides Unit of Work semantics:
    - Opens a DB session (from ``factory``, default the module SessionLocal)
    - Yields it for use
    - On success: commits the transaction
    - On exception: rolls back and re-raises the exception
    - Always closes the session

    Usage:
        with session() as db:
            db.add(some_object)
            # transaction will be committed automatically on success
    """
    db = (factory or db_module.SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
