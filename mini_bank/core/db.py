from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from ..models import db as _db_models  # noqa: F401 - ensure models register with metadata


def create_engine_for_path(path: Path) -> Engine:
    return create_engine(
        f"sqlite:///{path}",
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> None:
    SQLModel.metadata.create_all(engine)


@contextmanager
def open_session(path: Path, *, create: bool = False) -> Generator[Session, None, None]:
    """Yield a session bound to the snapshot file at ``path``.

    The engine is disposed on every exit path so the file handle is released
    even when the caller fails half-way through.
    """
    engine = create_engine_for_path(path)
    try:
        if create:
            init_db(engine)
        with Session(engine) as session:
            yield session
    finally:
        engine.dispose()
