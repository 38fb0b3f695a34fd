"""
Structured storage handle.

The application composition root constructs exactly one ``Database`` per
process and passes it to the repositories.
"""
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from wellness.core.logging_config import log_info


class Database:
    """Owns the SQLAlchemy engine backing the habits and mood entries tables."""

    def __init__(self, url: str, echo: bool = False, engine: Optional[Engine] = None):
        self.url = url
        self.engine = engine or self._build_engine(url, echo)

    @staticmethod
    def _build_engine(url: str, echo: bool) -> Engine:
        parsed = make_url(url)
        if parsed.get_backend_name() != "sqlite":
            return create_engine(url, echo=echo)

        connect_args = {"check_same_thread": False}
        if not parsed.database or parsed.database == ":memory:":
            # a single shared connection keeps in-memory data alive across sessions
            return create_engine(
                url,
                echo=echo,
                connect_args=connect_args,
                poolclass=StaticPool,
            )
        Path(parsed.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
        return create_engine(url, echo=echo, connect_args=connect_args)

    def create_schema(self) -> None:
        # Import models so they are registered on the metadata.
        from wellness import models  # noqa: F401

        SQLModel.metadata.create_all(self.engine)
        log_info("Database schema ready", url=self.url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        with Session(self.engine, expire_on_commit=False) as session:
            yield session

    def dispose(self) -> None:
        self.engine.dispose()
