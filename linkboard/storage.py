"""Local persistent stores a board mirrors its collection into.

A store is a flat string key/value map, the same shape as a browser's local
storage. ``MemoryStore`` keeps values for the lifetime of the process;
``DatabaseStore`` writes them to the ``stored_values`` table.
"""

import logging
from typing import Protocol

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from linkboard.config import settings
from linkboard.models import Base, StoredValue

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


class DatabaseStore:
    """Key/value store backed by SQLAlchemy.

    Use :meth:`connect` to build one from a database URL; the store then owns
    its engine and releases it in :meth:`close`.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        engine: AsyncEngine | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._engine = engine

    @classmethod
    async def connect(cls, database_url: str | None = None) -> "DatabaseStore":
        """Open ``database_url`` (default: settings) and create missing tables."""
        engine = create_async_engine(database_url or settings.database_url)
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        return cls(async_sessionmaker(engine, expire_on_commit=False), engine)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()

    async def get(self, key: str) -> str | None:
        async with self._session_factory() as session:
            row = await session.get(StoredValue, key)
            return row.value if row is not None else None

    async def set(self, key: str, value: str) -> None:
        async with self._session_factory() as session:
            row = await session.get(StoredValue, key)
            if row is None:
                session.add(StoredValue(key=key, value=value))
            else:
                row.value = value
            await session.commit()
        logger.debug("Stored %d characters under %r", len(value), key)
