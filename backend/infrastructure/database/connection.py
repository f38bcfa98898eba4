import asyncio
import functools
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Awaitable, Callable, List, Optional, TypeVar

from domain.exceptions import QueryFailureError, StoreUnavailableError
from sqlalchemy import event
from sqlalchemy.engine import Row
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from sqlalchemy.sql import Executable

logger = logging.getLogger("StoreGateway")

T = TypeVar("T")

Base = declarative_base()


def get_database_type(url: str) -> str:
    """
    Extract database type from connection URL.

    Args:
        url: Database connection URL

    Returns:
        "sqlite", "postgresql", "mysql" or "unknown"
    """
    if url.startswith("sqlite"):
        return "sqlite"
    elif url.startswith("postgresql"):
        return "postgresql"
    elif url.startswith("mysql"):
        return "mysql"
    return "unknown"


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with database-specific settings."""
    database_type = get_database_type(url)

    if database_type == "sqlite":
        # SQLite configuration: No connection pooling, allow multi-threading
        engine = create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,  # SQLite doesn't need connection pooling
        )

        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            """Let readers proceed while a writer holds the database."""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA busy_timeout=5000")
            cursor.close()

        logger.info("Database configured: SQLite (file-based, serialized writes)")
    else:
        # Server databases: connection pooling for concurrent access
        engine = create_async_engine(
            url,
            echo=echo,
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )
        logger.info(f"Database configured: {database_type} (with connection pooling)")

    return engine


def retry_on_db_lock(max_retries=5, initial_delay=0.1, backoff_factor=2):
    """Retry on SQLite 'database is locked' errors with exponential backoff.

    Other errors propagate immediately.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            delay = initial_delay
            last_exc = None
            for attempt in range(max_retries):
                try:
                    return await func(*args, **kwargs)
                except Exception as exc:
                    if "database is locked" in str(exc).lower():
                        last_exc = exc
                        if attempt < max_retries - 1:
                            logger.warning(
                                f"SQLite locked (attempt {attempt + 1}/{max_retries}), retrying in {delay:.2f}s"
                            )
                            await asyncio.sleep(delay)
                            delay *= backoff_factor
                        continue
                    raise
            raise last_exc  # type: ignore[misc]

        return wrapper

    return decorator


class SerializedWrite:
    """Async context manager that serializes writes for SQLite.

    For server databases this is a transparent no-op.
    """

    def __init__(self, lock: Optional[asyncio.Lock]):
        self._lock = lock

    async def __aenter__(self):
        if self._lock is not None:
            await self._lock.acquire()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._lock is not None:
            self._lock.release()
        return False


class StoreGateway:
    """
    Scoped access to the relational store.

    Every operation acquires its own connection and releases it on every exit
    path. Connections are never shared between concurrent operations.

    Failures surface as StoreUnavailableError (connection could not be
    acquired) or QueryFailureError (statement failed); raw SQLAlchemy
    exceptions never leave this class.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._write_lock: Optional[asyncio.Lock] = None  # Lazy-init inside the running loop

    @classmethod
    def from_url(cls, url: str, echo: bool = False) -> "StoreGateway":
        return cls(build_engine(url, echo=echo))

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def dialect_name(self) -> str:
        return self._engine.dialect.name

    @property
    def is_sqlite(self) -> bool:
        return self.dialect_name == "sqlite"

    def serialized_write(self) -> SerializedWrite:
        """Return a context manager that serializes writes for SQLite."""
        if not self.is_sqlite:
            return SerializedWrite(None)
        if self._write_lock is None:
            self._write_lock = asyncio.Lock()
        return SerializedWrite(self._write_lock)

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[AsyncConnection]:
        """
        Acquire one scoped connection.

        Raises:
            StoreUnavailableError: If no connection could be acquired
        """
        try:
            conn = await self._engine.connect()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Could not acquire a database connection: {e}")
            raise StoreUnavailableError(str(e)) from e

        try:
            yield conn
        finally:
            await conn.close()

    async def with_connection(self, body: Callable[[AsyncConnection], Awaitable[T]]) -> T:
        """Run body against a scoped connection and release it afterwards."""
        async with self.connection() as conn:
            return await body(conn)

    async def fetch_all(self, statement: Executable, operation: str = "query") -> List[Row]:
        """
        Run a read statement and return all rows.

        Raises:
            StoreUnavailableError: If no connection could be acquired
            QueryFailureError: If the statement failed
        """
        async with self.connection() as conn:
            try:
                result = await conn.execute(statement)
                return list(result.fetchall())
            except SQLAlchemyError as e:
                raise QueryFailureError(operation, str(e)) from e

    async def execute(self, statement: Executable, operation: str = "write") -> int:
        """
        Run a write statement in its own transaction.

        Returns:
            Number of rows reported as affected by the driver

        Raises:
            StoreUnavailableError: If no connection could be acquired
            QueryFailureError: If the statement failed or could not be committed
        """
        async with self.serialized_write():
            try:
                return await self._execute_in_transaction(statement)
            except SQLAlchemyError as e:
                raise QueryFailureError(operation, str(e)) from e

    async def execute_many(self, statements: List[Executable], operation: str = "write") -> int:
        """Run several write statements in one transaction; all or nothing."""
        if not statements:
            return 0
        async with self.serialized_write():
            try:
                return await self._execute_in_transaction(*statements)
            except SQLAlchemyError as e:
                raise QueryFailureError(operation, str(e)) from e

    @retry_on_db_lock(max_retries=5, initial_delay=0.05)
    async def _execute_in_transaction(self, *statements: Executable) -> int:
        rows = 0
        async with self.connection() as conn:
            async with conn.begin():
                for statement in statements:
                    result = await conn.execute(statement)
                    rows += max(result.rowcount or 0, 0)
        return rows

    async def create_schema(self) -> None:
        """Create every cosmetic table that does not exist yet."""
        # Importing models registers the tables on Base.metadata
        from infrastructure.database import models  # noqa: F401

        try:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as e:
            raise StoreUnavailableError(str(e)) from e
        logger.info("Cosmetic tables ensured")

    async def drop_schema(self) -> None:
        from infrastructure.database import models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        await self._engine.dispose()

