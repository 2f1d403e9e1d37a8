# database.py
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import (BigInteger, Column, DateTime, Integer, MetaData, String, Table,
                        create_engine)
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from config import Settings
from services.errors import StorageFailure

logger = logging.getLogger(__name__)

metadata = MetaData()

# sqlite needs a plain INTEGER primary key (with AUTOINCREMENT) so ids are never reused
products = Table(
    "products",
    metadata,
    Column("id", BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True),
    Column("name", String(200)),
    Column("price", String(200)),
    Column("creator", String(200)),
    Column("unit", String(200)),
    Column("category", String(200)),
    Column("description", String(1024)),
    Column("date", DateTime, nullable=True),
    sqlite_autoincrement=True,
)


def _connect_args(url: str, timeout: Optional[float]) -> dict:
    if timeout is None:
        return {}
    backend = make_url(url).get_backend_name()
    if backend == "sqlite":
        return {"timeout": timeout}
    if backend == "mysql":
        return {"connect_timeout": int(timeout), "read_timeout": int(timeout)}
    return {}


class Database:
    """Owns the connection pool and hands out one connection per request."""

    def __init__(self, url: str, timeout: Optional[float] = None, engine: Optional[Engine] = None):
        self.url = url
        self.engine = engine or create_engine(url, connect_args=_connect_args(url, timeout),
                                              pool_pre_ping=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, timeout=settings.db_timeout)

    def create_database(self):
        """Create the products table if it is missing. Run once at startup."""
        try:
            metadata.create_all(self.engine, checkfirst=True)
        except SQLAlchemyError as e:
            raise StorageFailure("failed to create table -> " + str(e)) from e
        logger.info("Table 'products' is ready (%s)", self.engine.url.render_as_string(hide_password=True))

    @contextmanager
    def get_db_connection(self) -> Iterator[Connection]:
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as e:
            raise StorageFailure("failed to connect to database-> " + str(e)) from e
        try:
            yield conn
        finally:
            conn.close()

    def close(self):
        self.engine.dispose()
