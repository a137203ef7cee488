"""SQLAlchemy repository implementations."""

from psx_spotter.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_db,
    init_db,
    reset_database,
    Base,
)
from psx_spotter.repositories.sqlalchemy.position_repo import SqlAlchemyPositionRepository
from psx_spotter.repositories.sqlalchemy.trade_repo import SqlAlchemyTradeRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_db",
    "init_db",
    "reset_database",
    "Base",
    "SqlAlchemyPositionRepository",
    "SqlAlchemyTradeRepository",
]
