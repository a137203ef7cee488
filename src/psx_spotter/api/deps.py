"""Dependency injection for FastAPI."""

from fastapi import Depends
from sqlalchemy.orm import Session

from psx_spotter.config.settings import get_settings
from psx_spotter.repositories.sqlalchemy.database import get_db
from psx_spotter.repositories.sqlalchemy import (
    SqlAlchemyPositionRepository,
    SqlAlchemyTradeRepository,
)
from psx_spotter.repositories.files import FileSnapshotRepository
from psx_spotter.services import LedgerEngine, SnapshotDiffEngine


def get_position_repo(db: Session = Depends(get_db)) -> SqlAlchemyPositionRepository:
    """Provide PositionRepository instance."""
    return SqlAlchemyPositionRepository(db)


def get_trade_repo(db: Session = Depends(get_db)) -> SqlAlchemyTradeRepository:
    """Provide TradeRepository instance."""
    return SqlAlchemyTradeRepository(db)


def get_snapshot_repo() -> FileSnapshotRepository:
    """Provide SnapshotRepository instance over the configured directory."""
    return FileSnapshotRepository(get_settings().get_snapshot_dir())


def get_ledger_engine(
    db: Session = Depends(get_db),
    position_repo: SqlAlchemyPositionRepository = Depends(get_position_repo),
    trade_repo: SqlAlchemyTradeRepository = Depends(get_trade_repo),
) -> LedgerEngine:
    """Provide LedgerEngine instance; the request's session is its unit of work."""
    return LedgerEngine(
        position_repo=position_repo,
        trade_repo=trade_repo,
        unit_of_work=db,
    )


def get_snapshot_engine(
    snapshot_repo: FileSnapshotRepository = Depends(get_snapshot_repo),
) -> SnapshotDiffEngine:
    """Provide SnapshotDiffEngine instance."""
    return SnapshotDiffEngine(snapshot_repo=snapshot_repo)
