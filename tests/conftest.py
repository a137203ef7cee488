"""
Pytest configuration and fixtures for PSX Spotter tests.

This module provides:
- In-memory SQLite database fixtures
- Ledger repository and engine fixtures
- Snapshot store fixtures (temp directory and in-memory fake)
- Time helpers for UTC timestamps
- FastAPI test client wired to the test database
"""

import json
import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from psx_spotter.main import app
from psx_spotter.config.settings import Settings, set_settings, reset_settings
from psx_spotter.core.exceptions import NotFoundError
from psx_spotter.core.timezone import UTC
from psx_spotter.domain.models import Trade, TradeType, VolumeLeader
from psx_spotter.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from psx_spotter.repositories.sqlalchemy import orm_models  # noqa: F401
from psx_spotter.repositories.sqlalchemy import (
    SqlAlchemyPositionRepository,
    SqlAlchemyTradeRepository,
)
from psx_spotter.repositories.files import FileSnapshotRepository
from psx_spotter.services import LedgerEngine, SnapshotDiffEngine


# =============================================================================
# TIME HELPERS
# =============================================================================


def utc_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create an aware UTC datetime."""
    return UTC.localize(datetime(year, month, day, hour, minute, second))


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# LEDGER FIXTURES
# =============================================================================


@pytest.fixture
def position_repo(test_session) -> SqlAlchemyPositionRepository:
    """Provide test PositionRepository."""
    return SqlAlchemyPositionRepository(test_session)


@pytest.fixture
def trade_repo(test_session) -> SqlAlchemyTradeRepository:
    """Provide test TradeRepository."""
    return SqlAlchemyTradeRepository(test_session)


@pytest.fixture
def ledger_engine(position_repo, trade_repo, test_session) -> LedgerEngine:
    """Provide test LedgerEngine using the session as unit of work."""
    return LedgerEngine(
        position_repo=position_repo,
        trade_repo=trade_repo,
        unit_of_work=test_session,
    )


@pytest.fixture
def trade_factory(trade_repo, test_session) -> Callable[..., Trade]:
    """Factory that appends a trade with an explicit timestamp and commits it."""

    def _create_trade(
        trade_type: TradeType,
        symbol: str,
        quantity: str,
        price: str,
        timestamp: datetime,
        proceeds: Optional[str] = None,
    ) -> Trade:
        trade = trade_repo.append(
            Trade(
                trade_id=str(uuid.uuid4()),
                trade_type=trade_type,
                symbol=symbol,
                quantity=Decimal(quantity),
                price=Decimal(price),
                proceeds=Decimal(proceeds) if proceeds is not None else None,
                timestamp=timestamp,
            )
        )
        test_session.commit()
        return trade

    return _create_trade


# =============================================================================
# SNAPSHOT FIXTURES
# =============================================================================


class InMemorySnapshotRepository:
    """Snapshot store holding raw payloads in a dict, keyed by date."""

    def __init__(self, payloads: Optional[dict[str, Any]] = None):
        self.payloads: dict[str, Any] = dict(payloads or {})
        self.read_count = 0

    def list_dates(self) -> list[str]:
        return sorted(self.payloads)

    def read(self, date: str) -> Any:
        if date not in self.payloads:
            raise NotFoundError("Snapshot", date)
        self.read_count += 1
        return self.payloads[date]

    def save(self, date: str, leaders: list[VolumeLeader]) -> None:
        self.payloads[date] = [{"symbol": leader.symbol, "volume": leader.volume} for leader in leaders]


@pytest.fixture
def memory_snapshot_repo() -> InMemorySnapshotRepository:
    """Provide an empty in-memory snapshot store."""
    return InMemorySnapshotRepository()


@pytest.fixture
def snapshot_dir(tmp_path) -> Path:
    """Directory the file snapshot store reads from (not created yet)."""
    return tmp_path / "snapshots"


@pytest.fixture
def snapshot_repo(snapshot_dir) -> FileSnapshotRepository:
    """Provide a file-backed snapshot store over a temp directory."""
    return FileSnapshotRepository(snapshot_dir)


@pytest.fixture
def snapshot_engine(snapshot_repo) -> SnapshotDiffEngine:
    """Provide SnapshotDiffEngine over the temp directory."""
    return SnapshotDiffEngine(snapshot_repo=snapshot_repo)


@pytest.fixture
def write_snapshot(snapshot_dir) -> Callable[[str, Any], Path]:
    """Write a raw JSON payload as it would be left by the scraper."""

    def _write(name: str, payload: Any) -> Path:
        snapshot_dir.mkdir(parents=True, exist_ok=True)
        path = snapshot_dir / (name if name.endswith(".json") else f"{name}.json")
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write


def leaders(*symbols: str) -> list[dict[str, str]]:
    """Build a bare volume-leader list with made-up volumes."""
    return [
        {"symbol": symbol, "volume": f"{(index + 1) * 1_000_000:,}"}
        for index, symbol in enumerate(symbols)
    ]


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, tmp_path, snapshot_dir) -> TestClient:
    """Provide FastAPI test client with test database and snapshot directory."""
    reset_database()
    set_settings(
        Settings(
            data_dir=tmp_path,
            database_url="sqlite://",
            snapshot_dir=snapshot_dir,
        )
    )
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.0001"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
