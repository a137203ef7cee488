"""SQLAlchemy ORM model definitions."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Enum as SqlEnum,
)
from sqlalchemy.types import TypeDecorator

from psx_spotter.repositories.sqlalchemy.database import Base
from psx_spotter.domain.models.enums import TradeType


class DecimalText(TypeDecorator):
    """Decimal stored as its exact string form (SQLite has no decimal type)."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(str(value)))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class PositionORM(Base):
    """SQLAlchemy model for Position (current holdings)."""

    __tablename__ = "positions"

    symbol = Column(String(20), primary_key=True)
    quantity = Column(DecimalText, nullable=False)
    average_price = Column(DecimalText, nullable=False)
    updated_at = Column(DateTime, nullable=True, default=datetime.utcnow)


class TradeORM(Base):
    """SQLAlchemy model for Trade (append-only ledger entry)."""

    __tablename__ = "trades"

    # Insertion order of the log
    seq = Column(Integer, primary_key=True, autoincrement=True)
    trade_id = Column(String(36), unique=True, nullable=False)
    trade_type = Column(SqlEnum(TradeType), nullable=False)
    symbol = Column(String(20), nullable=False, index=True)
    quantity = Column(DecimalText, nullable=False)
    price = Column(DecimalText, nullable=False)
    proceeds = Column(DecimalText, nullable=True)
    timestamp = Column(DateTime, nullable=False)
