"""SQLAlchemy implementation of TradeRepository."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import and_
from sqlalchemy.orm import Session

from psx_spotter.core.timezone import to_utc
from psx_spotter.domain.models import Trade, TradeType
from psx_spotter.repositories.sqlalchemy.orm_models import TradeORM


class SqlAlchemyTradeRepository:
    """
    SQLAlchemy-backed trade log.

    Append-only: there is no update or delete. Writes are flushed, not
    committed; the ledger engine owns the commit.
    """

    def __init__(self, db: Session):
        self._db = db

    def append(self, trade: Trade) -> Trade:
        """Append a trade to the log."""
        orm_trade = self._to_orm(trade)
        self._db.add(orm_trade)
        self._db.flush()
        return self._to_domain(orm_trade)

    def list_all(self) -> list[Trade]:
        """List every trade in insertion order."""
        return self.query()

    def query(
        self,
        symbol: Optional[str] = None,
        trade_type: Optional[TradeType] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[Trade]:
        """List trades matching all supplied filters, in insertion order."""
        query = self._db.query(TradeORM)

        conditions = []
        if symbol:
            conditions.append(TradeORM.symbol == symbol)
        if trade_type:
            conditions.append(TradeORM.trade_type == trade_type)
        if start:
            conditions.append(TradeORM.timestamp >= self._naive_utc(start))
        if end:
            conditions.append(TradeORM.timestamp <= self._naive_utc(end))

        if conditions:
            query = query.filter(and_(*conditions))

        query = query.order_by(TradeORM.seq)
        return [self._to_domain(t) for t in query.all()]

    @staticmethod
    def _naive_utc(dt: datetime) -> datetime:
        """Timestamps are stored as naive UTC (SQLite has no tz support)."""
        return to_utc(dt).replace(tzinfo=None)

    def _to_orm(self, trade: Trade) -> TradeORM:
        """Convert domain model to ORM model."""
        return TradeORM(
            trade_id=trade.trade_id,
            trade_type=trade.trade_type,
            symbol=trade.symbol,
            quantity=trade.quantity,
            price=trade.price,
            proceeds=trade.proceeds,
            timestamp=self._naive_utc(trade.timestamp),
        )

    @staticmethod
    def _to_domain(orm: TradeORM) -> Trade:
        """Convert ORM model to domain model."""
        return Trade(
            trade_id=orm.trade_id,
            trade_type=orm.trade_type,
            symbol=orm.symbol,
            quantity=Decimal(str(orm.quantity)),
            price=Decimal(str(orm.price)),
            proceeds=Decimal(str(orm.proceeds)) if orm.proceeds is not None else None,
            timestamp=to_utc(orm.timestamp),
        )
