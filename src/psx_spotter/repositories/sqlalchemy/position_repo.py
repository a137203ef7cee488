"""SQLAlchemy implementation of PositionRepository."""

from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from psx_spotter.core.timezone import now_utc, to_utc
from psx_spotter.domain.models import Position
from psx_spotter.repositories.sqlalchemy.orm_models import PositionORM


class SqlAlchemyPositionRepository:
    """
    SQLAlchemy-backed position repository.

    Writes are flushed, not committed; the ledger engine owns the commit.
    """

    def __init__(self, db: Session):
        self._db = db

    def list_all(self) -> list[Position]:
        """List all open positions, ordered by symbol."""
        orm_positions = (
            self._db.query(PositionORM)
            .order_by(PositionORM.symbol)
            .all()
        )
        return [self._to_domain(p) for p in orm_positions]

    def get(self, symbol: str) -> Optional[Position]:
        """Get the open position for a symbol."""
        orm_pos = self._db.get(PositionORM, symbol)
        return self._to_domain(orm_pos) if orm_pos else None

    def upsert(self, position: Position) -> Position:
        """Insert or replace the position for its symbol."""
        orm_pos = self._db.get(PositionORM, position.symbol)
        updated_at = (position.updated_at or now_utc()).replace(tzinfo=None)

        if orm_pos:
            orm_pos.quantity = position.quantity
            orm_pos.average_price = position.average_price
            orm_pos.updated_at = updated_at
        else:
            orm_pos = PositionORM(
                symbol=position.symbol,
                quantity=position.quantity,
                average_price=position.average_price,
                updated_at=updated_at,
            )
            self._db.add(orm_pos)

        self._db.flush()
        return self._to_domain(orm_pos)

    def delete(self, symbol: str) -> None:
        """Remove the position for a symbol."""
        self._db.query(PositionORM).filter(PositionORM.symbol == symbol).delete()
        self._db.flush()

    def delete_all(self) -> None:
        """Remove every position (for rebuild)."""
        self._db.query(PositionORM).delete()
        self._db.flush()

    @staticmethod
    def _to_domain(orm: PositionORM) -> Position:
        """Convert ORM model to domain model."""
        return Position(
            symbol=orm.symbol,
            quantity=Decimal(str(orm.quantity)),
            average_price=Decimal(str(orm.average_price)),
            updated_at=to_utc(orm.updated_at) if orm.updated_at else None,
        )
