"""Position repository protocol."""

from typing import Protocol, Optional

from psx_spotter.domain.models import Position


class PositionRepository(Protocol):
    """Interface for the current position set."""

    def list_all(self) -> list[Position]:
        """List all open positions, ordered by symbol."""
        ...

    def get(self, symbol: str) -> Optional[Position]:
        """Get the open position for a symbol."""
        ...

    def upsert(self, position: Position) -> Position:
        """Insert or replace the position for its symbol."""
        ...

    def delete(self, symbol: str) -> None:
        """Remove the position for a symbol."""
        ...

    def delete_all(self) -> None:
        """Remove every position (for rebuild)."""
        ...
