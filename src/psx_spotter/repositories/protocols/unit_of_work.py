"""Unit of work protocol."""

from typing import Protocol


class UnitOfWork(Protocol):
    """
    Commit/rollback boundary shared by the position and trade repositories.

    A SQLAlchemy Session satisfies this protocol.
    """

    def commit(self) -> None:
        ...

    def rollback(self) -> None:
        ...
