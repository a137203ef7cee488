"""Volume-leader snapshot domain models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VolumeLeader:
    """One row of the exchange's volume-leaders table."""

    symbol: str
    volume: str


@dataclass
class Snapshot:
    """
    One trading day's volume leaders in canonical shape.

    Produced only by normalize_snapshot(); the rest of the diff engine never
    looks at how the snapshot was persisted.
    """

    date: str
    volume_leaders: list[VolumeLeader] = field(default_factory=list)

    @property
    def symbols(self) -> set[str]:
        return {leader.symbol for leader in self.volume_leaders}
