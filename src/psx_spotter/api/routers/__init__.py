"""API routers package."""

from psx_spotter.api.routers.portfolio import router as portfolio_router
from psx_spotter.api.routers.trades import router as trades_router
from psx_spotter.api.routers.snapshots import router as snapshots_router

__all__ = [
    "portfolio_router",
    "trades_router",
    "snapshots_router",
]
