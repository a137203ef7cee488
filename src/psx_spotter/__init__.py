"""PSX Spotter - portfolio ledger and daily volume-leader tracking."""

__version__ = "0.1.0"
