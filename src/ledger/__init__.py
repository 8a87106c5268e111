"""In-memory account ledger."""

__version__ = "0.1.0"
