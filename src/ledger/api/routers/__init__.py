"""API routers package."""

from ledger.api.routers.accounts import router as accounts_router

__all__ = [
    "accounts_router",
]
