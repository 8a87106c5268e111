"""Application context for in-process service management.

Owns the account collection for the lifetime of the process and hands out
the BankingService that the HTTP API and the console both drive.
"""

import logging
from typing import Optional

from ledger.config.settings import get_settings
from ledger.repositories.memory import InMemoryAccountCollection
from ledger.services import BankingService, seed_sample_accounts

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing access to the ledger.

    Accounts live only as long as the context; nothing is persisted.
    """

    def __init__(self, accounts: Optional[InMemoryAccountCollection] = None):
        self._accounts = accounts if accounts is not None else InMemoryAccountCollection()
        self._banking: Optional[BankingService] = None
        self._initialized = False

    def initialize(self, seed: Optional[bool] = None) -> None:
        """
        Prepare the context, optionally loading the sample accounts.

        Args:
            seed: Load sample accounts. Defaults to the seed_sample_accounts setting.
        """
        if seed is None:
            seed = get_settings().seed_sample_accounts

        self._accounts.clear()
        if seed:
            count = seed_sample_accounts(self._accounts)
            logger.info("Seeded %d sample accounts", count)

        self._banking = None
        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        """Check if context is initialized."""
        return self._initialized

    @property
    def accounts(self) -> InMemoryAccountCollection:
        return self._accounts

    @property
    def banking(self) -> BankingService:
        """Get the BankingService instance."""
        if self._banking is None:
            self._banking = BankingService(self._accounts)
        return self._banking

    def close(self) -> None:
        """Drop every account held by the context."""
        self._accounts.clear()
        self._banking = None
        self._initialized = False


# Global application context (one ledger per process)
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
        _app_context.initialize()
    return _app_context


def set_app_context(context: Optional[AppContext]) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
