import logging
from typing import Optional

from .core.config import Settings, get_settings
from .services import LedgerService


def create_ledger(settings: Optional[Settings] = None) -> LedgerService:
    """Configure logging and return a ledger restored from the last snapshot."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    ledger = LedgerService.from_settings(settings)
    ledger.load()
    return ledger
