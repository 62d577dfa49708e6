import logging
from typing import Optional

from family_ledger.core.config import settings


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging for applications embedding the engine."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
