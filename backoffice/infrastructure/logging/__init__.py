"""
Logging Infrastructure - Logging structure avec structlog.

Responsabilite:
---------------
Fournir un logging JSON structure pour production.

Usage:
------
    from backoffice.infrastructure.logging import get_logger

    logger = get_logger(__name__)
    logger.info("user_created", user_id="123")
"""

from backoffice.infrastructure.logging.config import (
    configure_logging,
    get_logger,
    log_context,
)

__all__ = ["configure_logging", "get_logger", "log_context"]
