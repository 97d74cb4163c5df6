"""Adapters du journal d'activite."""

from backoffice.infrastructure.activity.structlog_activity_logger import (
    StructlogActivityLogger,
)

__all__ = ["StructlogActivityLogger"]
