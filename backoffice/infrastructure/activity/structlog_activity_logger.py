"""
StructlogActivityLogger - Journal d'activite via structlog.

Chaque entree est emise comme un evenement "activity_logged"
(JSON en production), consommable par la collecte de logs.
"""

from backoffice.application.ports.services import ActivityLog, ActivityLogger
from backoffice.infrastructure.logging import get_logger

logger = get_logger("backoffice.activity")


class StructlogActivityLogger(ActivityLogger):
    """Publie les entrees d'activite dans les logs structures."""

    async def publish(self, entry: ActivityLog) -> None:
        logger.info(
            "activity_logged",
            entity_type=entry.entity_type,
            entity_id=entry.entity_id,
            action=entry.action.value,
            record_before=entry.record_before,
            record_after=entry.record_after,
            created_at=entry.created_at.isoformat(),
        )
