"""
Interface du journal d'activite.

Responsabilite unique:
----------------------
Construire les entrees d'activite (creation, modification,
suppression) et les publier vers un puits externe.

Contrat:
--------
Un echec de publication n'interrompt JAMAIS l'operation metier:
il est journalise puis ignore. Ce comportement est porte par la
classe de base; les adapters n'implementent que publish().
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from backoffice.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ActivityAction(str, Enum):
    """Action journalisee (verbe HTTP equivalent)."""

    CREATE = "POST"
    UPDATE = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ActivityLog:
    """
    Entree du journal d'activite.

    Attributes:
        entity_type: Type d'entite (user, brand, ...).
        entity_id: ID de l'entite.
        action: Action effectuee.
        record_before: Etat avant (update/delete).
        record_after: Etat apres (create/update).
        created_at: Horodatage.
    """

    entity_type: str
    entity_id: str
    action: ActivityAction
    record_before: Optional[dict[str, Any]] = None
    record_after: Optional[dict[str, Any]] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ActivityLogger(ABC):
    """Journal d'activite des operations d'ecriture."""

    @abstractmethod
    async def publish(self, entry: ActivityLog) -> None:
        """Publie une entree (peut lever)."""
        ...

    async def log_create(
        self, entity_type: str, entity_id: Any, after: Optional[dict] = None
    ) -> None:
        await self._safe_publish(ActivityLog(
            entity_type=entity_type,
            entity_id=str(entity_id),
            action=ActivityAction.CREATE,
            record_after=after,
        ))

    async def log_update(
        self,
        entity_type: str,
        entity_id: Any,
        before: Optional[dict] = None,
        after: Optional[dict] = None,
    ) -> None:
        await self._safe_publish(ActivityLog(
            entity_type=entity_type,
            entity_id=str(entity_id),
            action=ActivityAction.UPDATE,
            record_before=before,
            record_after=after,
        ))

    async def log_delete(
        self, entity_type: str, entity_id: Any, before: Optional[dict] = None
    ) -> None:
        await self._safe_publish(ActivityLog(
            entity_type=entity_type,
            entity_id=str(entity_id),
            action=ActivityAction.DELETE,
            record_before=before,
        ))

    async def _safe_publish(self, entry: ActivityLog) -> None:
        try:
            await self.publish(entry)
        except Exception as e:
            logger.warning(
                "activity_log_publish_failed",
                entity_type=entry.entity_type,
                entity_id=entry.entity_id,
                action=entry.action.value,
                error=str(e),
                error_type=type(e).__name__,
            )
