"""
Outils communs aux DTOs de sortie.
"""

import dataclasses
from datetime import datetime
from typing import Any


def to_record(output: Any) -> dict[str, Any]:
    """
    Convertit un DTO (dataclass) en dict serialisable.

    Les dates sont converties en ISO 8601. Utilise pour les
    entrees du journal d'activite.
    """
    return _serialize(dataclasses.asdict(output))


def _serialize(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(v) for v in value]
    return value
