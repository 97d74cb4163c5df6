"""
Base declarative SQLAlchemy commune a tous les modeles.
"""

from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Horodatage UTC (timezone-aware) pour les colonnes de dates."""
    return datetime.now(timezone.utc)
