#!/usr/bin/env python3
"""
Script d'initialisation des roles predefinis (SuperAdmin, Admin, Executive).

Idempotent: les roles existants sont conserves, leurs libelles
mis a jour si besoin.

Usage:
    python scripts/seed_roles.py [--create-tables]

Options:
    --create-tables   Cree les tables manquantes avant le seed
"""

import sys
import asyncio
import argparse
from pathlib import Path

# Ajouter le dossier parent au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backoffice.infrastructure.config import get_settings
from backoffice.infrastructure.container import Container
from backoffice.infrastructure.logging import configure_logging


async def seed(create_tables: bool = False) -> int:
    settings = get_settings()
    container = Container.create(settings=settings)
    try:
        if create_tables:
            await container.db.create_tables()

        result = await container.seed_roles.execute()
        if not result.success:
            print(f"Echec: {result.error}")
            return 1

        print("\n" + "=" * 60)
        print("ROLES")
        print("=" * 60)
        for role in result.value:
            print(f"  #{role.id:<4} {role.key:<12} {role.name_en} / {role.name_ar}")
        return 0
    finally:
        await container.db.dispose()


def main():
    parser = argparse.ArgumentParser(description="Seed des roles predefinis")
    parser.add_argument("--create-tables", action="store_true",
                        help="Cree les tables manquantes avant le seed")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(
        json_logs=settings.json_logs,
        log_level=settings.log_level,
        database_echo=settings.database_echo,
    )

    sys.exit(asyncio.run(seed(create_tables=args.create_tables)))


if __name__ == "__main__":
    main()
