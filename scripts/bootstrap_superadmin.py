#!/usr/bin/env python3
"""
Script de creation du premier SuperAdmin.

Refuse si un SuperAdmin existe deja. Les roles predefinis sont
crees au passage s'ils manquent.

Usage:
    python scripts/bootstrap_superadmin.py --name "Jane Doe" --email jane@example.com

Le mot de passe est demande de maniere interactive (ou lu depuis
BACKOFFICE_BOOTSTRAP_PASSWORD).
"""

import os
import sys
import asyncio
import argparse
import getpass
from pathlib import Path

# Ajouter le dossier parent au path
sys.path.insert(0, str(Path(__file__).parent.parent))

from backoffice.application.use_cases.users import BootstrapSuperAdminRequest
from backoffice.infrastructure.config import get_settings
from backoffice.infrastructure.container import Container
from backoffice.infrastructure.logging import configure_logging


async def bootstrap(request: BootstrapSuperAdminRequest, create_tables: bool) -> int:
    container = Container.create(settings=get_settings())
    try:
        if create_tables:
            await container.db.create_tables()

        result = await container.bootstrap_super_admin.execute(request)
        if not result.success:
            print(f"Echec: {result.error}")
            return 1

        user = result.value
        print(f"SuperAdmin cree: {user.email} (id={user.id})")
        return 0
    finally:
        await container.db.dispose()


def main():
    parser = argparse.ArgumentParser(description="Creation du premier SuperAdmin")
    parser.add_argument("--name", required=True, help="Nom complet")
    parser.add_argument("--email", required=True, help="Adresse email")
    parser.add_argument("--phone-number", default=None)
    parser.add_argument("--phone-country-code", default=None)
    parser.add_argument("--create-tables", action="store_true",
                        help="Cree les tables manquantes avant")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(
        json_logs=settings.json_logs,
        log_level=settings.log_level,
        database_echo=settings.database_echo,
    )

    password = os.getenv("BACKOFFICE_BOOTSTRAP_PASSWORD") or getpass.getpass("Mot de passe: ")
    if not password:
        print("Mot de passe requis")
        sys.exit(1)

    request = BootstrapSuperAdminRequest(
        name=args.name,
        email=args.email,
        password=password,
        phone_number=args.phone_number,
        phone_country_code=args.phone_country_code,
    )
    sys.exit(asyncio.run(bootstrap(request, create_tables=args.create_tables)))


if __name__ == "__main__":
    main()
