"""
Logging Config - Configuration structlog du back office.

Responsabilite unique:
----------------------
Configurer structlog (JSON en production, console en developpement)
avec les processeurs propres au back office.

Processeurs ajoutes:
--------------------
- add_service_context: champ "service" sur chaque evenement
- redact_sensitive_fields: masque mots de passe, hashes et jetons,
  y compris dans les enregistrements avant/apres du journal
  d'activite (record_before / record_after)
- merge_contextvars: champs lies par log_context (uow_id du
  UnitOfWork)

Usage:
------
    from backoffice.infrastructure.logging import configure_logging, get_logger

    configure_logging(json_logs=True)
    logger = get_logger(__name__)
    logger.info("user_created", user_id="123")
"""

import logging
import sys
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

import structlog

SERVICE_NAME = "backoffice"

SENSITIVE_KEYS = frozenset({
    "password",
    "password_hash",
    "token",
    "access_token",
    "jwt_secret_key",
    "secret",
})
REDACTED = "***"

# Loggers bavards de SQLAlchemy: leur niveau suit database_echo, pas log_level
NOISY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg")


def add_service_context(service: str) -> Callable[[Any, str, dict], dict]:
    """Processeur: ajoute le nom du service (sans ecraser une valeur liee)."""

    def processor(logger: Any, method_name: str, event_dict: dict) -> dict:
        event_dict.setdefault("service", service)
        return event_dict

    return processor


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if key in SENSITIVE_KEYS and item is not None else _redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return type(value)(_redact(item) for item in value)
    return value


def redact_sensitive_fields(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Processeur: masque les champs sensibles, a tout niveau d'imbrication."""
    return _redact(event_dict)


def build_processors(json_logs: bool, service: str = SERVICE_NAME) -> list:
    """Chaine de processeurs structlog pour le mode demande."""
    processors = [
        structlog.contextvars.merge_contextvars,
        add_service_context(service),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        redact_sensitive_fields,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    return processors


def configure_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
    service: str = SERVICE_NAME,
    database_echo: bool = False,
) -> None:
    """
    Configure le logging global.

    Args:
        json_logs: True pour JSON (production), False pour la console.
        log_level: Niveau minimum (DEBUG, INFO, WARNING, ERROR).
        service: Valeur du champ "service".
        database_echo: Laisse passer les requetes SQL au niveau INFO.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Niveau de log inconnu: {log_level}")

    structlog.configure(
        processors=build_processors(json_logs, service),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    noisy_level = logging.INFO if database_echo else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Retourne un logger structure.

    Example:
        logger = get_logger(__name__)
        logger.info("event", key="value")
    """
    return structlog.get_logger(name)


@contextmanager
def log_context(**values) -> Iterator[None]:
    """
    Lie des valeurs au contexte de log le temps d'un bloc.

    Le UnitOfWork y lie uow_id: tous les evenements emis pendant la
    transaction (repositories compris) le portent.

    Example:
        with log_context(uow_id="a1b2"):
            logger.info("user_created")   # porte uow_id
    """
    with structlog.contextvars.bound_contextvars(**values):
        yield
