"""
Back Office Core - Architecture Hexagonale

Structure:
    - domain/: Coeur metier (entites, specification, ports, exceptions)
    - application/: Use cases, DTOs et ports de services
    - infrastructure/: Adapters (SQLAlchemy, bcrypt, JWT, structlog)
"""

__version__ = "1.0.0"
