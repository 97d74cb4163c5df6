"""
Couche Infrastructure (adapters).

- config: Settings (pydantic-settings)
- logging: structlog
- persistence: SQLAlchemy async (repositories, unit of work)
- security: bcrypt, JWT
- activity: journal d'activite
- container: assemblage des dependances
"""
