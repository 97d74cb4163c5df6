"""
Application Layer - Orchestration des cas d'utilisation.

Ce module contient:
    - common/: Result etiquete et metadonnees de pagination
    - dto/: Objets de sortie exposes aux appelants
    - ports/services/: Interfaces des services externes
    - use_cases/: Cas d'utilisation (auth, users, roles,
      influencers, brands, beats)
"""
