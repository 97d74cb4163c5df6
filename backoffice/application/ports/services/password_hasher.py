"""
Interface du service de hachage de mots de passe.
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """
    Hache et verifie les mots de passe.

    Implementee par BcryptPasswordHasher.
    """

    @abstractmethod
    async def hash(self, plain: str) -> str:
        """Retourne le hash de `plain`."""
        ...

    @abstractmethod
    async def compare(self, plain: str, hashed: str) -> bool:
        """True si `plain` correspond a `hashed`."""
        ...
