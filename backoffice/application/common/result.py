"""
Result - Resultat etiquete succes/echec des use cases.

Responsabilite unique:
----------------------
Transporter soit une valeur (succes), soit une DomainException
(echec attendu). Les erreurs d'infrastructure ne passent pas par
Result: elles sont propagees.

Usage:
------
    result = await use_case.execute(request)
    if result.success:
        print(result.value)
    else:
        print(result.code, result.error.message)
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from backoffice.domain.exceptions import DomainException, ErrorKind

T = TypeVar("T")


@dataclass
class Result(Generic[T]):
    """
    Reponse d'un use case.

    Attributes:
        success: True si l'operation a reussi.
        value: Valeur produite (si succes).
        error: Erreur metier (si echec).
    """

    success: bool
    value: Optional[T] = None
    error: Optional[DomainException] = None

    @classmethod
    def ok(cls, value: T = None) -> "Result[T]":
        """Factory pour succes."""
        return cls(success=True, value=value)

    @classmethod
    def fail(cls, error: DomainException) -> "Result[T]":
        """Factory pour echec."""
        return cls(success=False, error=error)

    @property
    def code(self) -> Optional[str]:
        """Code de l'erreur, None si succes."""
        return self.error.code if self.error else None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error else None

    def unwrap(self) -> T:
        """Retourne la valeur, ou leve l'erreur metier."""
        if not self.success:
            raise self.error
        return self.value
