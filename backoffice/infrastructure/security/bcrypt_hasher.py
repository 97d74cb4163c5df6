"""
BcryptPasswordHasher - Hachage des mots de passe avec bcrypt.

bcrypt est CPU-bound: hash et verification sont executes dans un
thread (asyncio.to_thread) pour ne pas bloquer la boucle.
"""

import asyncio

import bcrypt

from backoffice.application.ports.services import PasswordHasher


class BcryptPasswordHasher(PasswordHasher):
    """
    Implementation bcrypt du port PasswordHasher.

    Args:
        rounds: Work factor (defaut: 12).
    """

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    async def hash(self, plain: str) -> str:
        return await asyncio.to_thread(self._hash_sync, plain)

    async def compare(self, plain: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._compare_sync, plain, hashed)

    def _hash_sync(self, plain: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _compare_sync(plain: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Hash mal forme
            return False
