"""Password hashing and verification backed by bcrypt."""

from __future__ import annotations

import bcrypt

DEFAULT_ROUNDS = 10
MIN_ROUNDS = 4
MAX_ROUNDS = 31

# bcrypt only consumes the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


class PasswordHashingError(Exception):
    """Raised when a digest cannot be produced or parsed."""


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Salted, cost-parameterised one-way password hashing.

    The salt and cost factor are embedded in the digest, so a digest produced
    under one cost factor still verifies after the configured cost changes.
    Instances hold no mutable state and are safe to share between requests.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self._rounds = self._check_rounds(rounds)

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str, rounds: int | None = None) -> str:
        """Hash plain text password using bcrypt."""
        cost = self._rounds if rounds is None else self._check_rounds(rounds)
        try:
            digest = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=cost))
        except (TypeError, ValueError) as exc:
            raise PasswordHashingError("unable to hash password") from exc
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a plain text password against a stored bcrypt hash.

        A mismatch returns ``False``; a digest that is not a bcrypt hash
        raises :class:`PasswordHashingError`.
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (TypeError, ValueError) as exc:
            raise PasswordHashingError("stored password hash is malformed") from exc

    @staticmethod
    def _check_rounds(rounds: int) -> int:
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt cost factor must be between {MIN_ROUNDS} and {MAX_ROUNDS}, got {rounds}")
        return rounds


__all__ = ["DEFAULT_ROUNDS", "PasswordHasher", "PasswordHashingError"]
