"""Port for key-derivation backends used to hash and verify passwords."""

from __future__ import annotations

from typing import Protocol


class BackendError(RuntimeError):
    """Raised when a hash backend rejects its input or fails internally."""


class HashBackendPort(Protocol):
    """Password hashing/verification contract with a tunable cost parameter."""

    def hash_password(self, password: str, *, cost: int) -> str:
        """Hash plaintext password with the given cost and a fresh salt."""

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        """Verify plaintext password against stored hash."""

    def default_cost(self) -> int:
        """Return the configured cost used for regular hashing."""
