"""Bcrypt hash backend adapter."""

from __future__ import annotations

import bcrypt

from passguard.application.ports.hash_backend_port import BackendError, HashBackendPort

BCRYPT_MIN_LOG_ROUNDS = 4
BCRYPT_MAX_LOG_ROUNDS = 31
BCRYPT_DEFAULT_LOG_ROUNDS = 12
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptHashBackend(HashBackendPort):
    """Hash backend using bcrypt, with cost expressed as log rounds.

    Passwords are truncated to bcrypt's 72-byte input limit on both hash and
    verify, so long passwords behave the same on every code path.
    """

    def __init__(self, *, log_rounds: int = BCRYPT_DEFAULT_LOG_ROUNDS) -> None:
        self._log_rounds = _checked_log_rounds(log_rounds)

    def hash_password(self, password: str, *, cost: int) -> str:
        salt = bcrypt.gensalt(rounds=_checked_log_rounds(cost))
        try:
            return bcrypt.hashpw(_encode(password), salt).decode("utf-8")
        except ValueError as exc:
            raise BackendError(f"bcrypt hashing failed: {exc}") from exc

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError as exc:
            raise BackendError(f"invalid bcrypt hash: {exc}") from exc

    def default_cost(self) -> int:
        return self._log_rounds


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def _checked_log_rounds(log_rounds: int) -> int:
    if not BCRYPT_MIN_LOG_ROUNDS <= log_rounds <= BCRYPT_MAX_LOG_ROUNDS:
        raise BackendError(
            f"bcrypt log rounds must be between {BCRYPT_MIN_LOG_ROUNDS} "
            f"and {BCRYPT_MAX_LOG_ROUNDS}, got {log_rounds}"
        )
    return log_rounds
