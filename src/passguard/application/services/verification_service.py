"""Password verification that costs the same whether or not an account exists."""

from __future__ import annotations

import logging

from passguard.application.ports.hash_backend_port import BackendError, HashBackendPort

logger = logging.getLogger(__name__)

DUMMY_PASSWORD = "password"


class VerificationError(ValueError):
    """Raised when a stored password hash cannot be verified (corrupt or malformed)."""


class PasswordVerificationService:
    """Verify passwords against stored hashes without leaking account existence.

    When no stored hash is available a full hash is computed at the backend's
    default cost and discarded, so the failure path costs as much as a real
    mismatch. Once started, that hash always runs to completion.
    """

    def __init__(self, *, backend: HashBackendPort) -> None:
        self._backend = backend

    def check_password(self, *, password: str, password_hash: str | None) -> bool:
        """Verify against the stored hash, or pay the dummy cost and return False."""

        if password_hash is None:
            self._dummy_hash(password=password)
            logger.debug("password_check_failed reason=no_stored_hash")
            return False

        try:
            is_valid = self._backend.verify_password(
                password=password,
                password_hash=password_hash,
            )
        except BackendError as error:
            logger.warning("password_check_malformed_hash error=%s", error)
            raise VerificationError("stored password hash could not be verified") from error

        if not is_valid:
            logger.debug("password_check_failed reason=mismatch")
        return is_valid

    def dummy_check_password(self) -> bool:
        """Hash a fixed password at default cost and always return False."""

        self._dummy_hash(password=DUMMY_PASSWORD)
        logger.debug("password_check_failed reason=no_account")
        return False

    def _dummy_hash(self, *, password: str) -> None:
        self._backend.hash_password(password, cost=self._backend.default_cost())
