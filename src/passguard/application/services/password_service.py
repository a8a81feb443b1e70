"""Application facade over password generation, validation, hashing and verification."""

from __future__ import annotations

from passguard.application.ports.hash_backend_port import HashBackendPort
from passguard.application.services.verification_service import PasswordVerificationService
from passguard.domain.password_generator import PasswordGenerator
from passguard.domain.password_policy import PasswordPolicy
from passguard.domain.password_validator import ValidationResult, validate_password


class PasswordService:
    """Expose the password use-cases behind one policy and one backend."""

    def __init__(
        self,
        *,
        policy: PasswordPolicy,
        backend: HashBackendPort,
        generator: PasswordGenerator | None = None,
    ) -> None:
        self._policy = policy
        self._backend = backend
        self._generator = generator if generator is not None else PasswordGenerator(policy=policy)
        self._verification = PasswordVerificationService(backend=backend)

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def hash_password(self, password: str) -> str:
        """Hash plaintext password for storage at the backend default cost."""

        return self._backend.hash_password(password, cost=self._backend.default_cost())

    def check_password(self, *, password: str, password_hash: str | None) -> bool:
        return self._verification.check_password(password=password, password_hash=password_hash)

    def dummy_check_password(self) -> bool:
        return self._verification.dummy_check_password()

    def generate_password(self, length: int | None = None) -> str:
        return self._generator.generate(length)

    def validate_password(self, password: str) -> ValidationResult:
        return validate_password(password=password, policy=self._policy)
