"""Random password generation with guaranteed character-class composition."""

from __future__ import annotations

import logging
import secrets
from random import Random

from passguard.domain.password_policy import (
    PASSWORD_ALPHABET,
    PasswordPolicy,
    satisfies_composition,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000


class InvalidLengthError(ValueError):
    """Raised when a requested password length is below the policy minimum."""

    def __init__(self, *, length: int, min_length: int) -> None:
        super().__init__(f"password length {length} is below minimum {min_length}")
        self.length = length
        self.min_length = min_length


class GenerationExhaustedError(RuntimeError):
    """Raised when no candidate satisfied the composition policy within the retry budget."""

    def __init__(self, *, length: int, attempts: int) -> None:
        super().__init__(
            f"no password of length {length} satisfied the composition policy "
            f"after {attempts} attempts"
        )
        self.length = length
        self.attempts = attempts


class PasswordGenerator:
    """Draw passwords uniformly from a fixed alphabet until composition holds.

    Whole candidates are redrawn on failure instead of forcing characters into
    fixed positions, so every accepted password is uniform over the set of
    compliant strings.
    """

    def __init__(
        self,
        *,
        policy: PasswordPolicy,
        alphabet: str = PASSWORD_ALPHABET,
        random_source: Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if not alphabet:
            raise ValueError("alphabet cannot be empty")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._policy = policy
        self._alphabet = alphabet
        self._random = random_source if random_source is not None else secrets.SystemRandom()
        self._max_attempts = max_attempts

    def generate(self, length: int | None = None) -> str:
        """Return a compliant password of `length` characters (policy default when None)."""

        resolved_length = self._policy.generated_length if length is None else length
        if resolved_length < self._policy.min_length:
            raise InvalidLengthError(length=resolved_length, min_length=self._policy.min_length)

        for _ in range(self._max_attempts):
            candidate = "".join(
                self._random.choice(self._alphabet) for _ in range(resolved_length)
            )
            if satisfies_composition(password=candidate, policy=self._policy):
                return candidate

        logger.warning(
            "password_generation_exhausted length=%s attempts=%s",
            resolved_length,
            self._max_attempts,
        )
        raise GenerationExhaustedError(length=resolved_length, attempts=self._max_attempts)
