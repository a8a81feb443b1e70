"""Password strength validation against a composition policy."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from passguard.domain.password_policy import PasswordPolicy, satisfies_composition


class ValidationOutcome(StrEnum):
    """Supported password validation outcomes."""

    VALID = "valid"
    TOO_SHORT = "too_short"
    WEAK_COMPOSITION = "weak_composition"


@dataclass(frozen=True)
class ValidationResult:
    """Validation result with a human-readable reason for rejected passwords."""

    outcome: ValidationOutcome
    reason: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.outcome is ValidationOutcome.VALID


def validate_password(*, password: str, policy: PasswordPolicy) -> ValidationResult:
    """Check length first, then character classes, returning the first failure."""

    if len(password) < policy.min_length:
        return ValidationResult(
            outcome=ValidationOutcome.TOO_SHORT,
            reason=f"too short, minimum {policy.min_length} characters",
        )

    if not satisfies_composition(password=password, policy=policy):
        return ValidationResult(
            outcome=ValidationOutcome.WEAK_COMPOSITION,
            reason=_composition_reason(policy=policy),
        )

    return ValidationResult(outcome=ValidationOutcome.VALID)


def _composition_reason(*, policy: PasswordPolicy) -> str:
    if policy.required_digit and policy.required_punctuation:
        return "must contain at least one digit and one punctuation character"
    if policy.required_digit:
        return "must contain at least one digit"
    return "must contain at least one punctuation character"
