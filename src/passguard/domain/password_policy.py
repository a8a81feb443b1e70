"""Immutable password composition policy and shared character classes."""

from __future__ import annotations

import string
from dataclasses import dataclass

LETTERS = string.ascii_letters
DIGITS = string.digits
PUNCTUATION = string.punctuation
PASSWORD_ALPHABET = LETTERS + DIGITS + PUNCTUATION

_DIGIT_SET = frozenset(DIGITS)
_PUNCTUATION_SET = frozenset(PUNCTUATION)


class PasswordPolicyError(ValueError):
    """Raised when a password policy is built from inconsistent values."""


@dataclass(frozen=True)
class PasswordPolicy:
    """Length and character-class requirements shared by generator and validator."""

    min_length: int = 8
    generated_length: int = 12
    required_digit: bool = True
    required_punctuation: bool = True

    def __post_init__(self) -> None:
        if self.min_length < 1:
            raise PasswordPolicyError("min_length must be at least 1")
        if self.generated_length < self.min_length:
            raise PasswordPolicyError("generated_length cannot be lower than min_length")


def contains_digit(value: str) -> bool:
    return any(character in _DIGIT_SET for character in value)


def contains_punctuation(value: str) -> bool:
    return any(character in _PUNCTUATION_SET for character in value)


def satisfies_composition(*, password: str, policy: PasswordPolicy) -> bool:
    """Return whether password holds every character class the policy requires."""

    if policy.required_digit and not contains_digit(password):
        return False
    if policy.required_punctuation and not contains_punctuation(password):
        return False
    return True
