from __future__ import annotations

from passguard.domain.password_policy import PasswordPolicy
from passguard.domain.password_validator import ValidationOutcome, validate_password

POLICY = PasswordPolicy(min_length=8, generated_length=12)


def test_short_password_is_rejected_citing_length() -> None:
    result = validate_password(password="short1!", policy=POLICY)

    assert result.is_valid is False
    assert result.outcome is ValidationOutcome.TOO_SHORT
    assert result.reason == "too short, minimum 8 characters"


def test_length_check_short_circuits_composition_check() -> None:
    result = validate_password(password="abc", policy=POLICY)

    assert result.outcome is ValidationOutcome.TOO_SHORT


def test_long_password_with_digit_and_punctuation_is_valid() -> None:
    result = validate_password(password="longenough1!", policy=POLICY)

    assert result.is_valid is True
    assert result.outcome is ValidationOutcome.VALID
    assert result.reason is None


def test_missing_punctuation_is_rejected_citing_composition() -> None:
    result = validate_password(password="longenoughnopunct1", policy=POLICY)

    assert result.is_valid is False
    assert result.outcome is ValidationOutcome.WEAK_COMPOSITION
    assert result.reason == "must contain at least one digit and one punctuation character"


def test_missing_digit_is_rejected_citing_composition() -> None:
    result = validate_password(password="longenough!!", policy=POLICY)

    assert result.outcome is ValidationOutcome.WEAK_COMPOSITION


def test_exact_minimum_length_is_accepted() -> None:
    result = validate_password(password="abcdef1!", policy=POLICY)

    assert result.is_valid is True


def test_reason_names_only_required_classes() -> None:
    digit_only = PasswordPolicy(required_digit=True, required_punctuation=False)
    punctuation_only = PasswordPolicy(required_digit=False, required_punctuation=True)

    assert validate_password(password="abcdefgh", policy=digit_only).reason == (
        "must contain at least one digit"
    )
    assert validate_password(password="abcdefgh", policy=punctuation_only).reason == (
        "must contain at least one punctuation character"
    )
    assert validate_password(password="abcdefg!", policy=digit_only).is_valid is False
    assert validate_password(password="abcdefg1", policy=digit_only).is_valid is True


def test_relaxed_policy_accepts_letters_only() -> None:
    relaxed = PasswordPolicy(required_digit=False, required_punctuation=False)

    assert validate_password(password="onlyletters", policy=relaxed).is_valid is True


def test_validation_is_deterministic() -> None:
    first = validate_password(password="longenoughnopunct1", policy=POLICY)
    second = validate_password(password="longenoughnopunct1", policy=POLICY)

    assert first == second
