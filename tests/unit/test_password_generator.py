from __future__ import annotations

import random

import pytest

from passguard.domain.password_generator import (
    GenerationExhaustedError,
    InvalidLengthError,
    PasswordGenerator,
)
from passguard.domain.password_policy import (
    DIGITS,
    PASSWORD_ALPHABET,
    PUNCTUATION,
    PasswordPolicy,
)

POLICY = PasswordPolicy(min_length=8, generated_length=12)


class CountingRandom(random.Random):
    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.choice_calls = 0

    def choice(self, seq):  # type: ignore[no-untyped-def]
        self.choice_calls += 1
        return super().choice(seq)


def test_generated_passwords_meet_length_and_composition() -> None:
    generator = PasswordGenerator(policy=POLICY)
    alphabet = set(PASSWORD_ALPHABET)

    for trial in range(10_000):
        length = POLICY.min_length + trial % 9
        password = generator.generate(length)

        assert len(password) == length
        assert set(password) <= alphabet
        assert any(character in DIGITS for character in password)
        assert any(character in PUNCTUATION for character in password)


def test_default_length_comes_from_policy() -> None:
    generator = PasswordGenerator(policy=POLICY)

    assert len(generator.generate()) == 12


@pytest.mark.parametrize("length", [0, 1, 7])
def test_length_below_minimum_raises_invalid_length(length: int) -> None:
    generator = PasswordGenerator(policy=POLICY)

    with pytest.raises(InvalidLengthError) as exc_info:
        generator.generate(length)

    assert exc_info.value.length == length
    assert exc_info.value.min_length == 8


def test_unsatisfiable_alphabet_raises_generation_exhausted() -> None:
    source = CountingRandom(seed=7)
    generator = PasswordGenerator(
        policy=POLICY,
        alphabet="abcdef",
        random_source=source,
        max_attempts=25,
    )

    with pytest.raises(GenerationExhaustedError) as exc_info:
        generator.generate(8)

    assert exc_info.value.attempts == 25
    assert source.choice_calls == 25 * 8


def test_single_character_cannot_hold_both_classes_and_exhausts_budget() -> None:
    source = CountingRandom(seed=11)
    generator = PasswordGenerator(
        policy=PasswordPolicy(min_length=1, generated_length=1),
        alphabet="a1!",
        random_source=source,
    )

    with pytest.raises(GenerationExhaustedError):
        generator.generate(1)

    assert source.choice_calls == 1000


def test_seeded_source_is_reproducible() -> None:
    first = PasswordGenerator(policy=POLICY, random_source=random.Random(3)).generate()
    second = PasswordGenerator(policy=POLICY, random_source=random.Random(3)).generate()

    assert first == second


def test_relaxed_policy_accepts_first_candidate() -> None:
    source = CountingRandom(seed=5)
    generator = PasswordGenerator(
        policy=PasswordPolicy(required_digit=False, required_punctuation=False),
        alphabet="ab",
        random_source=source,
    )

    password = generator.generate(10)

    assert set(password) <= {"a", "b"}
    assert source.choice_calls == 10


def test_empty_alphabet_is_rejected() -> None:
    with pytest.raises(ValueError):
        PasswordGenerator(policy=POLICY, alphabet="")
