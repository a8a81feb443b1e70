"""PBKDF2-SHA512 hash backend adapter.

Hashes use the modular crypt layout `$pbkdf2-sha512$<rounds>$<salt>$<checksum>`
where salt and checksum are adapted base64 (`.` instead of `+`, no padding).
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os

from passguard.application.ports.hash_backend_port import BackendError, HashBackendPort

PBKDF2_IDENTIFIER = "pbkdf2-sha512"
PBKDF2_MIN_ROUNDS = 1
PBKDF2_MAX_ROUNDS = 4_294_967_295
PBKDF2_DEFAULT_ROUNDS = 60_000
PBKDF2_MIN_SALT_LENGTH = 16
PBKDF2_MAX_SALT_LENGTH = 1024
PBKDF2_DEFAULT_SALT_LENGTH = 16


class Pbkdf2Sha512HashBackend(HashBackendPort):
    """Hash backend using PBKDF2-HMAC-SHA512, with cost expressed as iterations."""

    def __init__(
        self,
        *,
        rounds: int = PBKDF2_DEFAULT_ROUNDS,
        salt_length: int = PBKDF2_DEFAULT_SALT_LENGTH,
    ) -> None:
        if not PBKDF2_MIN_SALT_LENGTH <= salt_length <= PBKDF2_MAX_SALT_LENGTH:
            raise BackendError(
                f"pbkdf2 salt length must be between {PBKDF2_MIN_SALT_LENGTH} "
                f"and {PBKDF2_MAX_SALT_LENGTH}, got {salt_length}"
            )
        self._rounds = _checked_rounds(rounds)
        self._salt_length = salt_length

    def hash_password(self, password: str, *, cost: int) -> str:
        rounds = _checked_rounds(cost)
        salt = os.urandom(self._salt_length)
        checksum = _derive(password=password, salt=salt, rounds=rounds)
        return f"${PBKDF2_IDENTIFIER}${rounds}${_ab64_encode(salt)}${_ab64_encode(checksum)}"

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        rounds, salt, expected = _parse_hash(password_hash)
        checksum = _derive(password=password, salt=salt, rounds=rounds)
        return hmac.compare_digest(checksum, expected)

    def default_cost(self) -> int:
        return self._rounds


def _derive(*, password: str, salt: bytes, rounds: int) -> bytes:
    try:
        encoded = password.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise BackendError("password cannot be encoded as utf-8") from exc
    return hashlib.pbkdf2_hmac("sha512", encoded, salt, rounds)


def _parse_hash(password_hash: str) -> tuple[int, bytes, bytes]:
    parts = password_hash.split("$")
    if len(parts) != 5 or parts[0] != "" or parts[1] != PBKDF2_IDENTIFIER:
        raise BackendError("invalid pbkdf2-sha512 hash format")

    _, _, rounds_raw, salt_raw, checksum_raw = parts
    if not (rounds_raw.isascii() and rounds_raw.isdigit()):
        raise BackendError("invalid pbkdf2-sha512 rounds")
    try:
        rounds = int(rounds_raw)
        salt = _ab64_decode(salt_raw)
        checksum = _ab64_decode(checksum_raw)
    except (ValueError, binascii.Error) as exc:
        raise BackendError("invalid pbkdf2-sha512 hash encoding") from exc

    if len(checksum) != hashlib.sha512().digest_size or not salt:
        raise BackendError("invalid pbkdf2-sha512 hash length")
    return _checked_rounds(rounds), salt, checksum


def _checked_rounds(rounds: int) -> int:
    if not PBKDF2_MIN_ROUNDS <= rounds <= PBKDF2_MAX_ROUNDS:
        raise BackendError(
            f"pbkdf2 rounds must be between {PBKDF2_MIN_ROUNDS} "
            f"and {PBKDF2_MAX_ROUNDS}, got {rounds}"
        )
    return rounds


def _ab64_encode(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii").rstrip("=").replace("+", ".")


def _ab64_decode(encoded: str) -> bytes:
    if not encoded:
        raise ValueError("empty base64 segment")
    padded = encoded.replace(".", "+") + "=" * (-len(encoded) % 4)
    return base64.b64decode(padded, validate=True)
