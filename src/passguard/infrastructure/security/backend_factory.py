"""Composition helpers that turn settings into hash backends and services."""

from __future__ import annotations

from passguard.application.ports.hash_backend_port import HashBackendPort
from passguard.application.services.password_service import PasswordService
from passguard.config.settings import Settings, build_password_policy
from passguard.infrastructure.security.bcrypt_backend import BcryptHashBackend
from passguard.infrastructure.security.pbkdf2_backend import Pbkdf2Sha512HashBackend


def build_hash_backend(*, settings: Settings) -> HashBackendPort:
    """Build the configured hash backend."""

    if settings.password_hash_backend == "pbkdf2_sha512":
        return Pbkdf2Sha512HashBackend(
            rounds=settings.pbkdf2_rounds,
            salt_length=settings.pbkdf2_salt_length,
        )
    return BcryptHashBackend(log_rounds=settings.bcrypt_log_rounds)


def build_password_service(*, settings: Settings) -> PasswordService:
    """Build the password facade from settings."""

    return PasswordService(
        policy=build_password_policy(settings),
        backend=build_hash_backend(settings=settings),
    )
