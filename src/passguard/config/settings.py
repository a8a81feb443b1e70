"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from passguard.domain.password_policy import PasswordPolicy

PositiveInt = Annotated[int, Field(gt=0)]
BcryptLogRounds = Annotated[int, Field(ge=4, le=31)]
Pbkdf2Rounds = Annotated[int, Field(ge=1, le=4_294_967_295)]
Pbkdf2SaltLength = Annotated[int, Field(ge=16, le=1024)]


class Settings(BaseSettings):
    """Environment-driven password settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    password_hash_backend: Literal["bcrypt", "pbkdf2_sha512"] = Field(
        default="bcrypt",
        validation_alias="PASSWORD_HASH_BACKEND",
    )
    bcrypt_log_rounds: BcryptLogRounds = Field(
        default=12,
        validation_alias="BCRYPT_LOG_ROUNDS",
    )
    pbkdf2_rounds: Pbkdf2Rounds = Field(
        default=60_000,
        validation_alias="PBKDF2_ROUNDS",
    )
    pbkdf2_salt_length: Pbkdf2SaltLength = Field(
        default=16,
        validation_alias="PBKDF2_SALT_LENGTH",
    )
    password_min_length: PositiveInt = Field(
        default=8,
        validation_alias="PASSWORD_MIN_LENGTH",
    )
    password_generated_length: PositiveInt = Field(
        default=12,
        validation_alias="PASSWORD_GENERATED_LENGTH",
    )
    password_require_digit: bool = Field(
        default=True,
        validation_alias="PASSWORD_REQUIRE_DIGIT",
    )
    password_require_punctuation: bool = Field(
        default=True,
        validation_alias="PASSWORD_REQUIRE_PUNCTUATION",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @model_validator(mode="after")
    def _generated_length_covers_minimum(self) -> "Settings":
        if self.password_generated_length < self.password_min_length:
            raise ValueError("PASSWORD_GENERATED_LENGTH cannot be lower than PASSWORD_MIN_LENGTH")
        return self


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()


def build_password_policy(settings: Settings) -> PasswordPolicy:
    """Build the immutable password policy from loaded settings."""

    return PasswordPolicy(
        min_length=settings.password_min_length,
        generated_length=settings.password_generated_length,
        required_digit=settings.password_require_digit,
        required_punctuation=settings.password_require_punctuation,
    )
