"""
Single place to:
- Load a local .env if present
- Read CODEBREAKER_SECRET / CODEBREAKER_MAX_ATTEMPTS from the environment
- Validate everything before any engine is built

Explicit values (command-line flags) win over the environment.
"""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .code import Code
from .types import DEFAULT_MAX_ATTEMPTS

ENV_SECRET = "CODEBREAKER_SECRET"
ENV_MAX_ATTEMPTS = "CODEBREAKER_MAX_ATTEMPTS"

INVALID_SECRET_MESSAGE = "Invalid secret code. Code must be 4 distinct digits from 0-8."


class ConfigError(ValueError):
    """Raised when the game cannot start with the given settings."""


class GameConfig(BaseModel):
    secret: Optional[str] = Field(None, description="Fixed secret code; random when omitted")
    max_attempts: int = Field(DEFAULT_MAX_ATTEMPTS, gt=0, description="Counted guesses per game")
    rounds: int = Field(1, gt=0, description="Games to play in a row")

    @field_validator("secret")
    @classmethod
    def validate_secret(cls, secret: Optional[str]) -> Optional[str]:
        if secret is None:
            return None
        if not Code(secret).is_valid():
            raise ValueError(INVALID_SECRET_MESSAGE)
        return secret

    def secret_code(self) -> Optional[Code]:
        if self.secret is None:
            return None
        return Code(self.secret)


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        field_name = ".".join(str(loc) for loc in item["loc"])
        message = item["msg"]
        # pydantic prefixes messages from our own validators
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        parts.append(f"{field_name}: {message}")
    return "; ".join(parts)


def load_config(
    secret: Optional[str] = None,
    max_attempts: Optional[int] = None,
    rounds: Optional[int] = None,
) -> GameConfig:
    # .env next to where the player runs the game; existing variables are not overridden
    load_dotenv(find_dotenv(usecwd=True))

    values = {}

    env_secret = (os.getenv(ENV_SECRET) or "").strip()
    if secret is not None:
        values["secret"] = secret
    elif env_secret:
        values["secret"] = env_secret

    env_attempts = (os.getenv(ENV_MAX_ATTEMPTS) or "").strip()
    if max_attempts is not None:
        values["max_attempts"] = max_attempts
    elif env_attempts:
        values["max_attempts"] = env_attempts

    if rounds is not None:
        values["rounds"] = rounds

    try:
        return GameConfig(**values)
    except ValidationError as ve:
        raise ConfigError(_describe(ve)) from ve
