import logging
import os

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigurationError


DEFAULT_PROVIDER = "openai"
DEFAULT_API_BASE_URL = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_LOG_LEVEL = "WARNING"

API_KEY_VAR = "OPENAI_API_KEY"
API_BASE_URL_VAR = "OPENAI_API_BASE_URL"
MODEL_VAR = "OPENAI_MODEL"
LOG_LEVEL_VAR = "AI_SHELL_LOG_LEVEL"


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is not None and value.strip():
        return value.strip()
    return None


@dataclass
class ShellConfig:
    """Runtime settings for the shell, read from the environment."""

    api_key: str
    base_url: str = DEFAULT_API_BASE_URL
    model: str = DEFAULT_MODEL
    provider: str = DEFAULT_PROVIDER

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        env = os.environ if environ is None else environ

        api_key = _non_empty(env.get(API_KEY_VAR))
        if not api_key:
            raise ConfigurationError(f"{API_KEY_VAR} not found in environment variables.")

        return cls(
            api_key=api_key,
            base_url=_non_empty(env.get(API_BASE_URL_VAR)) or DEFAULT_API_BASE_URL,
            model=_non_empty(env.get(MODEL_VAR)) or DEFAULT_MODEL,
        )

    @property
    def provider_configs(self) -> Dict:
        """The provider configuration in the shape `aisuite.Client` expects."""
        return {self.provider: {"api_key": self.api_key, "base_url": self.base_url}}

    @property
    def model_id(self) -> str:
        return f"{self.provider}:{self.model}"


def log_level_from_env(environ: Optional[Mapping[str, str]] = None) -> int:
    env = os.environ if environ is None else environ
    name = (_non_empty(env.get(LOG_LEVEL_VAR)) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def load_config() -> ShellConfig:
    """
    Loads the shell configuration.

    A `.env` file in the current directory (or any parent) is read first. Values
    already present in the process environment win over the file.

    Raises:
        ConfigurationError: If the OpenAI API key is not set.
    """
    load_dotenv()
    return ShellConfig.from_env()
