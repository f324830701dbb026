"""Configuration resolution for the CLI.

Centralizes reading the env file, environment variables and command-line
options into a single Settings value. Hides configuration details from the
chat core, which only ever sees the resolved Settings.

Environment variables (also read from ~/.config/xgpt/xgpt.env):
    API_KEY: Bearer credential (required unless --apikey is given)
    MODEL: Model identifier (default: gpt-4)
    BASE_URL: API root (default: https://api.openai.com/v1)
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ..llm.errors import ConfigurationError
from ..llm.providers.openai import DEFAULT_BASE_URL, DEFAULT_MODEL
from ..session.models import Mode

CONFIG_FILE = Path.home() / ".config" / "xgpt" / "xgpt.env"


class Settings(BaseModel):
    """Resolved configuration handed to the chat core."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, description="Bearer credential")
    model: str = Field(default=DEFAULT_MODEL, description="Model identifier")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    initial_prompt: str | None = Field(default=None, description="First message to send")
    mode: Mode = Field(default=Mode.STREAMING, description="Mode at startup")
    verbose: bool = False


def load_env_file(path: Path = CONFIG_FILE) -> bool:
    """Load the env file if present. Existing variables take precedence.

    Returns:
        True if the file existed and was loaded
    """
    if not path.is_file():
        return False
    return load_dotenv(path)


def load_settings(
    apikey: str | None = None,
    model: str | None = None,
    markdown: bool = False,
    initial_prompt: str | None = None,
    verbose: bool = False,
    config_file: Path | None = None,
) -> Settings:
    """Resolve settings from the env file, environment and CLI options.

    API_KEY from the environment (or env file) wins over --apikey.

    Raises:
        ConfigurationError: If no API key is available
    """
    config_file = config_file or CONFIG_FILE
    load_env_file(config_file)

    api_key = os.getenv("API_KEY") or apikey
    if not api_key:
        raise ConfigurationError(
            f"No API key provided. Please set API_KEY in {config_file} or pass --apikey."
        )

    return Settings(
        api_key=api_key,
        model=model or os.getenv("MODEL") or DEFAULT_MODEL,
        base_url=os.getenv("BASE_URL") or DEFAULT_BASE_URL,
        initial_prompt=initial_prompt or None,
        mode=Mode.RENDERED if markdown else Mode.STREAMING,
        verbose=verbose,
    )
