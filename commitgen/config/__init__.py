"""Configuration Management Package"""

import math
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values
from dotenv.parser import parse_stream

# Directory that contains the commitgen package; the .env file lives here
PROJECT_ROOT = Path(__file__).resolve().parents[2]
ENV_FILENAME = ".env"

API_KEY_VAR = "GROQ_API_KEY"
ENV_FILE_VAR = "COMMITGEN_ENV_FILE"
MODEL_VAR = "COMMITGEN_MODEL"
TIMEOUT_VAR = "COMMITGEN_TIMEOUT"

DEFAULT_MODEL = "mixtral-8x7b-32768"
DEFAULT_ENDPOINT = "https://api.groq.com/openai/v1/chat/completions"


class ConfigError(Exception):
    """Raised when the credential file or variables can't be loaded."""
    pass


@dataclass
class Config:
    """Settings for one run. Request constants default to the tuned values."""
    api_key: str = ""
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout: float = 60
    endpoint: str = DEFAULT_ENDPOINT
    env_file: Optional[Path] = None

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        if not self.model or not self.model.strip():
            warnings.append(f"Empty model name, using '{defaults.model}'")
            self.model = defaults.model

        if not isinstance(self.timeout, (int, float)) or not math.isfinite(self.timeout) or self.timeout <= 0:
            warnings.append(f"Invalid timeout '{self.timeout}', using {defaults.timeout}")
            self.timeout = defaults.timeout

        return warnings


def _parse_timeout(raw: str):
    try:
        return float(raw)
    except ValueError:
        # Left as-is so validate() reports it
        return raw


class ConfigManager:
    """Loads configuration from the .env file and the process environment."""

    def __init__(self, env_file: Optional[Path] = None):
        self._env_file = env_file

    @property
    def env_path(self) -> Path:
        if self._env_file is not None:
            return Path(self._env_file)
        override = os.environ.get(ENV_FILE_VAR)
        if override:
            return Path(override).expanduser()
        return PROJECT_ROOT / ENV_FILENAME

    def _read_env_file(self, path: Path) -> dict:
        """Parse the .env file, failing on any line python-dotenv can't read."""
        if not path.is_file():
            raise ConfigError(
                f"Environment file not found: {path}\n"
                f"Create it with:\n"
                f"  {API_KEY_VAR}=your-key-here"
            )
        try:
            with open(path, 'r', encoding='utf-8') as f:
                for binding in parse_stream(f):
                    if binding.error:
                        raise ConfigError(f"Could not parse {path} at line {binding.original.line}")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read {path}: {e}")

        return {k: v for k, v in dotenv_values(path, encoding='utf-8').items() if v is not None}

    def load(self) -> Config:
        path = self.env_path
        values = self._read_env_file(path)

        # Process environment wins over the file, as load_dotenv(override=False) does,
        # even when the exported value is empty
        def lookup(name: str) -> Optional[str]:
            if name in os.environ:
                return os.environ[name] or None
            return values.get(name) or None

        api_key = (lookup(API_KEY_VAR) or "").strip()
        if not api_key:
            raise ConfigError(
                f"No API key found. Set {API_KEY_VAR} in {path}:\n"
                f"  {API_KEY_VAR}=your-key-here"
            )

        config = Config(api_key=api_key, env_file=path)
        model = lookup(MODEL_VAR)
        if model:
            config.model = model
        timeout = lookup(TIMEOUT_VAR)
        if timeout:
            config.timeout = _parse_timeout(timeout)

        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)

        return config


def load_config(env_file: Optional[Path] = None) -> Config:
    return ConfigManager(env_file).load()


__all__ = [
    "Config",
    "ConfigError",
    "ConfigManager",
    "load_config",
    "PROJECT_ROOT",
    "ENV_FILENAME",
    "API_KEY_VAR",
    "ENV_FILE_VAR",
    "MODEL_VAR",
    "TIMEOUT_VAR",
    "DEFAULT_MODEL",
    "DEFAULT_ENDPOINT",
]
