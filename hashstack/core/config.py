"""Application configuration (Pydantic v2). Load from hashstack.yml with optional env override.

The API credential is never part of Settings; it is supplied per session by the caller.
"""

import os
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml
from pydantic import BaseModel, field_validator


DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4.1"
DEFAULT_CONFIG_ENV_VAR = "HASHSTACK_CONFIG"
DEFAULT_CONFIG_FILENAME = "hashstack.yml"
ENDPOINT_ENV = "HASHSTACK_ENDPOINT"
MODEL_ENV = "HASHSTACK_MODEL"

# OpenAI rejects images over 20 MB.
DEFAULT_MAX_UPLOAD_BYTES = 20 * 1024 * 1024


class Settings(BaseModel):
    """
    Deployment defaults loaded from YAML.

    endpoint and model may be overridden by HASHSTACK_ENDPOINT / HASHSTACK_MODEL when loading
    the default config (but not when an explicit config_path is provided).
    """

    model_config = {"extra": "ignore"}

    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    vision_client: str = "openai"
    request_timeout: float | None = None
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES
    max_tag_length: int = 24
    canvas_scale: float = 1.0
    label_mode: Literal["heuristic", "model", "none"] = "heuristic"
    log_level: str = "INFO"

    @field_validator("endpoint", mode="before")
    @classmethod
    def strip_endpoint(cls, v: Any) -> str:
        if v is None or str(v).strip() == "":
            return DEFAULT_ENDPOINT
        return str(v).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: Any) -> str:
        return str(v or "INFO").upper()


_config: Settings | None = None


class ConfigLoader:
    """
    Helper responsible for loading Settings from YAML and environment.

    - load_from_yaml(path, apply_env_override): read a YAML file and optionally apply env overrides.
    - load_default(): resolve the default config path from HASHSTACK_CONFIG / hashstack.yml and
      apply HASHSTACK_ENDPOINT / HASHSTACK_MODEL overrides when present.
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def _apply_env(self, data: dict[str, Any]) -> dict[str, Any]:
        if self._env.get(ENDPOINT_ENV):
            data["endpoint"] = self._env[ENDPOINT_ENV]
        if self._env.get(MODEL_ENV):
            data["model"] = self._env[MODEL_ENV]
        return data

    def load_from_yaml(self, path: Path, apply_env_override: bool) -> Settings:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path) as f:
            data = yaml.safe_load(f)
        if not data:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        if apply_env_override:
            data = self._apply_env(data)
        return Settings.model_validate(data)

    def load_default(self) -> Settings:
        """Load the default Settings, using HASHSTACK_CONFIG or hashstack.yml when it exists."""
        path = Path(self._env.get(DEFAULT_CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILENAME)
        if path.exists():
            return self.load_from_yaml(path, apply_env_override=True)
        return Settings.model_validate(self._apply_env({}))


_loader = ConfigLoader()


def get_config(config_path: str | Path | None = None) -> Settings:
    """
    Return singleton config.

    - If config_path is given, load from it (without env overrides) and update the cache.
    - Otherwise, return the cached config if available, or load via ConfigLoader.load_default().
    """
    global _config
    if config_path is not None:
        _config = _loader.load_from_yaml(Path(config_path), apply_env_override=False)
        return _config
    if _config is not None:
        return _config
    _config = _loader.load_default()
    return _config


def reset_config() -> None:
    """Clear cached config (for tests)."""
    global _config
    _config = None
