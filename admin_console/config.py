import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/console-settings.json")
_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_PATH_KEYS = frozenset({
    "categories_path",
    "municipalities_path",
    "refunds_path",
    "plans_path",
    "subscriptions_path",
})


class Settings(BaseSettings):
    """Console settings loaded from environment variables."""

    app_title: str = "Marketplace Admin Console"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Backend API
    api_base_url: str = "http://localhost:3002/api/v1"
    api_token: str = ""
    request_timeout_seconds: float = 30.0

    # Resource paths (relative to api_base_url)
    categories_path: str = "/admin/dashboard/categories"
    municipalities_path: str = "/admin/dashboard/municipalities"
    refunds_path: str = "/admin/dashboard/refunds"
    plans_path: str = "/admin/subscriptions/plans"
    subscriptions_path: str = "/admin/subscriptions"

    # Log levels by category (standard level names)
    log_level: str = "INFO"                  # Root / console-wide
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_api: str = "INFO"              # Admin API client and gateways
    log_level_workflow: str = "INFO"         # Multi-step workflows
    log_level_controller: str = "INFO"       # Stores and modal controllers

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Apply resource path overrides saved in data/console-settings.json."""
        for key, value in _load_path_overrides().items():
            object.__setattr__(self, key, value)


def _load_path_overrides() -> dict[str, str]:
    if not _SETTINGS_FILE.exists():
        return {}
    try:
        saved = json.loads(_SETTINGS_FILE.read_text("utf-8"))
    except (OSError, ValueError) as exc:
        _config_logger.warning("Ignoring %s: %s", _SETTINGS_FILE, exc)
        return {}
    if not isinstance(saved, dict):
        return {}
    return {k: v for k, v in saved.items() if k in _PATH_KEYS and isinstance(v, str)}


@lru_cache
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
