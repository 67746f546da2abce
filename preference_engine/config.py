"""
Engine Settings

Loads settings from environment variables and provides defaults.
Supports loading from a .env file at the project root using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .models.config import DEFAULT_CONFIG, ScoringConfig
from .services.profile_store import InMemoryProfileStore, JsonProfileStore, ProfileStore

_BASE_DIR = Path(__file__).resolve().parent.parent

_root_env = _BASE_DIR / ".env"
if _root_env.exists():
    load_dotenv(_root_env)

PROFILE_STORES = ("memory", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class EngineSettings:
    """Engine settings."""

    # Profile persistence: "memory" | "json"
    profile_store: str = "memory"
    # When profile_store=json: path to the profiles file
    profiles_json_path: Path = _BASE_DIR / "data" / "profiles.json"

    # Optional JSON file with ScoringConfig overrides (see ScoringConfig.from_dict)
    scoring_config_path: Optional[Path] = None

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Load settings from environment variables."""
        store = os.getenv("PROFILE_STORE", "").strip().lower() or "memory"

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (_BASE_DIR / p).resolve()

        return cls(
            profile_store=store,
            profiles_json_path=_path_env("PROFILES_JSON_PATH", _BASE_DIR / "data" / "profiles.json"),
            scoring_config_path=_path_env("SCORING_CONFIG_PATH"),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the settings.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.profile_store not in PROFILE_STORES:
            errors.append(f"Unknown PROFILE_STORE: {self.profile_store!r} (expected one of {PROFILE_STORES})")

        if self.scoring_config_path is not None and not self.scoring_config_path.exists():
            errors.append(f"Scoring config not found: {self.scoring_config_path}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown LOG_LEVEL: {self.log_level!r}")

        return len(errors) == 0, errors

    def load_scoring_config(self) -> ScoringConfig:
        """ScoringConfig from scoring_config_path, or DEFAULT_CONFIG when unset."""
        if self.scoring_config_path is None:
            return DEFAULT_CONFIG
        with open(self.scoring_config_path) as f:
            return ScoringConfig.from_dict(json.load(f))

    def create_profile_store(self) -> ProfileStore:
        """Profile store selected by profile_store."""
        if self.profile_store == "json":
            return JsonProfileStore(self.profiles_json_path)
        return InMemoryProfileStore()


def configure_logging(settings: Optional["EngineSettings"] = None) -> None:
    """Apply settings.log_level to the root logger."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


# Global settings instance
_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = EngineSettings.from_env()
    return _settings


def reload_settings() -> EngineSettings:
    """Reload settings from environment."""
    global _settings
    _settings = None
    return get_settings()
