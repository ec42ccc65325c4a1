"""Configuration loading for the excuse engine."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from excuse_engine.logging import VALID_LOG_FORMATS
from excuse_engine.schema import CATEGORIES, SUPPORTED_LANGUAGES, THEMES, UserPreferences

DEFAULT_LANGUAGE = "en"
DEFAULT_PREFERRED_CATEGORIES = ["work", "transport", "medical"]
DEFAULT_THEME = "dark"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"
VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

CONFIG_PATH = Path.home() / ".excuse_engine" / "config.yaml"


@dataclass(frozen=True)
class AppConfig:
    """Runtime configuration values."""

    default_language: str
    preferred_categories: List[str]
    auto_proof_generation: bool
    voice_enabled: bool
    emergency_contacts_enabled: bool
    theme: str
    seed: Optional[int]
    log_level: str
    log_format: str

    def preferences(self) -> UserPreferences:
        return UserPreferences(
            default_language=self.default_language,
            preferred_categories=list(self.preferred_categories),
            voice_enabled=self.voice_enabled,
            auto_proof_generation=self.auto_proof_generation,
            emergency_contacts_enabled=self.emergency_contacts_enabled,
            theme=self.theme,
        )


def _load_yaml_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load YAML config file. Returns empty dict if not found."""
    p = path or CONFIG_PATH
    if not p.exists():
        return {}
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if isinstance(data, dict) else {}
    except (yaml.YAMLError, OSError):
        return {}


def _section(yaml_cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = yaml_cfg.get(name)
    return value if isinstance(value, dict) else {}


def _split_list(value: str) -> List[str]:
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def _read_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_optional_int(value: str, name: str) -> Optional[int]:
    stripped = value.strip()
    if not stripped:
        return None
    try:
        return int(stripped)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer.") from exc


def _pick(env_key: str, yaml_value: Any) -> str:
    env_value = os.getenv(env_key, "").strip()
    if env_value:
        return env_value
    if yaml_value is None:
        return ""
    if isinstance(yaml_value, bool):
        return "true" if yaml_value else "false"
    if isinstance(yaml_value, list):
        return ",".join(str(item) for item in yaml_value)
    return str(yaml_value).strip()


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from ~/.excuse_engine/config.yaml + environment variables.

    YAML provides defaults; env vars override everything. Unknown languages,
    themes and categories fall back to defaults; a malformed seed or log level
    raises ``ValueError``.
    """
    yaml_cfg = _load_yaml_config(path)
    prefs = _section(yaml_cfg, "preferences")
    logging_cfg = _section(yaml_cfg, "logging")

    default_language = _pick("EXCUSE_ENGINE_LANGUAGE", prefs.get("language")).lower() or DEFAULT_LANGUAGE
    if default_language not in SUPPORTED_LANGUAGES:
        default_language = DEFAULT_LANGUAGE

    categories_raw = _pick("EXCUSE_ENGINE_PREFERRED_CATEGORIES", prefs.get("preferred_categories"))
    preferred_categories = [c.lower() for c in _split_list(categories_raw) if c.lower() in CATEGORIES]
    if not preferred_categories:
        preferred_categories = list(DEFAULT_PREFERRED_CATEGORIES)

    auto_proof_raw = _pick("EXCUSE_ENGINE_AUTO_PROOF", prefs.get("auto_proof_generation"))
    auto_proof_generation = True if not auto_proof_raw else _read_bool(auto_proof_raw)
    voice_enabled = _read_bool(_pick("EXCUSE_ENGINE_VOICE", prefs.get("voice_enabled")))
    emergency_contacts_enabled = _read_bool(
        _pick("EXCUSE_ENGINE_EMERGENCY_CONTACTS", prefs.get("emergency_contacts_enabled"))
    )

    theme = _pick("EXCUSE_ENGINE_THEME", prefs.get("theme")).lower() or DEFAULT_THEME
    if theme not in THEMES:
        theme = DEFAULT_THEME

    seed = _read_optional_int(_pick("EXCUSE_ENGINE_SEED", yaml_cfg.get("seed")), "EXCUSE_ENGINE_SEED")

    log_level = _pick("EXCUSE_ENGINE_LOG_LEVEL", logging_cfg.get("level")).upper() or DEFAULT_LOG_LEVEL
    if log_level not in VALID_LOG_LEVELS:
        raise ValueError(f"EXCUSE_ENGINE_LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}.")

    log_format = _pick("EXCUSE_ENGINE_LOG_FORMAT", logging_cfg.get("format")).lower() or DEFAULT_LOG_FORMAT
    if log_format not in VALID_LOG_FORMATS:
        log_format = DEFAULT_LOG_FORMAT

    return AppConfig(
        default_language=default_language,
        preferred_categories=preferred_categories,
        auto_proof_generation=auto_proof_generation,
        voice_enabled=voice_enabled,
        emergency_contacts_enabled=emergency_contacts_enabled,
        theme=theme,
        seed=seed,
        log_level=log_level,
        log_format=log_format,
    )
