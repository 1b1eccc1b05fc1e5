"""Configuration loading for wfindex (.wfindex.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".wfindex.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class LanguageConfig:
    """Which workflow languages are active and which one wins ties."""

    enabled: List[str] = field(default_factory=list)
    default: Optional[str] = None


@dataclass
class LoggingConfig:
    """Log verbosity and optional file sink."""

    verbose: bool = False
    file: Optional[Path] = None


@dataclass
class WfIndexConfig:
    """Represents the settings defined in .wfindex.yml."""

    root: Path
    languages: LanguageConfig = field(default_factory=LanguageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def enabled_languages(self) -> Optional[List[str]]:
        """Enabled language names, or None when every registered language is active."""
        return list(self.languages.enabled) or None


def load_config(config_path: Path) -> WfIndexConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return WfIndexConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    language_data = _as_dict(data.get("languages"))
    languages = LanguageConfig(
        enabled=[name.lower() for name in _as_str_list(language_data.get("enabled"))],
        default=_as_str(language_data.get("default")),
    )
    if languages.default is not None:
        languages.default = languages.default.lower()
        if languages.enabled and languages.default not in languages.enabled:
            raise ConfigError(
                f"Default language '{languages.default}' is not in languages.enabled"
            )

    logging_data = _as_dict(data.get("logging"))
    log_file = _as_str(logging_data.get("file"))
    logging_config = LoggingConfig(
        verbose=_as_bool(logging_data.get("verbose")) or False,
        file=root / log_file if log_file else None,
    )

    return WfIndexConfig(root=root, languages=languages, logging=logging_config)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
