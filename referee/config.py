"""Configuration loading for referee (.referee.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".referee.yml"

OUTPUT_FORMATS = ("json", "markdown")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Naming and export settings handed to downstream generators."""

    name: str = "R"
    directory: Optional[Path] = None
    format: str = "json"


@dataclass
class RefereeConfig:
    """Represents the settings defined in .referee.yml."""

    root: Path
    project: Optional[Path] = None
    error_on_missing_storyboard_ids: bool = False
    exclude_paths: List[str] = field(default_factory=list)
    output: OutputConfig = field(default_factory=OutputConfig)
    generator: Dict[str, Any] = field(default_factory=dict)

    @property
    def project_root(self) -> Path:
        """Directory that holds the project's files."""
        if self.project is None:
            return self.root
        if self.project.suffix in {".xcodeproj", ".xcworkspace"}:
            return self.project.parent
        return self.project


def load_config(config_path: Path) -> RefereeConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return RefereeConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    project_str = _as_str(data.get("project"))
    project = (root / project_str).resolve() if project_str else None

    output = OutputConfig()
    output_data = _as_dict(data.get("output"))
    if output_data:
        output.name = _as_str(output_data.get("name")) or output.name
        directory = _as_str(output_data.get("directory"))
        output.directory = root / directory if directory else None
        fmt = (_as_str(output_data.get("format")) or output.format).lower()
        if fmt not in OUTPUT_FORMATS:
            allowed = ", ".join(OUTPUT_FORMATS)
            raise ConfigError(f"Unsupported output format '{fmt}' (expected one of: {allowed})")
        output.format = fmt

    return RefereeConfig(
        root=root,
        project=project,
        error_on_missing_storyboard_ids=_as_bool(data.get("error_on_missing_storyboard_ids"))
        or False,
        exclude_paths=_as_str_list(data.get("exclude_paths")),
        output=output,
        generator=_as_dict(data.get("generator")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.suffix in {".xcodeproj", ".xcworkspace"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _as_dict(value: Any) -> Dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


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


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "OUTPUT_FORMATS",
    "OutputConfig",
    "RefereeConfig",
    "load_config",
]
