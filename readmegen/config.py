"""Configuration loading for readmegen (.readmegen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".readmegen.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ReadmeConfig:
    """README output settings."""

    template: Optional[str] = None
    templates_dir: Optional[Path] = None
    output: str = "README.md"


@dataclass
class GithubConfig:
    """GitHub users API settings used for the author website lookup."""

    api_url: str = "https://api.github.com"
    request_timeout: float = 10.0


@dataclass
class NpmConfig:
    """npm registry settings used for the publication probe."""

    registry_url: str = "https://registry.npmjs.org"
    request_timeout: float = 10.0


@dataclass
class ReadmegenConfig:
    """Represents the settings defined in .readmegen.yml."""

    root: Path
    readme: ReadmeConfig = field(default_factory=ReadmeConfig)
    github: GithubConfig = field(default_factory=GithubConfig)
    npm: NpmConfig = field(default_factory=NpmConfig)


def load_config(config_path: Path) -> ReadmegenConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ReadmegenConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    readme = ReadmeConfig()
    readme_data = _as_dict(data.get("readme"))
    if readme_data:
        readme.template = _as_str(readme_data.get("template"))
        templates_dir = _as_str(readme_data.get("templates_dir"))
        readme.templates_dir = root / templates_dir if templates_dir else None
        readme.output = _as_str(readme_data.get("output")) or readme.output

    github = GithubConfig()
    github_data = _as_dict(data.get("github"))
    if github_data:
        github.api_url = (_as_str(github_data.get("api_url")) or github.api_url).rstrip("/")
        timeout = _as_float(github_data.get("request_timeout"))
        if timeout is not None:
            github.request_timeout = timeout

    npm = NpmConfig()
    npm_data = _as_dict(data.get("npm"))
    if npm_data:
        npm.registry_url = (_as_str(npm_data.get("registry_url")) or npm.registry_url).rstrip("/")
        timeout = _as_float(npm_data.get("request_timeout"))
        if timeout is not None:
            npm.request_timeout = timeout

    return ReadmegenConfig(root=root, readme=readme, github=github, npm=npm)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
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
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_float(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "GithubConfig",
    "NpmConfig",
    "ReadmeConfig",
    "ReadmegenConfig",
    "load_config",
]
