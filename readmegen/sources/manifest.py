"""package.json reader and field helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..logging import get_logger
from ..models import AuthorField, DetailedAuthor, PlainName
from ..utils import run_blocking

MANIFEST_FILENAME = "package.json"

_logger = get_logger("sources.manifest")


def load_package_json(root: Path) -> Optional[Dict[str, Any]]:
    """Return the parsed package.json contents, or None when there is no usable manifest."""
    package_json = root / MANIFEST_FILENAME
    try:
        text = package_json.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        _logger.debug("Unable to read %s: %s", package_json, exc)
        return None
    except UnicodeDecodeError as exc:
        _logger.debug("Ignoring %s, not valid UTF-8: %s", package_json, exc)
        return None
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        _logger.debug("Ignoring %s, invalid JSON: %s", package_json, exc)
        return None
    if not isinstance(data, dict):
        _logger.debug("Ignoring %s, root is not an object", package_json)
        return None
    return data


async def read_manifest(root: Path) -> Optional[Dict[str, Any]]:
    return await run_blocking(load_package_json, root)


def get_str(manifest: Mapping[str, Any] | None, key: str) -> Optional[str]:
    """Return a non-empty string field, or None."""
    if not manifest:
        return None
    value = manifest.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def parse_author_field(raw: Any) -> Optional[AuthorField]:
    if isinstance(raw, str):
        return PlainName(raw.strip()) if raw.strip() else None
    if isinstance(raw, Mapping):
        name = raw.get("name")
        email = raw.get("email")
        url = raw.get("url")
        return DetailedAuthor(
            name=name.strip() if isinstance(name, str) else "",
            email=email if isinstance(email, str) and email else None,
            url=url if isinstance(url, str) and url else None,
        )
    return None


def author_display_name(author: Optional[AuthorField]) -> Optional[str]:
    """Normalise an author field to the name shown in the README."""
    if author is None:
        return None
    return author.name or None


def license_identifier(manifest: Mapping[str, Any] | None) -> Optional[str]:
    """Return the license identifier, accepting the legacy ``{"type": ...}`` form."""
    if not manifest:
        return None
    raw = manifest.get("license")
    if isinstance(raw, Mapping):
        raw = raw.get("type")
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


def has_script(manifest: Mapping[str, Any] | None, script: str) -> bool:
    if not manifest:
        return False
    scripts = manifest.get("scripts")
    if not isinstance(scripts, Mapping):
        return False
    command = scripts.get(script)
    return isinstance(command, str) and bool(command.strip())


def engines(manifest: Mapping[str, Any] | None) -> Optional[Dict[str, str]]:
    if not manifest:
        return None
    raw = manifest.get("engines")
    if not isinstance(raw, Mapping):
        return None
    result = {str(name): value for name, value in raw.items() if isinstance(value, str)}
    return result or None


def repository_field(manifest: Mapping[str, Any] | None) -> Optional[str]:
    """Return the raw repository location (``repository.url`` or the string shorthand)."""
    if not manifest:
        return None
    raw = manifest.get("repository")
    if isinstance(raw, Mapping):
        raw = raw.get("url")
    if isinstance(raw, str) and raw.strip():
        return raw.strip()
    return None


__all__ = [
    "MANIFEST_FILENAME",
    "author_display_name",
    "engines",
    "get_str",
    "has_script",
    "license_identifier",
    "load_package_json",
    "parse_author_field",
    "read_manifest",
    "repository_field",
]
