"""shields.io badges for the README header."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

SHIELDS_URL = "https://img.shields.io"


@dataclass(frozen=True)
class Badge:
    label: str
    image_url: str
    link: Optional[str] = None


def shields_escape(text: str) -> str:
    """Escape a static badge segment (dashes and underscores are separators)."""
    escaped = str(text).replace("-", "--").replace("_", "__").replace(" ", "_")
    return quote(escaped, safe="_")


def build_badges(context: Mapping[str, Any]) -> List[Badge]:
    """Return header badges, in display order, for a render context."""
    badges: List[Badge] = []
    project_name = context.get("project_name")
    version = context.get("project_version")

    if context.get("is_project_on_npm") and project_name:
        badges.append(
            Badge(
                "Version",
                f"{SHIELDS_URL}/npm/v/{quote(project_name, safe='@/')}.svg",
                f"https://www.npmjs.com/package/{project_name}",
            )
        )
    elif version:
        badges.append(
            Badge(
                "Version",
                f"{SHIELDS_URL}/badge/version-{shields_escape(version)}-blue.svg?cacheSeconds=2592000",
            )
        )

    for prerequisite in context.get("project_prerequisites") or []:
        badges.append(
            Badge(
                "Prerequisite",
                f"{SHIELDS_URL}/badge/{shields_escape(prerequisite['name'])}"
                f"-{shields_escape(prerequisite['value'])}-blue.svg",
            )
        )

    documentation_url = context.get("project_documentation_url")
    if documentation_url:
        badges.append(
            Badge(
                "Documentation",
                f"{SHIELDS_URL}/badge/documentation-yes-brightgreen.svg",
                documentation_url,
            )
        )

    github_username = context.get("author_github_username")
    if github_username and project_name:
        badges.append(
            Badge(
                "Maintenance",
                f"{SHIELDS_URL}/badge/Maintained%3F-yes-green.svg",
                f"https://github.com/{github_username}/{project_name}/graphs/commit-activity",
            )
        )

    license_name = context.get("license_name")
    if license_name:
        badges.append(
            Badge(
                f"License: {license_name}",
                f"{SHIELDS_URL}/badge/License-{shields_escape(license_name)}-yellow.svg",
                context.get("license_url") or None,
            )
        )

    twitter_username = context.get("author_twitter_username")
    if twitter_username:
        badges.append(
            Badge(
                f"Twitter: {twitter_username}",
                f"{SHIELDS_URL}/twitter/follow/{quote(twitter_username)}.svg?style=social",
                f"https://twitter.com/{twitter_username}",
            )
        )

    return badges


__all__ = ["Badge", "build_badges", "shields_escape"]
