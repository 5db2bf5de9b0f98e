"""Small helpers shared by sources, questions and the collector."""

from __future__ import annotations

import asyncio
import functools
from typing import Any, Callable, TypeVar

T = TypeVar("T")


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Await a blocking call on the running loop's default executor."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


def clean_social_network_username(value: str | None) -> str:
    """Strip whitespace and a leading ``@`` from a social handle."""
    if not value:
        return ""
    return value.strip().lstrip("@").strip()


def build_script_command(script: str, manager: str | None) -> str:
    """Return the shell command that runs a package.json script."""
    manager = (manager or "npm").lower()
    if manager in {"pnpm", "yarn"}:
        return f"{manager} {script}"
    # npm has shortcuts for start and test; everything else needs `run`.
    if script in {"start", "test"}:
        return f"npm {script}"
    return f"npm run {script}"


def build_install_command(manager: str | None) -> str:
    return f"{(manager or 'npm').lower()} install"


__all__ = [
    "build_install_command",
    "build_script_command",
    "clean_social_network_username",
    "run_blocking",
]
