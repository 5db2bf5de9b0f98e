"""Package manager detection from lock files."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

from ..utils import run_blocking

# Probed in order; the first lock file found decides.
LOCK_FILES: Sequence[Tuple[str, str]] = (
    ("pnpm-lock.yaml", "pnpm"),
    ("yarn.lock", "yarn"),
    ("package-lock.json", "npm"),
    ("npm-shrinkwrap.json", "npm"),
)


def find_package_manager(root: Path) -> Optional[str]:
    for filename, manager in LOCK_FILES:
        if (root / filename).is_file():
            return manager
    return None


async def detect_package_manager(root: Path) -> Optional[str]:
    """Infer the package manager from the lock file present in ``root``."""
    return await run_blocking(find_package_manager, root)


__all__ = ["LOCK_FILES", "detect_package_manager", "find_package_manager"]
