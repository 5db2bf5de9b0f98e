"""Tests for readmegen.sources.lockfiles."""

from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from readmegen.sources.lockfiles import detect_package_manager


@pytest.mark.parametrize(
    "files, expected",
    [
        ([], None),
        (["package-lock.json"], "npm"),
        (["yarn.lock"], "yarn"),
        (["pnpm-lock.yaml"], "pnpm"),
        (["npm-shrinkwrap.json"], "npm"),
        (["package-lock.json", "yarn.lock"], "yarn"),
        (["package-lock.json", "yarn.lock", "pnpm-lock.yaml"], "pnpm"),
    ],
)
def test_detect_package_manager_priority(tmp_path: Path, files, expected) -> None:
    for name in files:
        (tmp_path / name).write_text("", encoding="utf-8")

    assert asyncio.run(detect_package_manager(tmp_path)) == expected


def test_lock_directory_is_not_a_lock_file(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").mkdir()

    assert asyncio.run(detect_package_manager(tmp_path)) is None
