from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pytest

from readmegen.sources.git import GitRemoteReader
from tests._fixtures.project_builder import (
    FakeGithub,
    ProjectBuilder,
    failing_git_reader,
    git_reader_returning,
)


@pytest.fixture
def project(tmp_path: Path) -> ProjectBuilder:
    return ProjectBuilder(tmp_path)


@pytest.fixture
def readme_generator_manifest() -> Dict[str, Any]:
    return {
        "name": "readme-md-generator",
        "version": "0.1.3",
        "description": "CLI that generates beautiful README.md files.",
        "author": "Mark Fomin",
        "license": "MIT",
        "homepage": "https://github.com/mfomin93/readme-generator",
        "repository": {
            "type": "git",
            "url": "git+https://github.com/mfomin93/readme-generator.git",
        },
        "engines": {"npm": ">=5.5.0", "node": ">=9.3.0"},
    }


@pytest.fixture
def fake_github():
    """Factory for FakeGithub doubles: ``fake_github({"alice": "https://alice.io"})``."""
    return FakeGithub


@pytest.fixture
def git_remote():
    """Factory for git readers whose origin points at the given URL."""
    return git_reader_returning


@pytest.fixture
def broken_git() -> GitRemoteReader:
    return failing_git_reader()
