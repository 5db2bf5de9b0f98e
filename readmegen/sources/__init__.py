"""Readers for the independent project metadata sources."""

from __future__ import annotations

from .git import GitRemoteReader, github_owner, is_github_url, normalize_repository_url
from .github import GithubClient, GithubLookupError
from .lockfiles import detect_package_manager
from .manifest import read_manifest
from .registry import NpmRegistry

__all__ = [
    "GitRemoteReader",
    "GithubClient",
    "GithubLookupError",
    "NpmRegistry",
    "detect_package_manager",
    "github_owner",
    "is_github_url",
    "normalize_repository_url",
    "read_manifest",
]
