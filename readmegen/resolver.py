"""Reconciles manifest, git remote, lock files and GitHub into ProjectInfos."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Dict, List, Optional

from .licenses import license_url_for
from .logging import get_logger
from .models import Failure, ProjectInfos, Resolution, ResolutionStatus, SourceResult, value_or_none
from .sources import manifest as manifest_fields
from .sources.git import GitRemoteReader, github_owner, is_github_url, normalize_repository_url
from .sources.github import GithubClient
from .sources.lockfiles import detect_package_manager
from .utils import run_blocking

GATHERING_MESSAGE = "Gathering project infos"
GATHERED_MESSAGE = "Project infos gathered"


class MetadataResolver:
    """Builds the single ProjectInfos snapshot for a project directory.

    Every source may be missing or fail; failures degrade to ``None`` fields
    and a note on the returned :class:`Resolution`, never to an exception.
    Precedence is fixed: the manifest ``repository`` wins over the git remote.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        github: GithubClient | None = None,
        git_reader: GitRemoteReader | None = None,
    ) -> None:
        self.root = Path(root).expanduser().resolve()
        self.github = github or GithubClient()
        self.git_reader = git_reader or GitRemoteReader()
        self.logger = get_logger("resolver")

    async def resolve(self) -> Resolution:
        notes: List[str] = []
        manifest, remote = await asyncio.gather(
            manifest_fields.read_manifest(self.root),
            run_blocking(self.git_reader.read, self.root),
        )
        if manifest is None:
            notes.append(f"no {manifest_fields.MANIFEST_FILENAME} in {self.root}")
        if isinstance(remote, Failure):
            notes.append(f"git remote unavailable: {remote.reason}")

        repository_url = self._repository_url(manifest, remote)
        is_github_repos = is_github_url(repository_url)
        github_username = github_owner(repository_url) if is_github_repos else None

        author_website, package_manager = await asyncio.gather(
            self._author_website(github_username),
            self._package_manager(manifest),
        )
        if github_username and author_website is None:
            notes.append(f"no website found for GitHub user {github_username}")

        infos = build_project_infos(
            self.root,
            manifest,
            repository_url=repository_url,
            author_website=author_website,
            package_manager=package_manager,
        )
        for note in notes:
            self.logger.debug(note)
        return Resolution(
            infos=infos,
            status=ResolutionStatus(GATHERED_MESSAGE, succeeded=True),
            notes=tuple(notes),
        )

    def _repository_url(
        self, manifest: Optional[Dict[str, Any]], remote: SourceResult[str]
    ) -> Optional[str]:
        from_manifest = normalize_repository_url(manifest_fields.repository_field(manifest))
        if from_manifest:
            return from_manifest
        return normalize_repository_url(value_or_none(remote))

    async def _author_website(self, github_username: Optional[str]) -> Optional[str]:
        if not github_username:
            return None
        return await self.github.author_website(github_username)

    async def _package_manager(self, manifest: Optional[Dict[str, Any]]) -> Optional[str]:
        if manifest is None:
            return None
        return await detect_package_manager(self.root)


def build_project_infos(
    root: Path,
    manifest: Optional[Dict[str, Any]],
    *,
    repository_url: Optional[str],
    author_website: Optional[str] = None,
    package_manager: Optional[str] = None,
) -> ProjectInfos:
    """Derive every ProjectInfos field from already-resolved source values."""
    is_github_repos = is_github_url(repository_url)
    github_username = github_owner(repository_url) if is_github_repos else None
    license_name = manifest_fields.license_identifier(manifest)
    license_url = license_url_for(license_name)
    if license_name and license_url is None and is_github_repos:
        license_url = f"{repository_url}/blob/master/LICENSE"

    return ProjectInfos(
        name=manifest_fields.get_str(manifest, "name") or root.name,
        description=manifest_fields.get_str(manifest, "description"),
        version=manifest_fields.get_str(manifest, "version"),
        author=manifest_fields.author_display_name(
            manifest_fields.parse_author_field(manifest.get("author") if manifest else None)
        ),
        license=license_name,
        homepage=manifest_fields.get_str(manifest, "homepage"),
        engines=manifest_fields.engines(manifest),
        repository_url=repository_url,
        is_github_repos=is_github_repos,
        github_username=github_username,
        documentation_url=f"{repository_url}#readme" if is_github_repos else None,
        issues_url=f"{repository_url}/issues" if is_github_repos else None,
        contributing_url=(
            f"{repository_url}/blob/master/CONTRIBUTING.md" if repository_url else None
        ),
        license_name=license_name,
        license_url=license_url,
        author_website=author_website if github_username else None,
        is_js_project=manifest is not None,
        has_start_command=manifest_fields.has_script(manifest, "start"),
        has_test_command=manifest_fields.has_script(manifest, "test"),
        package_manager=package_manager if manifest is not None else None,
    )


async def resolve_project_infos(root: Path | str, **kwargs: Any) -> ProjectInfos:
    """Convenience wrapper returning only the resolved ProjectInfos."""
    resolution = await MetadataResolver(root, **kwargs).resolve()
    return resolution.infos


__all__ = [
    "GATHERED_MESSAGE",
    "GATHERING_MESSAGE",
    "MetadataResolver",
    "build_project_infos",
    "resolve_project_infos",
]
