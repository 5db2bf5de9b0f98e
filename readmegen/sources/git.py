"""Git remote lookup and repository URL helpers."""

from __future__ import annotations

import re
import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional
from urllib.parse import urlparse

from ..models import Failure, Ok, SourceResult

GITHUB_HOSTS = {"github.com", "www.github.com"}

_SHORTHAND_HOSTS = {
    "github": "github.com",
    "gitlab": "gitlab.com",
    "bitbucket": "bitbucket.org",
}

_SCP_LIKE = re.compile(r"^(?:[\w.-]+@)?(?P<host>[\w.-]+):(?P<path>(?!//)[^\s]+)$")
_OWNER_REPO = re.compile(r"^[\w.-]+/[\w.-]+$")


def normalize_repository_url(raw: str | None) -> Optional[str]:
    """Return an https URL for a git remote or npm repository field, or None.

    Handles ``git+https://``, ``git://``, ``ssh://git@host/...``, scp-like
    ``git@host:owner/repo.git`` and the npm shorthands ``owner/repo`` and
    ``github:owner/repo``.
    """
    if not raw:
        return None
    url = raw.strip()
    if not url:
        return None

    if url.startswith("git+"):
        url = url[len("git+"):]

    prefix, _, rest = url.partition(":")
    if prefix in _SHORTHAND_HOSTS and rest and not rest.startswith("//"):
        url = f"https://{_SHORTHAND_HOSTS[prefix]}/{rest}"
    elif _OWNER_REPO.match(url):
        url = f"https://github.com/{url}"
    elif "://" not in url:
        match = _SCP_LIKE.match(url)
        if not match:
            return None
        url = f"https://{match.group('host')}/{match.group('path')}"

    try:
        parsed = urlparse(url)
        port = parsed.port
    except ValueError:
        return None
    if not parsed.hostname:
        return None
    path = parsed.path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]
    host = parsed.hostname
    if port and parsed.scheme in {"http", "https"}:
        host = f"{host}:{port}"
    scheme = parsed.scheme if parsed.scheme in {"http", "https"} else "https"
    return f"{scheme}://{host}{path}"


def is_github_url(url: str | None) -> bool:
    if not url:
        return False
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return False
    return (hostname or "").lower() in GITHUB_HOSTS


def github_owner(url: str | None) -> Optional[str]:
    """Return the owner path segment of a GitHub URL."""
    if not is_github_url(url):
        return None
    segments = [segment for segment in urlparse(url).path.split("/") if segment]
    return segments[0] if segments else None


class GitRemoteReader:
    """Reads the configured ``origin`` remote of a working copy."""

    def __init__(self, runner: Callable[..., str] | None = None, remote: str = "origin") -> None:
        self._runner = runner or self._default_runner
        self.remote = remote

    def read(self, repo_path: Path) -> SourceResult[str]:
        args = ["git", "config", "--get", f"remote.{self.remote}.url"]
        try:
            output = self._runner(args, cwd=repo_path)
        except subprocess.CalledProcessError as exc:
            return Failure(f"git exited with status {exc.returncode}")
        except OSError as exc:
            return Failure(f"git unavailable: {exc}")
        except UnicodeDecodeError as exc:
            return Failure(f"git output is not valid text: {exc}")
        url = (output or "").strip()
        if not url:
            return Failure(f"remote '{self.remote}' has no url")
        return Ok(url)

    @staticmethod
    def _default_runner(args: Iterable[str], *, cwd: Path) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=True,
        )
        return completed.stdout


__all__ = [
    "GITHUB_HOSTS",
    "GitRemoteReader",
    "github_owner",
    "is_github_url",
    "normalize_repository_url",
]
