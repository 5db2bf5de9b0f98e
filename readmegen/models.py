"""Core data models shared across readmegen components."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful read from a metadata source."""

    value: T


@dataclass(frozen=True)
class Failure:
    """Failed read from a metadata source, with a human readable reason."""

    reason: str


SourceResult = Union[Ok[T], Failure]


def value_or_none(result: "SourceResult[T]") -> Optional[T]:
    """Collapse a source result to its value, treating failures as absence."""
    if isinstance(result, Ok):
        return result.value
    return None


@dataclass(frozen=True)
class PlainName:
    """Manifest author given as a single string (``"Jane Doe <jane@x.io>"``)."""

    name: str


@dataclass(frozen=True)
class DetailedAuthor:
    """Manifest author given as an object with name, email and url."""

    name: str
    email: Optional[str] = None
    url: Optional[str] = None


AuthorField = Union[PlainName, DetailedAuthor]


@dataclass(frozen=True)
class ProjectInfos:
    """Reconciled project metadata, computed once per run and never mutated."""

    name: str
    description: Optional[str] = None
    version: Optional[str] = None
    author: Optional[str] = None
    license: Optional[str] = None
    homepage: Optional[str] = None
    # (name, version range) pairs; a mapping passed in is frozen to pairs.
    engines: Optional[Tuple[Tuple[str, str], ...]] = None
    repository_url: Optional[str] = None
    is_github_repos: bool = False
    github_username: Optional[str] = None
    documentation_url: Optional[str] = None
    issues_url: Optional[str] = None
    contributing_url: Optional[str] = None
    license_name: Optional[str] = None
    license_url: Optional[str] = None
    author_website: Optional[str] = None
    is_js_project: bool = False
    has_start_command: bool = False
    has_test_command: bool = False
    package_manager: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.engines, Mapping):
            object.__setattr__(self, "engines", tuple(self.engines.items()) or None)


@dataclass(frozen=True)
class ResolutionStatus:
    """Progress status the caller renders once resolution finishes."""

    message: str
    succeeded: bool = True


@dataclass(frozen=True)
class Resolution:
    """Outcome of a metadata resolution pass."""

    infos: ProjectInfos
    status: ResolutionStatus
    notes: Tuple[str, ...] = ()


class Answers(Mapping[str, Any]):
    """Answers collected so far, in question order.

    Consumers only read; the collector grows it through :meth:`record`.
    """

    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = {}
        for name, value in (initial or {}).items():
            self.record(name, value)

    def record(self, name: str, value: Any) -> None:
        if name in self._values:
            raise ValueError(f"Answer for '{name}' was already recorded")
        self._values[name] = value

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def __repr__(self) -> str:
        return f"Answers({self._values!r})"


@dataclass(frozen=True)
class Document:
    """Rendered README content along with the sections it includes."""

    content: str
    sections: List[str] = field(default_factory=list)


__all__ = [
    "Answers",
    "AuthorField",
    "DetailedAuthor",
    "Document",
    "Failure",
    "Ok",
    "PlainName",
    "ProjectInfos",
    "Resolution",
    "ResolutionStatus",
    "SourceResult",
    "value_or_none",
]
