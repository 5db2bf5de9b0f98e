"""Ordered question definitions and their default resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List, Optional, Sequence

from .logging import get_logger
from .models import Answers, ProjectInfos
from .sources.github import GithubClient
from .utils import build_install_command, build_script_command, clean_social_network_username

StaticDefault = Callable[[ProjectInfos], Any]
RecomputeDefault = Callable[[ProjectInfos, Answers], Awaitable[Any]]


@dataclass(frozen=True)
class Choice:
    name: str
    value: Any


@dataclass(frozen=True)
class QuestionSpec:
    """One interactive question.

    ``static_default`` depends on ProjectInfos only. ``recompute_default``,
    when set, replaces it at collection time and only ever sees answers to
    questions asked earlier in the same run.
    """

    name: str
    message: str
    kind: str = "input"
    static_default: StaticDefault = lambda infos: None
    recompute_default: Optional[RecomputeDefault] = None
    choices: Optional[Callable[[ProjectInfos], List[Choice]]] = None
    filter: Optional[Callable[[str], Any]] = None
    when: Optional[Callable[[ProjectInfos], bool]] = None


def ask_project_name() -> QuestionSpec:
    return QuestionSpec("project_name", "Project name", static_default=lambda infos: infos.name)


def ask_project_version() -> QuestionSpec:
    return QuestionSpec(
        "project_version", "Project version (enter - to skip)",
        static_default=lambda infos: infos.version,
    )


def ask_project_description() -> QuestionSpec:
    return QuestionSpec(
        "project_description", "Project description",
        static_default=lambda infos: infos.description,
    )


def ask_project_homepage() -> QuestionSpec:
    return QuestionSpec(
        "project_homepage", "Project homepage (enter - to skip)",
        static_default=lambda infos: infos.homepage,
    )


def ask_project_demo_url() -> QuestionSpec:
    return QuestionSpec("project_demo_url", "Project demo url (enter - to skip)")


def ask_project_documentation_url() -> QuestionSpec:
    return QuestionSpec(
        "project_documentation_url", "Project documentation url (enter - to skip)",
        static_default=lambda infos: infos.documentation_url,
    )


def ask_author_name() -> QuestionSpec:
    return QuestionSpec("author_name", "Author name", static_default=lambda infos: infos.author)


def ask_author_github() -> QuestionSpec:
    return QuestionSpec(
        "author_github_username", "GitHub username (enter - to skip)",
        static_default=lambda infos: infos.github_username,
        filter=clean_social_network_username,
    )


def ask_author_website(github: GithubClient) -> QuestionSpec:
    """Website question whose default follows the GitHub username answer."""

    async def recompute(infos: ProjectInfos, answers: Answers) -> Optional[str]:
        username = answers.get("author_github_username", infos.github_username)
        if username == infos.github_username:
            return infos.author_website
        # A changed username never falls back to the website of the old one.
        if not username:
            return None
        return await github.author_website(username)

    return QuestionSpec(
        "author_website", "Author website (enter - to skip)",
        static_default=lambda infos: infos.author_website,
        recompute_default=recompute,
    )


def ask_author_twitter() -> QuestionSpec:
    return QuestionSpec(
        "author_twitter_username", "Twitter username (enter - to skip)",
        filter=clean_social_network_username,
    )


def ask_author_patreon() -> QuestionSpec:
    return QuestionSpec(
        "author_patreon_username", "Patreon username (enter - to skip)",
        filter=clean_social_network_username,
    )


def ask_author_linkedin() -> QuestionSpec:
    return QuestionSpec(
        "author_linkedin_username", "LinkedIn username (enter - to skip)",
        filter=clean_social_network_username,
    )


def _engine_choices(infos: ProjectInfos) -> List[Choice]:
    return [
        Choice(name=f"{name} {version}", value={"name": name, "value": version})
        for name, version in infos.engines or ()
    ]


def ask_project_prerequisites() -> QuestionSpec:
    return QuestionSpec(
        "project_prerequisites", "Project prerequisites",
        kind="checkbox",
        static_default=lambda infos: [choice.value for choice in _engine_choices(infos)],
        choices=_engine_choices,
        when=lambda infos: bool(infos.engines),
    )


def ask_license_name() -> QuestionSpec:
    return QuestionSpec(
        "license_name", "License name (enter - to skip)",
        static_default=lambda infos: infos.license_name,
    )


def ask_license_url() -> QuestionSpec:
    return QuestionSpec(
        "license_url", "License url (enter - to skip)",
        static_default=lambda infos: infos.license_url,
    )


def ask_issues_url() -> QuestionSpec:
    return QuestionSpec(
        "issues_url", "Issues page url (enter - to skip)",
        static_default=lambda infos: infos.issues_url,
    )


def ask_contributing_url() -> QuestionSpec:
    return QuestionSpec(
        "contributing_url", "Contributing guide url (enter - to skip)",
        static_default=lambda infos: infos.contributing_url,
    )


def ask_install_command() -> QuestionSpec:
    return QuestionSpec(
        "install_command", "Install command (enter - to skip)",
        static_default=lambda infos: (
            build_install_command(infos.package_manager) if infos.is_js_project else None
        ),
    )


def ask_usage() -> QuestionSpec:
    return QuestionSpec(
        "usage", "Usage command or instruction (enter - to skip)",
        static_default=lambda infos: (
            build_script_command("start", infos.package_manager)
            if infos.has_start_command
            else None
        ),
    )


def ask_test_command() -> QuestionSpec:
    return QuestionSpec(
        "test_command", "Test command (enter - to skip)",
        static_default=lambda infos: (
            build_script_command("test", infos.package_manager)
            if infos.has_test_command
            else None
        ),
    )


TEMPLATE_CHOICES = (Choice("No", "default-no-html"), Choice("Yes", "default"))


def ask_template_choice() -> QuestionSpec:
    return QuestionSpec(
        "template", "Use HTML in your README.md (default: NO)",
        kind="list",
        static_default=lambda infos: "default-no-html",
        choices=lambda infos: list(TEMPLATE_CHOICES),
    )


OVERWRITE_CHOICES = (Choice("No", False), Choice("Yes", True))


def ask_overwrite(target: str = "README.md") -> QuestionSpec:
    return QuestionSpec(
        "overwrite_readme",
        f"readmegen will overwrite your current {target}. Are you sure you want to continue?",
        kind="list",
        static_default=lambda infos: False,
        choices=lambda infos: list(OVERWRITE_CHOICES),
    )


class QuestionGraph:
    """Questions in their fixed order, bound to one ProjectInfos snapshot."""

    def __init__(self, infos: ProjectInfos, specs: Sequence[QuestionSpec]) -> None:
        self.infos = infos
        self.specs = tuple(specs)
        self.logger = get_logger("questions")
        names = [spec.name for spec in self.specs]
        if len(names) != len(set(names)):
            raise ValueError("Question names must be unique")

    def __iter__(self):
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def is_enabled(self, spec: QuestionSpec) -> bool:
        return spec.when is None or bool(spec.when(self.infos))

    def choices_for(self, spec: QuestionSpec) -> List[Choice]:
        return spec.choices(self.infos) if spec.choices else []

    async def default_for(self, spec: QuestionSpec, answers: Answers) -> Any:
        """Return the default to offer for ``spec`` given the answers collected so far."""
        if spec.recompute_default is None:
            return spec.static_default(self.infos)
        try:
            return await spec.recompute_default(self.infos, answers)
        except Exception as exc:
            self.logger.debug("Default for %s could not be recomputed: %s", spec.name, exc)
            return None


def build_question_graph(infos: ProjectInfos, github: GithubClient) -> QuestionGraph:
    return QuestionGraph(
        infos,
        [
            ask_project_name(),
            ask_project_version(),
            ask_project_description(),
            ask_project_homepage(),
            ask_project_demo_url(),
            ask_project_documentation_url(),
            ask_author_name(),
            ask_author_github(),
            ask_author_website(github),
            ask_author_twitter(),
            ask_author_patreon(),
            ask_author_linkedin(),
            ask_project_prerequisites(),
            ask_license_name(),
            ask_license_url(),
            ask_issues_url(),
            ask_contributing_url(),
            ask_install_command(),
            ask_usage(),
            ask_test_command(),
        ],
    )


__all__ = [
    "Choice",
    "QuestionGraph",
    "QuestionSpec",
    "ask_author_website",
    "ask_overwrite",
    "ask_template_choice",
    "build_question_graph",
]
