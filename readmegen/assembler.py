"""Assembles README documents from conditionally included template fragments."""

from __future__ import annotations

import datetime as _dt
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from jinja2 import Environment, FileSystemLoader

from .badges import build_badges
from .logging import get_logger
from .models import Answers, Document, ProjectInfos
from .postproc.lint import MarkdownLinter

TEMPLATES_ROOT = Path(__file__).with_name("templates")
DEFAULT_TEMPLATE = "default"
TEMPLATE_PACKS = ("default", "default-no-html")

Context = Mapping[str, Any]


@dataclass(frozen=True)
class SectionSpec:
    """A README fragment and the predicate deciding whether it is emitted."""

    name: str
    include: Callable[[Context], bool]

    @property
    def template_name(self) -> str:
        return f"sections/{self.name}.md.j2"


def _always(_: Context) -> bool:
    return True


def _any_of(*keys: str) -> Callable[[Context], bool]:
    def predicate(context: Context) -> bool:
        return any(context.get(key) for key in keys)

    return predicate


def _all_of(*keys: str) -> Callable[[Context], bool]:
    def predicate(context: Context) -> bool:
        return all(context.get(key) for key in keys)

    return predicate


# Emitted in this order whatever subset is included.
SECTIONS: Sequence[SectionSpec] = (
    SectionSpec("header", _always),
    SectionSpec("description", _any_of("project_description")),
    SectionSpec("links", _any_of("project_homepage", "project_demo_url")),
    SectionSpec("prerequisites", _any_of("project_prerequisites")),
    SectionSpec("install", _any_of("install_command")),
    SectionSpec("usage", _any_of("usage")),
    SectionSpec("tests", _any_of("test_command")),
    SectionSpec(
        "author",
        _any_of(
            "author_name",
            "author_github_username",
            "author_twitter_username",
            "author_linkedin_username",
        ),
    ),
    SectionSpec("contributing", _any_of("issues_url", "contributing_url")),
    SectionSpec("support", _always),
    SectionSpec("license", _all_of("license_name", "license_url")),
    SectionSpec("footer", _always),
)


class TemplateAssembler:
    """Renders ProjectInfos and Answers into a README Document.

    ``template`` selects a built-in pack; packs override individual section
    fragments and fall back to the ``default`` pack. ``templates_dir`` may
    override fragments of any pack. ``custom_template`` renders a single
    user-supplied file with the full context instead of the sections.
    """

    def __init__(
        self,
        template: str | None = None,
        *,
        templates_dir: Path | None = None,
        custom_template: Path | None = None,
        linter: MarkdownLinter | None = None,
    ) -> None:
        self.logger = get_logger("assembler")
        self.template = (template or DEFAULT_TEMPLATE).lower()
        if self.template not in TEMPLATE_PACKS:
            self.logger.warning("Unknown template '%s'; using '%s'", template, DEFAULT_TEMPLATE)
            self.template = DEFAULT_TEMPLATE
        self.templates_dir = templates_dir
        self.custom_template = custom_template
        self.linter = linter or MarkdownLinter()
        self._env = self._create_env()

    def assemble(
        self,
        infos: ProjectInfos,
        answers: Answers | Mapping[str, Any],
        *,
        published: bool = False,
        year: int | None = None,
    ) -> Document:
        context = self.build_context(infos, answers, published=published, year=year)

        if self.custom_template is not None:
            template = self._env.get_template(self.custom_template.name)
            content = self.linter.lint(template.render(**context))
            return Document(content=content, sections=[self.custom_template.name])

        rendered: List[str] = []
        included: List[str] = []
        for section in SECTIONS:
            if not section.include(context):
                continue
            body = self._env.get_template(section.template_name).render(**context).strip()
            if body:
                rendered.append(body)
                included.append(section.name)
        return Document(content=self.linter.lint("\n\n".join(rendered)), sections=included)

    def build_context(
        self,
        infos: ProjectInfos,
        answers: Answers | Mapping[str, Any],
        *,
        published: bool = False,
        year: int | None = None,
    ) -> Dict[str, Any]:
        context: Dict[str, Any] = {
            key: value for key, value in answers.items() if value not in (None, "")
        }
        context.setdefault("project_name", infos.name)
        context["project_infos"] = asdict(infos)
        context["is_project_on_npm"] = published
        context["current_year"] = year or _dt.date.today().year
        context["author_link"] = _author_link(context)
        context["badges"] = build_badges(context)
        return context

    def _create_env(self) -> Environment:
        directories: List[str] = []
        if self.custom_template is not None:
            directories.append(str(self.custom_template.expanduser().resolve().parent))
        if self.templates_dir is not None:
            directories.append(str(self.templates_dir / self.template))
            directories.append(str(self.templates_dir))
        directories.append(str(TEMPLATES_ROOT / self.template))
        directories.append(str(TEMPLATES_ROOT / DEFAULT_TEMPLATE))
        ordered = list(dict.fromkeys(directories))
        loader = FileSystemLoader(ordered)
        return Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )


def _author_link(context: Context) -> Optional[str]:
    if context.get("author_website"):
        return context["author_website"]
    if context.get("author_github_username"):
        return f"https://github.com/{context['author_github_username']}"
    return None


def available_templates() -> Sequence[str]:
    return TEMPLATE_PACKS


__all__ = ["SECTIONS", "SectionSpec", "TemplateAssembler", "available_templates"]
