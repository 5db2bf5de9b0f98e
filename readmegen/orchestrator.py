"""Coordinates a full README generation run."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .assembler import TemplateAssembler
from .collector import PromptCollector
from .config import ConfigError, ReadmegenConfig, load_config
from .logging import get_logger, report_status
from .models import ProjectInfos
from .questions import ask_overwrite, ask_template_choice, build_question_graph
from .resolver import GATHERING_MESSAGE, MetadataResolver
from .sources.git import GitRemoteReader
from .sources.github import GithubClient
from .sources.registry import NpmRegistry
from .writer import ReadmeWriter, WriteOutcome


class Orchestrator:
    """Resolve metadata, ask questions, assemble and write the README."""

    def __init__(
        self,
        *,
        collector: PromptCollector | None = None,
        github: GithubClient | None = None,
        registry: NpmRegistry | None = None,
        git_reader: GitRemoteReader | None = None,
    ) -> None:
        self.collector = collector or PromptCollector()
        self._github = github
        self._registry = registry
        self.git_reader = git_reader or GitRemoteReader()
        self.logger = get_logger("orchestrator")

    async def run(
        self,
        path: str | Path,
        *,
        custom_template: Path | None = None,
        template: str | None = None,
    ) -> WriteOutcome:
        project_dir = Path(path).expanduser().resolve()
        if not project_dir.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")
        config = self._load_config(project_dir)
        github = self._github or GithubClient(
            config.github.api_url, request_timeout=config.github.request_timeout
        )
        registry = self._registry or NpmRegistry(
            config.npm.registry_url, request_timeout=config.npm.request_timeout
        )

        self.logger.info(GATHERING_MESSAGE)
        resolution = await MetadataResolver(
            project_dir, github=github, git_reader=self.git_reader
        ).resolve()
        report_status(resolution.status, self.logger)
        infos = resolution.infos

        target = project_dir / config.readme.output
        overwrite_confirmed = False
        if target.exists():
            # Confirmed before any question is asked.
            if not await self._confirm_overwrite(target, infos):
                self.logger.info("Keeping existing %s", target.name)
                return WriteOutcome(path=target, written=False)
            overwrite_confirmed = True

        async def confirm(existing: Path) -> bool:
            if overwrite_confirmed:
                return True
            return await self._confirm_overwrite(existing, infos)

        chosen_template = template or config.readme.template
        if custom_template is None and chosen_template is None:
            chosen_template = await self.collector.ask_one(ask_template_choice(), infos)

        answers = await self.collector.collect(build_question_graph(infos, github))

        published = False
        if infos.is_js_project:
            published = await registry.is_published(answers.get("project_name") or infos.name)

        assembler = TemplateAssembler(
            chosen_template,
            templates_dir=config.readme.templates_dir,
            custom_template=custom_template,
        )
        document = assembler.assemble(infos, answers, published=published)

        writer = ReadmeWriter(confirm=confirm)
        outcome = await writer.write(target, document)
        if outcome.written:
            self.logger.info("README created at %s", target)
        return outcome

    async def _confirm_overwrite(self, existing: Path, infos: ProjectInfos) -> bool:
        return bool(await self.collector.ask_one(ask_overwrite(existing.name), infos))

    def _load_config(self, project_dir: Path) -> ReadmegenConfig:
        try:
            return load_config(project_dir)
        except ConfigError as exc:
            self.logger.warning("Ignoring invalid configuration: %s", exc)
            return ReadmegenConfig(root=project_dir)


__all__ = ["Orchestrator"]
