"""Tests for readmegen.questions."""

from __future__ import annotations

import asyncio

import pytest

from readmegen.models import Answers, ProjectInfos
from readmegen.questions import (
    QuestionGraph,
    QuestionSpec,
    ask_author_website,
    build_question_graph,
)


def _infos(**overrides) -> ProjectInfos:
    values = dict(
        name="readme-md-generator",
        github_username="alice",
        author_website="https://alice.io",
        is_github_repos=True,
        repository_url="https://github.com/alice/readme-md-generator",
    )
    values.update(overrides)
    return ProjectInfos(**values)


def _default(graph: QuestionGraph, name: str, answers: Answers):
    spec = next(spec for spec in graph if spec.name == name)
    return asyncio.run(graph.default_for(spec, answers))


def test_question_order_is_fixed(fake_github) -> None:
    graph = build_question_graph(_infos(), fake_github())

    names = [spec.name for spec in graph]

    assert names.index("author_github_username") < names.index("author_website")
    assert names[0] == "project_name"
    assert names[-1] == "test_command"
    assert len(names) == len(set(names))


def test_static_defaults_come_from_project_infos(fake_github) -> None:
    infos = _infos(author="Mark Fomin", version="0.1.3", license_name="MIT")
    graph = build_question_graph(infos, fake_github())

    assert _default(graph, "author_name", Answers()) == "Mark Fomin"
    assert _default(graph, "project_version", Answers()) == "0.1.3"
    assert _default(graph, "license_name", Answers()) == "MIT"
    assert _default(graph, "project_demo_url", Answers()) is None


def test_website_default_follows_changed_username(fake_github) -> None:
    github = fake_github({"bob": "https://bob.dev"})
    graph = QuestionGraph(_infos(), [ask_author_website(github)])

    default = _default(graph, "author_website", Answers({"author_github_username": "bob"}))

    assert default == "https://bob.dev"
    assert github.calls == ["bob"]


def test_website_default_kept_when_username_unchanged(fake_github) -> None:
    github = fake_github({"alice": "https://elsewhere.example"})
    graph = QuestionGraph(_infos(), [ask_author_website(github)])

    default = _default(graph, "author_website", Answers({"author_github_username": "alice"}))

    assert default == "https://alice.io"
    assert github.calls == []


def test_website_default_is_empty_when_new_user_has_no_website(fake_github) -> None:
    github = fake_github()
    graph = QuestionGraph(_infos(), [ask_author_website(github)])

    default = _default(graph, "author_website", Answers({"author_github_username": "carol"}))

    assert default is None
    assert github.calls == ["carol"]


def test_website_default_is_empty_when_username_cleared(fake_github) -> None:
    github = fake_github()
    graph = QuestionGraph(_infos(), [ask_author_website(github)])

    default = _default(graph, "author_website", Answers({"author_github_username": ""}))

    assert default is None
    assert github.calls == []


def test_failing_recompute_resolves_to_none() -> None:
    async def explode(infos, answers):
        raise RuntimeError("lookup crashed")

    spec = QuestionSpec("flaky", "Flaky", recompute_default=explode)
    graph = QuestionGraph(_infos(), [spec])

    assert _default(graph, "flaky", Answers()) is None


def test_command_defaults_use_package_manager(fake_github) -> None:
    infos = _infos(
        is_js_project=True,
        has_start_command=True,
        has_test_command=True,
        package_manager="yarn",
    )
    graph = build_question_graph(infos, fake_github())

    assert _default(graph, "install_command", Answers()) == "yarn install"
    assert _default(graph, "usage", Answers()) == "yarn start"
    assert _default(graph, "test_command", Answers()) == "yarn test"


def test_command_defaults_absent_without_scripts(fake_github) -> None:
    graph = build_question_graph(_infos(), fake_github())

    assert _default(graph, "install_command", Answers()) is None
    assert _default(graph, "usage", Answers()) is None
    assert _default(graph, "test_command", Answers()) is None


def test_prerequisites_only_asked_with_engines(fake_github) -> None:
    without = build_question_graph(_infos(), fake_github())
    with_engines = build_question_graph(_infos(engines={"node": ">=9.3.0"}), fake_github())
    spec_without = next(spec for spec in without if spec.name == "project_prerequisites")
    spec_with = next(spec for spec in with_engines if spec.name == "project_prerequisites")

    assert without.is_enabled(spec_without) is False
    assert with_engines.is_enabled(spec_with) is True
    assert _default(with_engines, "project_prerequisites", Answers()) == [
        {"name": "node", "value": ">=9.3.0"}
    ]


def test_github_username_filter_strips_at_sign(fake_github) -> None:
    graph = build_question_graph(_infos(), fake_github())
    spec = next(spec for spec in graph if spec.name == "author_github_username")

    assert spec.filter("@alice ") == "alice"


def test_duplicate_question_names_rejected() -> None:
    with pytest.raises(ValueError):
        QuestionGraph(_infos(), [QuestionSpec("a", "A"), QuestionSpec("a", "Again")])
