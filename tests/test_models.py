"""Tests for readmegen.models."""

from __future__ import annotations

import dataclasses

import pytest

from readmegen.models import Answers, Failure, Ok, ProjectInfos, value_or_none


def test_answers_keep_question_order() -> None:
    answers = Answers()
    answers.record("project_name", "tool")
    answers.record("project_version", "1.0.0")
    answers.record("author_name", "")

    assert list(answers) == ["project_name", "project_version", "author_name"]
    assert answers["project_version"] == "1.0.0"
    assert answers.get("usage") is None
    assert len(answers) == 3
    assert answers.as_dict() == {
        "project_name": "tool",
        "project_version": "1.0.0",
        "author_name": "",
    }


def test_answers_reject_second_record() -> None:
    answers = Answers({"project_name": "tool"})

    with pytest.raises(ValueError, match="project_name"):
        answers.record("project_name", "other")


def test_answers_as_dict_is_a_copy() -> None:
    answers = Answers({"project_name": "tool"})

    answers.as_dict()["project_name"] = "changed"

    assert answers["project_name"] == "tool"


def test_project_infos_are_immutable() -> None:
    infos = ProjectInfos(name="tool")

    with pytest.raises(dataclasses.FrozenInstanceError):
        infos.name = "other"  # type: ignore[misc]


def test_value_or_none() -> None:
    assert value_or_none(Ok("git@github.com:a/b.git")) == "git@github.com:a/b.git"
    assert value_or_none(Failure("no remote")) is None
