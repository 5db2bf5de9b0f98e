"""Line-oriented terminal collector for the question graph."""

from __future__ import annotations

import sys
from typing import Any, Callable, List, Optional, Sequence, TextIO

from .logging import get_logger
from .models import Answers, ProjectInfos
from .questions import Choice, QuestionGraph, QuestionSpec

# Entered at an input prompt to record an empty answer instead of the default.
CLEAR_INPUT = "-"


class PromptAborted(RuntimeError):
    """Raised when input cannot be read from the user."""


class PromptCollector:
    """Asks each question in order and records the answers.

    Defaults are resolved lazily, right before each question, so answer
    dependent defaults see every earlier answer.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        *,
        skip_prompts: bool = False,
    ) -> None:
        self._input = input_func
        self._output = output if output is not None else sys.stdout
        self.skip_prompts = skip_prompts
        self.logger = get_logger("collector")

    async def collect(self, graph: QuestionGraph) -> Answers:
        answers = Answers()
        for spec in graph:
            if not graph.is_enabled(spec):
                self.logger.debug("Skipping question %s", spec.name)
                continue
            default = await graph.default_for(spec, answers)
            if self.skip_prompts:
                value = default
            else:
                value = await self.ask(spec, default, graph.choices_for(spec))
            answers.record(spec.name, value)
        return answers

    async def ask_one(self, spec: QuestionSpec, infos: ProjectInfos) -> Any:
        """Ask a standalone question outside of a graph (template choice, overwrite)."""
        graph = QuestionGraph(infos, [spec])
        default = await graph.default_for(spec, Answers())
        if self.skip_prompts:
            return default
        return await self.ask(spec, default, graph.choices_for(spec))

    async def ask(self, spec: QuestionSpec, default: Any, choices: Sequence[Choice]) -> Any:
        if spec.kind == "list":
            return await self._ask_list(spec, default, choices)
        if spec.kind == "checkbox":
            return await self._ask_checkbox(spec, default, choices)
        return await self._ask_input(spec, default)

    async def _ask_input(self, spec: QuestionSpec, default: Any) -> Any:
        prompt = spec.message
        if default:
            prompt = f"{prompt} [{default}]"
        raw = (await self._read(f"{prompt}: ")).strip()
        if raw == CLEAR_INPUT:
            value = ""
        else:
            value = raw or (default or "")
        return spec.filter(value) if spec.filter else value

    async def _ask_list(self, spec: QuestionSpec, default: Any, choices: Sequence[Choice]) -> Any:
        self._write(spec.message)
        default_index = 0
        for index, choice in enumerate(choices, start=1):
            if choice.value == default:
                default_index = index
            self._write(f"  {index}) {choice.name}")
        while True:
            raw = (await self._read(f"Choose [{default_index or ''}]: ")).strip()
            if not raw and default_index:
                return choices[default_index - 1].value
            picked = _match_choice(raw, choices)
            if picked is not None:
                return picked.value
            self._write("Please pick one of the listed options.")

    async def _ask_checkbox(
        self, spec: QuestionSpec, default: Any, choices: Sequence[Choice]
    ) -> List[Any]:
        selected = default or []
        self._write(spec.message)
        for index, choice in enumerate(choices, start=1):
            mark = "x" if choice.value in selected else " "
            self._write(f"  [{mark}] {index}) {choice.name}")
        while True:
            raw = (await self._read("Comma separated numbers, '-' for none [selected]: ")).strip()
            if not raw:
                return list(selected)
            if raw == CLEAR_INPUT:
                return []
            picked = _parse_indexes(raw, len(choices))
            if picked is not None:
                return [choices[index].value for index in picked]
            self._write("Please enter numbers from the list, separated by commas.")

    async def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptAborted("Input closed before all questions were answered") from exc

    def _write(self, line: str) -> None:
        print(line, file=self._output)


def _match_choice(raw: str, choices: Sequence[Choice]) -> Optional[Choice]:
    if raw.isdigit():
        index = int(raw)
        if 1 <= index <= len(choices):
            return choices[index - 1]
        return None
    lowered = raw.lower()
    for choice in choices:
        if choice.name.strip().lower() == lowered:
            return choice
    return None


def _parse_indexes(raw: str, count: int) -> Optional[List[int]]:
    indexes: List[int] = []
    for part in raw.split(","):
        part = part.strip()
        if not part.isdigit() or not 1 <= int(part) <= count:
            return None
        if int(part) - 1 not in indexes:
            indexes.append(int(part) - 1)
    return sorted(indexes)


__all__ = ["CLEAR_INPUT", "PromptAborted", "PromptCollector"]
