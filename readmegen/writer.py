"""Persists the assembled README, confirming before overwriting."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional

from .logging import get_logger
from .models import Document

ConfirmOverwrite = Callable[[Path], Awaitable[bool]]


@dataclass(frozen=True)
class WriteOutcome:
    path: Path
    written: bool

    @property
    def aborted(self) -> bool:
        return not self.written


class ReadmeWriter:
    """Writes documents to disk; declining the overwrite prompt is not an error."""

    def __init__(self, confirm: Optional[ConfirmOverwrite] = None) -> None:
        self._confirm = confirm
        self.logger = get_logger("writer")

    async def write(self, path: Path, document: Document) -> WriteOutcome:
        if path.exists():
            if self._confirm is None or not await self._confirm(path):
                self.logger.info("Keeping existing %s", path.name)
                return WriteOutcome(path=path, written=False)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.content, encoding="utf-8")
        self.logger.debug("Wrote %d bytes to %s", len(document.content), path)
        return WriteOutcome(path=path, written=True)


__all__ = ["ConfirmOverwrite", "ReadmeWriter", "WriteOutcome"]
