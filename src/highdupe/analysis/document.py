# src/highdupe/analysis/document.py

from dataclasses import dataclass
from typing import Protocol


class TextDocument(Protocol):
    """Read-only view of an open document supplied by the host editor."""

    @property
    def identity(self) -> str: ...

    @property
    def line_count(self) -> int: ...

    @property
    def language_id(self) -> str | None: ...

    @property
    def file_name(self) -> str | None: ...

    def line_at(self, index: int) -> str: ...


@dataclass(frozen=True)
class InMemoryDocument:
    """TextDocument over a list of lines, for tests and batch use."""

    identity: str
    lines: tuple[str, ...]
    language_id: str | None = None
    file_name: str | None = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        identity: str = "untitled",
        language_id: str | None = None,
        file_name: str | None = None,
    ) -> "InMemoryDocument":
        return cls(
            identity=identity,
            lines=tuple(line.rstrip("\r") for line in text.split("\n")),
            language_id=language_id,
            file_name=file_name,
        )

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        return self.lines[index]


def snapshot_lines(document: TextDocument) -> list[str]:
    return [document.line_at(i) for i in range(document.line_count)]
