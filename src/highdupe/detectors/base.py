# src/highdupe/detectors/base.py

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal, Protocol

from highdupe.config import HighDupeConfig
from highdupe.segmentation import FileType, Paragraph


class Category(str, Enum):
    """Kind of issue a result reports.

    Only DUPLICATE_TOKEN has a detector; the others are reserved for
    future detectors.
    """

    DUPLICATE_TOKEN = "duplicate-token"
    PASSIVE_VOICE = "passive-voice"
    ADVERB = "adverb"
    CONTRACTION = "contraction"
    PARAGRAPH_LENGTH = "paragraph-length"
    TRANSITION_WORD = "transition-word"


Severity = Literal["error", "warning", "info"]


@dataclass(frozen=True)
class Occurrence:
    """A highlightable location in the original document text.

    Columns are zero-based, ``end_col`` exclusive. ``token`` is the
    normalized (lower-cased) word.
    """

    line: int
    start_col: int
    end_col: int
    token: str


@dataclass(frozen=True)
class AnalysisResult:
    occurrence: Occurrence
    category: Category
    message: str
    suggestion: str
    severity: Severity = "warning"
    text: str = ""  # Surface text as written in the document

    @property
    def line(self) -> int:
        return self.occurrence.line

    def shifted(self, delta: int) -> "AnalysisResult":
        """Same result moved ``delta`` lines down (or up when negative)."""
        if delta == 0:
            return self
        occurrence = replace(self.occurrence, line=self.occurrence.line + delta)
        return replace(self, occurrence=occurrence)


@dataclass(frozen=True)
class DetectionContext:
    """Everything a detector may look at during one analysis pass.

    ``paragraphs`` may be a subset of the document's paragraphs on an
    incremental pass; ``lines`` is always the full document snapshot.
    """

    paragraphs: Sequence[Paragraph]
    lines: Sequence[str]
    file_type: FileType = "latex"


class Detector(Protocol):
    """Protocol for pluggable checkers.

    Detectors are synchronous and read-only over the context. They report
    only locations inside the given paragraphs' line ranges.
    """

    name: str
    enabled: bool

    def check(self, context: DetectionContext) -> list[AnalysisResult]: ...

    def configure(self, config: HighDupeConfig) -> None: ...
