# src/highdupe/segmentation/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LinePiece:
    """One rewritten source line that contributed to a paragraph."""

    line: int
    text: str


@dataclass(frozen=True)
class Paragraph:
    """Flattened prose of the source lines ``start_line..end_line``.

    ``text`` is the space-joined, trimmed rewrite of ``pieces``. Lines inside
    the span that are not in ``pieces`` (comment-only lines) carry no prose.
    """

    text: str
    start_line: int
    end_line: int
    pieces: tuple[LinePiece, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.start_line < 0:
            raise ValueError("start_line must be >= 0")
        if self.start_line > self.end_line:
            raise ValueError("start_line must be <= end_line")

    @property
    def height(self) -> int:
        return self.end_line - self.start_line + 1

    def contains_line(self, line: int) -> bool:
        return self.start_line <= line <= self.end_line
