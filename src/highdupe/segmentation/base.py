# src/highdupe/segmentation/base.py

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import LinePiece, Paragraph


class Segmenter(ABC):
    @abstractmethod
    def segment(self, lines: Sequence[str]) -> list[Paragraph]:
        """
        Split document lines into prose paragraphs.

        Requirements:
        - Deterministic output for same input
        - Paragraphs in increasing, non-overlapping line order
        - Line numbers refer to the original, unprocessed lines
        """
        raise NotImplementedError


class ParagraphBuilder:
    """Accumulates prose lines until a paragraph boundary is reached."""

    def __init__(self) -> None:
        self._pieces: list[LinePiece] = []
        self.paragraphs: list[Paragraph] = []

    def add(self, line: int, text: str) -> None:
        self._pieces.append(LinePiece(line=line, text=text))

    def flush(self) -> None:
        if not self._pieces:
            return

        pieces = tuple(self._pieces)
        self._pieces = []

        text = " ".join(piece.text for piece in pieces).strip()
        if not text:
            return

        self.paragraphs.append(
            Paragraph(
                text=text,
                start_line=pieces[0].line,
                end_line=pieces[-1].line,
                pieces=pieces,
            )
        )
