# src/highdupe/segmentation/plain.py

from collections.abc import Sequence

from .base import ParagraphBuilder, Segmenter
from .models import Paragraph


class PlainTextSegmenter(Segmenter):
    """
    Blank-line paragraph splitter for documents without command syntax.
    - Markdown, Quarto, R Markdown and plain text
    - Lines are kept verbatim
    """

    def segment(self, lines: Sequence[str]) -> list[Paragraph]:
        builder = ParagraphBuilder()

        for index, line in enumerate(lines):
            if not line.strip():
                builder.flush()
                continue
            builder.add(index, line)

        builder.flush()
        return builder.paragraphs
