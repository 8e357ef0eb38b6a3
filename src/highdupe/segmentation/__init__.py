# src/highdupe/segmentation/__init__.py

r"""Segmentation of documents into prose paragraphs.

Example:
    >>> from highdupe.segmentation import LatexSegmenter
    >>>
    >>> paragraphs = LatexSegmenter().segment(
    ...     ["\\section{Intro}", "", "Some \\textbf{bold} text.  % note"]
    ... )
    >>> [(p.text, p.start_line, p.end_line) for p in paragraphs]
    [('Intro', 0, 0), ('Some bold text.', 2, 2)]
"""

from .base import ParagraphBuilder, Segmenter
from .factory import FileType, create_segmenter, detect_file_type
from .latex import LatexSegmenter
from .models import LinePiece, Paragraph
from .plain import PlainTextSegmenter

__all__ = [
    # Factory
    "create_segmenter",
    "detect_file_type",
    "FileType",
    # Segmenters
    "Segmenter",
    "LatexSegmenter",
    "PlainTextSegmenter",
    "ParagraphBuilder",
    # Types
    "LinePiece",
    "Paragraph",
]
