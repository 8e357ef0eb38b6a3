# src/highdupe/segmentation/factory.py

from typing import Literal

from .base import Segmenter
from .latex import LatexSegmenter
from .plain import PlainTextSegmenter

FileType = Literal["latex", "markdown", "quarto", "rmarkdown", "text"]


def detect_file_type(language_id: str | None, file_name: str | None) -> FileType:
    """Classify a document from its editor language id and file name.

    The language id wins for LaTeX and Markdown; Quarto and R Markdown are
    recognised by extension only.
    """
    name = file_name or ""

    if language_id == "latex" or name.endswith(".tex"):
        return "latex"
    if language_id == "markdown" or name.endswith(".md"):
        return "markdown"
    if name.endswith(".qmd"):
        return "quarto"
    if name.endswith(".Rmd"):
        return "rmarkdown"

    return "text"


def create_segmenter(file_type: FileType) -> Segmenter:
    if file_type == "latex":
        return LatexSegmenter()

    return PlainTextSegmenter()
