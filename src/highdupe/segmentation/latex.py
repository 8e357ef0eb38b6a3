# src/highdupe/segmentation/latex.py

import logging
from collections.abc import Sequence

from highdupe import syntax

from .base import ParagraphBuilder, Segmenter
from .models import Paragraph

logger = logging.getLogger(__name__)


class LatexSegmenter(Segmenter):
    """
    LaTeX paragraph segmenter.
    - Math, table and bibliography environments are never prose
    - Comment-only lines are dropped without closing the paragraph
    - Blank lines and \\par close the paragraph
    - Command syntax is rewritten to its textual content
    """

    def segment(self, lines: Sequence[str]) -> list[Paragraph]:
        builder = ParagraphBuilder()
        # Environment whose content is being skipped, and its nesting depth.
        region: str | None = None
        depth = 0

        for index, line in enumerate(lines):
            if region is not None:
                depth = syntax.region_depth(line, region, depth)
                if depth == 0:
                    region = None
                continue

            if syntax.is_comment_line(line):
                continue

            begin = syntax.BIBLIOGRAPHY_BEGIN.search(
                line
            ) or syntax.EXCLUDED_BEGIN.search(line)
            if begin:
                builder.flush()
                depth = syntax.region_depth(line, begin.group(1), 1, begin.end())
                region = begin.group(1) if depth else None
                continue

            if syntax.EXCLUDED_END.search(line) or syntax.BIBLIOGRAPHY_END.search(
                line
            ):
                # Closing marker without an opening one.
                logger.debug("Unbalanced environment end on line %d", index)
                builder.flush()
                continue

            text = syntax.rewrite_line(line)
            if not text.strip() or syntax.has_paragraph_break(text):
                builder.flush()
                continue

            builder.add(index, text)

        builder.flush()

        if region is not None:
            logger.debug("Document ends inside environment %s", region)

        return builder.paragraphs
