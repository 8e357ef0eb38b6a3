# src/highdupe/detectors/duplicate_tokens.py

import logging
import re
from collections import Counter
from collections.abc import Collection, Iterable, Sequence

from highdupe import syntax
from highdupe.config import HighDupeConfig, Scope
from highdupe.segmentation import FileType, Paragraph
from highdupe.vocabulary import ExclusionVocabulary

from .base import AnalysisResult, Category, DetectionContext, Occurrence
from .filters import MatchFilter, filters_for, is_rejected

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\w+")

MESSAGE_TEMPLATE = 'Duplicate word: "{text}"'
SUGGESTION = "Consider using a synonym or rephrasing to avoid repetition."

SCOPES = ("line", "paragraph")


def find_candidates(text: str, vocabulary: Collection[str]) -> list[str]:
    """Lower-cased tokens seen at least twice in ``text``, in first-seen order."""
    counts: Counter[str] = Counter()
    for token in TOKEN_PATTERN.findall(text.lower()):
        if token in vocabulary:
            continue
        counts[token] += 1
    return [token for token, count in counts.items() if count >= 2]


def _units(
    paragraph: Paragraph, scope: Scope
) -> Iterable[tuple[str, range]]:
    # (text to count in, source lines to search)
    if scope == "line" and paragraph.pieces:
        for piece in paragraph.pieces:
            yield piece.text, range(piece.line, piece.line + 1)
        return
    yield paragraph.text, range(paragraph.start_line, paragraph.end_line + 1)


def _skip_line(line: str, file_type: FileType) -> bool:
    if file_type != "latex":
        return False
    return syntax.is_comment_line(line) or syntax.has_region_delimiter(line)


def locate_token(
    token: str,
    line_numbers: Iterable[int],
    lines: Sequence[str],
    *,
    file_type: FileType = "latex",
    filters: Sequence[MatchFilter] | None = None,
) -> list[Occurrence]:
    """Every prose occurrence of ``token`` in the given source lines.

    Line numbers past the end of ``lines`` are ignored; the document may
    have shrunk since it was segmented.
    """
    if filters is None:
        filters = filters_for(file_type)

    pattern = re.compile(rf"\b{re.escape(token)}\b", re.IGNORECASE)
    occurrences: list[Occurrence] = []

    for number in line_numbers:
        if number < 0 or number >= len(lines):
            continue

        line = lines[number]
        if _skip_line(line, file_type):
            continue

        for match in pattern.finditer(line):
            if is_rejected(line, match.start(), match.end(), filters):
                continue
            occurrences.append(
                Occurrence(
                    line=number,
                    start_col=match.start(),
                    end_col=match.end(),
                    token=token,
                )
            )

    return occurrences


def find_duplicate_tokens(
    paragraphs: Iterable[Paragraph],
    vocabulary: Collection[str],
    lines: Sequence[str],
    *,
    scope: Scope = "paragraph",
    file_type: FileType = "latex",
) -> list[AnalysisResult]:
    """Report every occurrence of a word repeated within a paragraph (or line).

    Results are ordered by paragraph, then by the order candidates first
    appear, then by line and column.
    """
    if scope not in SCOPES:
        raise ValueError(f"Unknown scope: {scope}")

    filters = filters_for(file_type)
    results: list[AnalysisResult] = []

    for paragraph in paragraphs:
        for text, line_numbers in _units(paragraph, scope):
            for token in find_candidates(text, vocabulary):
                for occurrence in locate_token(
                    token,
                    line_numbers,
                    lines,
                    file_type=file_type,
                    filters=filters,
                ):
                    line = lines[occurrence.line]
                    surface = line[occurrence.start_col : occurrence.end_col]
                    results.append(
                        AnalysisResult(
                            occurrence=occurrence,
                            category=Category.DUPLICATE_TOKEN,
                            message=MESSAGE_TEMPLATE.format(text=surface),
                            suggestion=SUGGESTION,
                            severity="warning",
                            text=surface,
                        )
                    )

    return results


class DuplicateTokenDetector:
    """Detects words that appear more than once within a paragraph.

    Example:
        >>> detector = DuplicateTokenDetector(ExclusionVocabulary.from_words(["the"]))
        >>> lines = ["Although Although the results"]
        >>> context = DetectionContext(
        ...     paragraphs=[Paragraph("Although Although the results", 0, 0)],
        ...     lines=lines,
        ... )
        >>> [r.occurrence.start_col for r in detector.check(context)]
        [0, 9]
    """

    name = "duplicate-word"
    display_name = "Duplicate Word Checker"
    description = "Detects words that appear multiple times within a paragraph"

    def __init__(
        self,
        vocabulary: ExclusionVocabulary | None = None,
        *,
        scope: Scope = "paragraph",
        enabled: bool = True,
    ) -> None:
        if scope not in SCOPES:
            raise ValueError(f"Unknown scope: {scope}")
        self.vocabulary = vocabulary or ExclusionVocabulary()
        self.scope: Scope = scope
        self.enabled = enabled

    def check(self, context: DetectionContext) -> list[AnalysisResult]:
        results = find_duplicate_tokens(
            context.paragraphs,
            self.vocabulary,
            context.lines,
            scope=self.scope,
            file_type=context.file_type,
        )
        logger.debug(
            "Found %d duplicate occurrences in %d paragraphs",
            len(results),
            len(context.paragraphs),
        )
        return results

    def configure(self, config: HighDupeConfig) -> None:
        settings = config.duplicate_word
        self.enabled = settings.enabled
        self.scope = settings.scope
        self.vocabulary = ExclusionVocabulary.from_settings(settings.exclude_words)
        logger.info(
            "Configured %s: enabled=%s, scope=%s", self.name, self.enabled, self.scope
        )
