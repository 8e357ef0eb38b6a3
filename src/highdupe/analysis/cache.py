# src/highdupe/analysis/cache.py

import hashlib
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from highdupe.detectors import AnalysisResult
from highdupe.segmentation import Paragraph

logger = logging.getLogger(__name__)

Span = tuple[int, int]


def fingerprint(text: str) -> str:
    """Content hash of a paragraph's flattened text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class DocumentCacheEntry:
    """State kept between passes for one document.

    ``fingerprints``, ``sources`` and ``spans`` are keyed by paragraph ordinal.
    ``sources`` hashes the raw lines of each span, so edits that move words
    without changing the flattened text still count as changes.
    ``results`` is in canonical order: by owning paragraph, then detector.
    """

    fingerprints: dict[int, str]
    spans: dict[int, Span]
    results: list[AnalysisResult]
    sources: dict[int, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        paragraphs: Sequence[Paragraph],
        results: list[AnalysisResult],
        fingerprints: dict[int, str] | None = None,
        sources: dict[int, str] | None = None,
    ) -> "DocumentCacheEntry":
        if fingerprints is None:
            fingerprints = fingerprint_paragraphs(paragraphs)
        return cls(
            fingerprints=fingerprints,
            spans={
                ordinal: (paragraph.start_line, paragraph.end_line)
                for ordinal, paragraph in enumerate(paragraphs)
            },
            results=results,
            sources=sources or {},
        )

    @property
    def paragraph_count(self) -> int:
        return len(self.fingerprints)


def fingerprint_paragraphs(paragraphs: Sequence[Paragraph]) -> dict[int, str]:
    return {
        ordinal: fingerprint(paragraph.text)
        for ordinal, paragraph in enumerate(paragraphs)
    }


def fingerprint_sources(
    paragraphs: Sequence[Paragraph], lines: Sequence[str]
) -> dict[int, str]:
    return {
        ordinal: fingerprint(
            "\n".join(lines[paragraph.start_line : paragraph.end_line + 1])
        )
        for ordinal, paragraph in enumerate(paragraphs)
    }


class AnalysisCache:
    """Per-document cache entries, keyed by a stable document identity."""

    def __init__(self) -> None:
        self._entries: dict[str, DocumentCacheEntry] = {}

    def get(self, key: str) -> DocumentCacheEntry | None:
        return self._entries.get(key)

    def put(self, key: str, entry: DocumentCacheEntry) -> None:
        self._entries[key] = entry

    def clear(self, key: str) -> None:
        if self._entries.pop(key, None) is not None:
            logger.debug("Cleared cache entry: %s", key)

    def clear_all(self) -> None:
        logger.debug("Clearing %d cache entries", len(self._entries))
        self._entries.clear()

    def keys(self) -> list[str]:
        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
