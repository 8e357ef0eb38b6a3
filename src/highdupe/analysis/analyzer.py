# src/highdupe/analysis/analyzer.py

import bisect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from time import monotonic
from typing import Protocol

from highdupe.config import HighDupeConfig
from highdupe.detectors import (
    AnalysisResult,
    DetectionContext,
    DetectorRegistry,
    create_default_registry,
)
from highdupe.observability import names
from highdupe.observability.base import MetricsHook, NoOpMetricsHook
from highdupe.segmentation import (
    FileType,
    Paragraph,
    create_segmenter,
    detect_file_type,
)

from .cache import (
    AnalysisCache,
    DocumentCacheEntry,
    Span,
    fingerprint_paragraphs,
    fingerprint_sources,
)
from .document import TextDocument, snapshot_lines

logger = logging.getLogger(__name__)


class PassKind(str, Enum):
    FIRST = "first"
    FULL = "full"
    INCREMENTAL = "incremental"
    NOOP = "noop"


@dataclass(frozen=True)
class AnalysisPass:
    """Outcome of one ``analyze`` call.

    ``changed`` is False when the results equal the previous pass's; the
    ``results`` list is then the very object returned last time, and nothing
    needs to be re-rendered. ``rechecked`` lists the paragraph ordinals the
    detectors ran over.
    """

    results: list[AnalysisResult]
    kind: PassKind
    changed: bool
    rechecked: tuple[int, ...]


class ResultsRenderer(Protocol):
    def render(self, cache_key: str, results: list[AnalysisResult]) -> None: ...


def _ordinal_lookup(spans: Sequence[Span]) -> Callable[[int], int | None]:
    """Map a line number to the ordinal of the span containing it."""
    starts = [start for start, _ in spans]

    def lookup(line: int) -> int | None:
        index = bisect.bisect_right(starts, line) - 1
        if index < 0 or line > spans[index][1]:
            return None
        return index

    return lookup


def order_results(
    results: list[AnalysisResult], paragraphs: Sequence[Paragraph]
) -> list[AnalysisResult]:
    """Stable sort by owning paragraph; results outside every paragraph go last."""
    lookup = _ordinal_lookup([(p.start_line, p.end_line) for p in paragraphs])
    last = len(paragraphs)

    def key(result: AnalysisResult) -> int:
        ordinal = lookup(result.line)
        return last if ordinal is None else ordinal

    return sorted(results, key=key)


class IncrementalAnalyzer:
    """Runs the registered detectors over a document, pass after pass.

    Per document it keeps a fingerprint of every paragraph and the previous
    results. A pass re-runs the detectors only over paragraphs whose text or
    source lines changed, unless the paragraph count changed, in which case
    everything is rechecked.

    Design principles:
    - Synchronous: a pass runs to completion, no timers, no threads
    - Read-only: documents are never modified
    - Degrade, don't fail: a failing detector contributes no results
    - Not reentrant per document: one pass per cache key at a time

    Example:
        >>> analyzer = IncrementalAnalyzer()
        >>> document = InMemoryDocument.from_text(
        ...     "Although Although the results", identity="a.tex", language_id="latex"
        ... )
        >>> [r.text for r in analyzer.analyze(document)]
        ['Although', 'Although']
    """

    def __init__(
        self,
        registry: DetectorRegistry | None = None,
        *,
        renderer: ResultsRenderer | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.registry = registry if registry is not None else create_default_registry()
        self.renderer = renderer
        self.metrics_hook = metrics_hook
        self._cache = AnalysisCache()
        self._in_flight: set[str] = set()

    def analyze(
        self, document: TextDocument, cache_key: str | None = None
    ) -> list[AnalysisResult]:
        return self.analyze_pass(document, cache_key).results

    def analyze_pass(
        self, document: TextDocument, cache_key: str | None = None
    ) -> AnalysisPass:
        key = cache_key or document.identity
        if key in self._in_flight:
            raise RuntimeError(f"Analysis already running for '{key}'")

        self._in_flight.add(key)
        try:
            outcome = self._run_pass(document, key)
        finally:
            self._in_flight.discard(key)

        if outcome.changed and self.renderer is not None:
            self.renderer.render(key, outcome.results)
        return outcome

    def is_running(self, cache_key: str) -> bool:
        return cache_key in self._in_flight

    def configure(self, config: HighDupeConfig) -> None:
        """Apply new settings; every document is fully rechecked next pass."""
        self.registry.configure(config)
        self._cache.clear_all()
        logger.info("Configuration applied, cache cleared")

    def clear(self, cache_key: str) -> None:
        self._cache.clear(cache_key)

    def clear_all(self) -> None:
        self._cache.clear_all()

    def has_entry(self, cache_key: str) -> bool:
        return cache_key in self._cache

    def cache_entry(self, cache_key: str) -> DocumentCacheEntry | None:
        return self._cache.get(cache_key)

    def _run_pass(self, document: TextDocument, key: str) -> AnalysisPass:
        start = monotonic()
        lines = snapshot_lines(document)
        file_type = detect_file_type(document.language_id, document.file_name)
        paragraphs = self._segment(lines, file_type)
        fingerprints = fingerprint_paragraphs(paragraphs)
        sources = fingerprint_sources(paragraphs, lines)
        previous = self._cache.get(key)

        if previous is None:
            logger.debug("First pass for %s: %d paragraphs", key, len(paragraphs))
            outcome = self._full_pass(
                PassKind.FIRST, paragraphs, lines, file_type, previous
            )
        elif previous.paragraph_count != len(paragraphs):
            logger.debug(
                "Paragraph count for %s changed from %d to %d, full recheck",
                key,
                previous.paragraph_count,
                len(paragraphs),
            )
            outcome = self._full_pass(
                PassKind.FULL, paragraphs, lines, file_type, previous
            )
        else:
            outcome = self._incremental_pass(
                paragraphs, fingerprints, sources, lines, file_type, previous
            )

        if outcome.kind is not PassKind.NOOP:
            self._cache.put(
                key,
                DocumentCacheEntry.build(
                    paragraphs, outcome.results, fingerprints, sources
                ),
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.ANALYSIS_PASS_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.ANALYSIS_PASSES_TOTAL, labels={"kind": outcome.kind.value}
        )
        self.metrics_hook.increment(
            names.ANALYSIS_PARAGRAPHS_RECHECKED, len(outcome.rechecked)
        )
        self.metrics_hook.record_gauge(names.ANALYSIS_RESULTS, len(outcome.results))
        self.metrics_hook.record_gauge(names.ANALYSIS_CACHED_DOCUMENTS, len(self._cache))
        return outcome

    def _segment(self, lines: list[str], file_type: FileType) -> list[Paragraph]:
        start = monotonic()
        paragraphs = create_segmenter(file_type).segment(lines)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SEGMENTATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.SEGMENTATION_PARAGRAPHS_CREATED, len(paragraphs)
        )
        return paragraphs

    def _full_pass(
        self,
        kind: PassKind,
        paragraphs: list[Paragraph],
        lines: list[str],
        file_type: FileType,
        previous: DocumentCacheEntry | None,
    ) -> AnalysisPass:
        results = order_results(
            self._run_detectors(DetectionContext(paragraphs, lines, file_type)),
            paragraphs,
        )
        rechecked = tuple(range(len(paragraphs)))
        return self._outcome(kind, results, rechecked, previous)

    def _incremental_pass(
        self,
        paragraphs: list[Paragraph],
        fingerprints: dict[int, str],
        sources: dict[int, str],
        lines: list[str],
        file_type: FileType,
        previous: DocumentCacheEntry,
    ) -> AnalysisPass:
        changed: list[int] = []
        moves: dict[int, int] = {}

        for ordinal, paragraph in enumerate(paragraphs):
            old_start, _ = previous.spans[ordinal]
            if (
                fingerprints[ordinal] != previous.fingerprints[ordinal]
                or sources[ordinal] != previous.sources.get(ordinal)
            ):
                changed.append(ordinal)
            elif paragraph.start_line != old_start:
                moves[ordinal] = paragraph.start_line - old_start

        if not changed and not moves:
            return AnalysisPass(
                results=previous.results,
                kind=PassKind.NOOP,
                changed=False,
                rechecked=(),
            )

        logger.debug(
            "Incremental pass: %d changed, %d moved of %d paragraphs",
            len(changed),
            len(moves),
            len(paragraphs),
        )

        fresh: list[AnalysisResult] = []
        if changed:
            fresh = self._run_detectors(
                DetectionContext(
                    [paragraphs[ordinal] for ordinal in changed], lines, file_type
                )
            )

        changed_set = set(changed)
        old_owner = _ordinal_lookup(
            [previous.spans[ordinal] for ordinal in range(len(paragraphs))]
        )
        carried: list[AnalysisResult] = []
        for result in previous.results:
            ordinal = old_owner(result.line)
            if ordinal is None:
                carried.append(result)
            elif ordinal not in changed_set:
                carried.append(result.shifted(moves.get(ordinal, 0)))

        results = order_results(carried + fresh, paragraphs)
        return self._outcome(
            PassKind.INCREMENTAL, results, tuple(changed), previous
        )

    def _outcome(
        self,
        kind: PassKind,
        results: list[AnalysisResult],
        rechecked: tuple[int, ...],
        previous: DocumentCacheEntry | None,
    ) -> AnalysisPass:
        if previous is not None and results == previous.results:
            return AnalysisPass(
                results=previous.results,
                kind=kind,
                changed=False,
                rechecked=rechecked,
            )
        return AnalysisPass(
            results=results, kind=kind, changed=True, rechecked=rechecked
        )

    def _run_detectors(self, context: DetectionContext) -> list[AnalysisResult]:
        results: list[AnalysisResult] = []

        for detector in self.registry.enabled():
            start = monotonic()
            try:
                found = detector.check(context)
            except Exception:
                logger.exception("Detector '%s' failed, skipping it", detector.name)
                self.metrics_hook.increment(
                    names.DETECTOR_ERRORS_TOTAL, labels={"detector": detector.name}
                )
                continue

            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(
                names.DETECTOR_DURATION,
                elapsed_ms,
                labels={"detector": detector.name},
            )
            self.metrics_hook.increment(
                names.DETECTOR_RESULTS_TOTAL,
                len(found),
                labels={"detector": detector.name},
            )
            results.extend(found)

        return results
