# src/highdupe/analysis/__init__.py

"""Incremental analysis of open documents.

Example:
    >>> from highdupe.analysis import IncrementalAnalyzer, InMemoryDocument
    >>>
    >>> analyzer = IncrementalAnalyzer()
    >>> document = InMemoryDocument.from_text(text, identity="paper.tex")
    >>> first = analyzer.analyze_pass(document)
    >>> again = analyzer.analyze_pass(document)
    >>> again.kind, again.changed
    (<PassKind.NOOP: 'noop'>, False)
"""

from .analyzer import (
    AnalysisPass,
    IncrementalAnalyzer,
    PassKind,
    ResultsRenderer,
    order_results,
)
from .cache import AnalysisCache, DocumentCacheEntry, fingerprint
from .document import InMemoryDocument, TextDocument, snapshot_lines
from .scheduler import CheckScheduler

__all__ = [
    # Analyzer
    "IncrementalAnalyzer",
    "AnalysisPass",
    "PassKind",
    "ResultsRenderer",
    "order_results",
    # Cache
    "AnalysisCache",
    "DocumentCacheEntry",
    "fingerprint",
    # Documents
    "TextDocument",
    "InMemoryDocument",
    "snapshot_lines",
    # Scheduling
    "CheckScheduler",
]
