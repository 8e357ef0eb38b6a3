from .base import (
    AnalysisResult,
    Category,
    DetectionContext,
    Detector,
    Occurrence,
    Severity,
)
from .duplicate_tokens import (
    DuplicateTokenDetector,
    find_candidates,
    find_duplicate_tokens,
    locate_token,
)
from .filters import LATEX_FILTERS, MatchFilter, filters_for
from .registry import DetectorRegistry, create_default_registry

__all__ = [
    # Protocol
    "Detector",
    # Types
    "AnalysisResult",
    "Category",
    "DetectionContext",
    "Occurrence",
    "Severity",
    # Duplicate tokens
    "DuplicateTokenDetector",
    "find_candidates",
    "find_duplicate_tokens",
    "locate_token",
    # Filters
    "LATEX_FILTERS",
    "MatchFilter",
    "filters_for",
    # Registry
    "DetectorRegistry",
    "create_default_registry",
]
