# Analysis
from .analysis import (
    AnalysisPass,
    CheckScheduler,
    IncrementalAnalyzer,
    InMemoryDocument,
    PassKind,
    ResultsRenderer,
    TextDocument,
)

# Configuration
from .config import HighDupeConfig, load_config

# Detectors
from .detectors import (
    AnalysisResult,
    Category,
    DetectionContext,
    Detector,
    DetectorRegistry,
    DuplicateTokenDetector,
    Occurrence,
    create_default_registry,
    find_duplicate_tokens,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Segmentation
from .segmentation import (
    LatexSegmenter,
    Paragraph,
    PlainTextSegmenter,
    Segmenter,
    create_segmenter,
    detect_file_type,
)

# Vocabulary
from .vocabulary import ExclusionVocabulary, load_exclusion_words

__all__ = [
    # Analysis
    "AnalysisPass",
    "CheckScheduler",
    "IncrementalAnalyzer",
    "InMemoryDocument",
    "PassKind",
    "ResultsRenderer",
    "TextDocument",
    # Configuration
    "HighDupeConfig",
    "load_config",
    # Detectors
    "AnalysisResult",
    "Category",
    "DetectionContext",
    "Detector",
    "DetectorRegistry",
    "DuplicateTokenDetector",
    "Occurrence",
    "create_default_registry",
    "find_duplicate_tokens",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Segmentation
    "LatexSegmenter",
    "Paragraph",
    "PlainTextSegmenter",
    "Segmenter",
    "create_segmenter",
    "detect_file_type",
    # Vocabulary
    "ExclusionVocabulary",
    "load_exclusion_words",
]
