# src/highdupe/observability/names.py

"""Standard metric names for highdupe observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration
SEGMENTATION_DURATION = "segmentation_duration"

# Counters
SEGMENTATION_PARAGRAPHS_CREATED = "segmentation_paragraphs_created"


# ============================================================================
# Detector Metrics
# ============================================================================

# Duration (labelled with the detector name)
DETECTOR_DURATION = "detector_duration"

# Counters
DETECTOR_RESULTS_TOTAL = "detector_results_total"
DETECTOR_ERRORS_TOTAL = "detector_errors_total"


# ============================================================================
# Analysis Pass Metrics
# ============================================================================

# Duration
ANALYSIS_PASS_DURATION = "analysis_pass_duration"

# Counters (labelled with the pass kind: first, full, incremental, noop)
ANALYSIS_PASSES_TOTAL = "analysis_passes_total"
ANALYSIS_PARAGRAPHS_RECHECKED = "analysis_paragraphs_rechecked"

# Gauges
ANALYSIS_RESULTS = "analysis_results"
ANALYSIS_CACHED_DOCUMENTS = "analysis_cached_documents"


# ============================================================================
# Scheduler Metrics
# ============================================================================

# Counters
SCHEDULER_TICKS_SKIPPED = "scheduler_ticks_skipped"
