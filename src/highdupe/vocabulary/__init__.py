from .vocabulary import (
    ExclusionVocabulary,
    load_default_words,
    load_exclusion_words,
    normalize_words,
)

__all__ = [
    "ExclusionVocabulary",
    "load_default_words",
    "load_exclusion_words",
    "normalize_words",
]
