import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from highdupe.config import ExcludeWordsSettings

logger = logging.getLogger(__name__)

DEFAULT_WORDS_RESOURCE = "data/exclude_words.yaml"


def normalize_words(words: Any) -> frozenset[str]:
    return frozenset(str(word).strip().lower() for word in words if str(word).strip())


def _words_from_data(data: Any) -> frozenset[str]:
    # Either a bare list or a mapping with an ``excluded_words`` list
    # (``excludedWords`` in the editor extension's JSON files).
    if isinstance(data, dict):
        data = data.get("excluded_words", data.get("excludedWords", []))
    if not isinstance(data, list):
        raise ValueError("exclusion list must be a list of words")
    return normalize_words(data)


def load_exclusion_words(path: str | Path) -> frozenset[str]:
    """Read an exclusion list from YAML (JSON is valid YAML too).

    Failures are logged and yield an empty set.
    """
    try:
        with open(path) as f:
            return _words_from_data(yaml.safe_load(f))
    except (OSError, yaml.YAMLError, ValueError) as exc:
        logger.error("Could not load exclusion list %s: %s", path, exc)
        return frozenset()


def load_default_words() -> frozenset[str]:
    try:
        text = (
            resources.files("highdupe.vocabulary")
            .joinpath(DEFAULT_WORDS_RESOURCE)
            .read_text(encoding="utf-8")
        )
        return _words_from_data(yaml.safe_load(text))
    except (OSError, yaml.YAMLError, ValueError) as exc:
        logger.error("Could not load bundled exclusion list: %s", exc)
        return frozenset()


@dataclass(frozen=True)
class ExclusionVocabulary:
    """Lower-cased words that are never reported as duplicates.

    Two tiers, combined by union: ``global_words`` (bundled defaults plus
    user-wide additions) and ``project_words``.
    """

    global_words: frozenset[str] = field(default_factory=frozenset)
    project_words: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_words(
        cls, global_words: Any = (), project_words: Any = ()
    ) -> "ExclusionVocabulary":
        return cls(
            global_words=normalize_words(global_words),
            project_words=normalize_words(project_words),
        )

    @classmethod
    def from_settings(cls, settings: ExcludeWordsSettings) -> "ExclusionVocabulary":
        global_words = normalize_words(settings.global_words)
        if settings.use_defaults:
            global_words |= load_default_words()

        vocabulary = cls(
            global_words=global_words,
            project_words=normalize_words(settings.project_words),
        )
        logger.info(
            "Exclusion vocabulary: %d global, %d project words",
            len(vocabulary.global_words),
            len(vocabulary.project_words),
        )
        return vocabulary

    @property
    def words(self) -> frozenset[str]:
        return self.global_words | self.project_words

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        token = token.lower()
        return token in self.global_words or token in self.project_words

    def __len__(self) -> int:
        return len(self.words)

    def with_global_word(self, word: str) -> "ExclusionVocabulary":
        return ExclusionVocabulary(
            global_words=self.global_words | normalize_words([word]),
            project_words=self.project_words,
        )

    def with_project_word(self, word: str) -> "ExclusionVocabulary":
        return ExclusionVocabulary(
            global_words=self.global_words,
            project_words=self.project_words | normalize_words([word]),
        )
