import logging
from pathlib import Path

import pytest

from highdupe.config import ExcludeWordsSettings
from highdupe.vocabulary import (
    ExclusionVocabulary,
    load_default_words,
    load_exclusion_words,
)


@pytest.fixture
def words_dir(tmp_path: Path) -> Path:
    """Create a temp directory with exclusion lists in each supported shape."""
    (tmp_path / "list.yaml").write_text("- Alpha\n- beta\n- '  gamma '\n")
    (tmp_path / "mapping.yaml").write_text("excluded_words:\n  - delta\n")
    (tmp_path / "extension.json").write_text('{"excludedWords": ["Epsilon", "zeta"]}')
    (tmp_path / "broken.yaml").write_text("excluded_words: [unclosed\n")
    (tmp_path / "scalar.yaml").write_text("just a string\n")
    return tmp_path


class TestLoadExclusionWords:
    def test_bare_list(self, words_dir: Path) -> None:
        assert load_exclusion_words(words_dir / "list.yaml") == {
            "alpha",
            "beta",
            "gamma",
        }

    def test_mapping(self, words_dir: Path) -> None:
        assert load_exclusion_words(words_dir / "mapping.yaml") == {"delta"}

    def test_extension_json(self, words_dir: Path) -> None:
        assert load_exclusion_words(words_dir / "extension.json") == {
            "epsilon",
            "zeta",
        }

    @pytest.mark.parametrize("name", ["broken.yaml", "scalar.yaml", "missing.yaml"])
    def test_unusable_file_degrades_to_empty(
        self, words_dir: Path, name: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.ERROR):
            words = load_exclusion_words(words_dir / name)

        assert words == frozenset()
        assert "Could not load exclusion list" in caplog.text


class TestDefaultWords:
    def test_bundled_list_has_function_words(self) -> None:
        words = load_default_words()

        assert {"the", "and", "of"} <= words
        assert "although" not in words

    def test_bundled_words_are_lower_case(self) -> None:
        assert all(word == word.lower() for word in load_default_words())


class TestExclusionVocabulary:
    def test_membership_is_case_insensitive(self) -> None:
        vocabulary = ExclusionVocabulary.from_words(["The"], ["LaTeX"])

        assert "the" in vocabulary
        assert "THE" in vocabulary
        assert "latex" in vocabulary
        assert "word" not in vocabulary
        assert 3 not in vocabulary

    def test_tiers_are_combined_by_union(self) -> None:
        vocabulary = ExclusionVocabulary.from_words(["a", "b"], ["b", "c"])

        assert vocabulary.words == {"a", "b", "c"}
        assert len(vocabulary) == 3

    def test_empty_by_default(self) -> None:
        assert len(ExclusionVocabulary()) == 0

    def test_with_global_word_returns_new_vocabulary(self) -> None:
        vocabulary = ExclusionVocabulary.from_words(["a"])

        updated = vocabulary.with_global_word("Model")

        assert "model" in updated.global_words
        assert "model" not in vocabulary

    def test_with_project_word(self) -> None:
        updated = ExclusionVocabulary().with_project_word("Dataset")

        assert updated.project_words == {"dataset"}
        assert updated.global_words == frozenset()

    def test_from_settings_includes_defaults(self) -> None:
        settings = ExcludeWordsSettings(global_words=["Model"], project_words=["data"])

        vocabulary = ExclusionVocabulary.from_settings(settings)

        assert "model" in vocabulary.global_words
        assert "the" in vocabulary.global_words
        assert vocabulary.project_words == {"data"}

    def test_from_settings_without_defaults(self) -> None:
        settings = ExcludeWordsSettings(use_defaults=False, project_words=["data"])

        vocabulary = ExclusionVocabulary.from_settings(settings)

        assert vocabulary.words == {"data"}

    def test_is_frozen(self) -> None:
        vocabulary = ExclusionVocabulary()

        with pytest.raises(AttributeError):
            vocabulary.global_words = frozenset({"x"})  # type: ignore
