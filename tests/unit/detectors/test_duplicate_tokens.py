import pytest

from highdupe.config import HighDupeConfig
from highdupe.detectors import (
    AnalysisResult,
    Category,
    DetectionContext,
    DuplicateTokenDetector,
    Occurrence,
    find_candidates,
    find_duplicate_tokens,
    locate_token,
)
from highdupe.segmentation import LatexSegmenter, Paragraph, PlainTextSegmenter
from highdupe.vocabulary import ExclusionVocabulary

EMPTY = ExclusionVocabulary()


def check_latex(
    lines: list[str], vocabulary: ExclusionVocabulary = EMPTY, scope: str = "paragraph"
) -> list[AnalysisResult]:
    paragraphs = LatexSegmenter().segment(lines)
    return find_duplicate_tokens(paragraphs, vocabulary, lines, scope=scope)  # type: ignore[arg-type]


def positions(results: list[AnalysisResult]) -> list[tuple[int, int, int]]:
    return [
        (r.occurrence.line, r.occurrence.start_col, r.occurrence.end_col)
        for r in results
    ]


class TestFindCandidates:
    def test_counts_case_insensitively(self) -> None:
        assert find_candidates("The cat. the dog", EMPTY) == ["the"]

    def test_excluded_words_are_never_candidates(self) -> None:
        vocabulary = ExclusionVocabulary.from_words(["the"])

        assert find_candidates("the the the", vocabulary) == []

    def test_first_seen_order(self) -> None:
        assert find_candidates("beta alpha beta alpha gamma", EMPTY) == [
            "beta",
            "alpha",
        ]

    def test_word_runs_include_digits_and_underscores(self) -> None:
        assert find_candidates("x_1 and x_1, 42 or 42", EMPTY) == ["x_1", "42"]


class TestLatexInputs:
    def test_repeated_word_at_line_start(self) -> None:
        """Both occurrences of 'although' are reported."""
        vocabulary = ExclusionVocabulary.from_words(["the"])

        results = check_latex(["Although Although the results"], vocabulary)

        assert positions(results) == [(0, 0, 8), (0, 9, 17)]
        assert {r.occurrence.token for r in results} == {"although"}
        assert results[0].message == 'Duplicate word: "Although"'
        assert results[0].category is Category.DUPLICATE_TOKEN
        assert results[0].suggestion == (
            "Consider using a synonym or rephrasing to avoid repetition."
        )

    def test_formatting_argument_is_prose(self) -> None:
        """Occurrences inside \\textbf{...} are located."""
        results = check_latex(["\\textbf{bold bold text}"])

        assert positions(results) == [(0, 8, 12), (0, 13, 17)]
        assert [r.text for r in results] == ["bold", "bold"]

    def test_single_prose_use_of_cited_key(self) -> None:
        """The key inside \\cite is stripped before counting."""
        assert check_latex(["\\cite{smith2020} smith2020 appears again"]) == []

    def test_repeated_prose_use_of_cited_key(self) -> None:
        results = check_latex(["\\cite{smith2020} smith2020 appears and smith2020 again"])

        assert positions(results) == [(0, 17, 26), (0, 39, 48)]

    def test_math_environment_yields_nothing(self) -> None:
        lines = ["\\begin{equation}", "x x x y y", "\\end{equation}"]

        assert check_latex(lines) == []


class TestRelocationFilters:
    def test_command_and_environment_names_are_not_highlighted(self) -> None:
        lines = [
            "\\begin{itemize}",
            "\\item one thing",
            "\\item other thing",
            "\\end{itemize}",
        ]

        results = check_latex(lines)

        assert [r.occurrence.token for r in results] == ["thing", "thing"]
        assert [r.occurrence.line for r in results] == [1, 2]

    def test_match_after_inline_comment_is_rejected(self) -> None:
        results = check_latex(["word one", "word two % word three"])

        assert positions(results) == [(0, 0, 4), (1, 0, 4)]

    def test_match_in_inline_math_is_rejected(self) -> None:
        results = check_latex(["x marks x spot $x$"])

        assert positions(results) == [(0, 0, 1), (0, 8, 9)]

    def test_comment_only_line_inside_paragraph_is_skipped(self) -> None:
        results = check_latex(["word one", "% word", "word two"])

        assert [r.occurrence.line for r in results] == [0, 2]

    def test_region_delimiter_line_is_skipped(self) -> None:
        paragraph = Paragraph(text="word word", start_line=0, end_line=1)
        lines = ["word", "\\begin{equation} word"]

        results = find_duplicate_tokens([paragraph], EMPTY, lines)

        assert positions(results) == [(0, 0, 4)]

    def test_partial_words_do_not_match(self) -> None:
        results = check_latex(["cat cat catalog concatenate"])

        assert positions(results) == [(0, 0, 3), (0, 4, 7)]


class TestDeterminismAndScope:
    def test_order_is_paragraph_then_candidate_then_position(self) -> None:
        lines = ["beta alpha", "beta alpha", "", "gamma gamma"]

        results = check_latex(lines)

        assert [(r.occurrence.token, r.occurrence.line) for r in results] == [
            ("beta", 0),
            ("beta", 1),
            ("alpha", 0),
            ("alpha", 1),
            ("gamma", 3),
            ("gamma", 3),
        ]

    def test_same_input_same_output(self) -> None:
        lines = ["One two one two", "", "three three"]

        assert check_latex(lines) == check_latex(lines)

    def test_duplicates_in_separate_paragraphs_are_independent(self) -> None:
        lines = ["echo echo", "", "echo once"]

        results = check_latex(lines)

        assert [r.occurrence.line for r in results] == [0, 0]

    def test_line_scope_counts_per_line(self) -> None:
        lines = ["apple pie", "apple tart", "pear pear"]

        assert len(check_latex(lines, scope="paragraph")) == 4
        assert positions(check_latex(lines, scope="line")) == [(2, 0, 4), (2, 5, 9)]

    def test_unknown_scope_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown scope"):
            find_duplicate_tokens([], EMPTY, [], scope="sentence")  # type: ignore[arg-type]


class TestRobustness:
    def test_paragraph_past_end_of_document(self) -> None:
        """The document shrank after segmentation."""
        paragraph = Paragraph(text="alpha alpha", start_line=0, end_line=5)

        results = find_duplicate_tokens([paragraph], EMPTY, ["alpha alpha"])

        assert positions(results) == [(0, 0, 5), (0, 6, 11)]

    def test_paragraph_entirely_past_end(self) -> None:
        paragraph = Paragraph(text="alpha alpha", start_line=3, end_line=4)

        assert find_duplicate_tokens([paragraph], EMPTY, ["alpha"]) == []

    def test_plain_text_has_no_markup_filters(self) -> None:
        lines = ["% word word", "\\word"]
        paragraphs = PlainTextSegmenter().segment(lines)

        results = find_duplicate_tokens(paragraphs, EMPTY, lines, file_type="markdown")

        assert positions(results) == [(0, 2, 6), (0, 7, 11), (1, 1, 5)]

    def test_locate_token_returns_occurrences(self) -> None:
        occurrences = locate_token("word", range(0, 2), ["a word", "\\word word"])

        assert occurrences == [
            Occurrence(line=0, start_col=2, end_col=6, token="word"),
            Occurrence(line=1, start_col=6, end_col=10, token="word"),
        ]


class TestDuplicateTokenDetector:
    def test_check_uses_context(self) -> None:
        detector = DuplicateTokenDetector(ExclusionVocabulary.from_words(["the"]))
        lines = ["Although Although the results"]
        context = DetectionContext(
            paragraphs=[Paragraph("Although Although the results", 0, 0)],
            lines=lines,
        )

        results = detector.check(context)

        assert [r.occurrence.start_col for r in results] == [0, 9]

    def test_excluded_word_never_reported(self) -> None:
        detector = DuplicateTokenDetector(ExclusionVocabulary.from_words(["Echo"]))
        lines = ["echo Echo ECHO echo"]
        context = DetectionContext(LatexSegmenter().segment(lines), lines)

        assert detector.check(context) == []

    def test_configure_applies_settings(self) -> None:
        detector = DuplicateTokenDetector()
        config = HighDupeConfig.model_validate(
            {
                "duplicate_word": {
                    "enabled": False,
                    "scope": "line",
                    "exclude_words": {
                        "use_defaults": False,
                        "global_words": ["Alpha"],
                        "project_words": ["beta"],
                    },
                }
            }
        )

        detector.configure(config)

        assert detector.enabled is False
        assert detector.scope == "line"
        assert "alpha" in detector.vocabulary
        assert "beta" in detector.vocabulary
        assert "the" not in detector.vocabulary

    def test_rejects_unknown_scope(self) -> None:
        with pytest.raises(ValueError, match="Unknown scope"):
            DuplicateTokenDetector(scope="page")  # type: ignore[arg-type]

    def test_results_are_value_objects(self) -> None:
        lines = ["ring ring"]
        first = check_latex(lines)
        second = check_latex(lines)

        assert first[0] == second[0]
        assert first[0] is not second[0]
        with pytest.raises(AttributeError):
            first[0].message = "changed"  # type: ignore

    def test_shifted_moves_line(self) -> None:
        result = check_latex(["ring ring"])[0]

        assert result.shifted(3).occurrence.line == 3
        assert result.shifted(0) is result
