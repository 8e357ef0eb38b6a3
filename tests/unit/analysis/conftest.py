import pytest

from highdupe.analysis import IncrementalAnalyzer
from highdupe.detectors import AnalysisResult, DetectorRegistry, DuplicateTokenDetector
from highdupe.observability import InMemoryMetricsHook
from highdupe.vocabulary import ExclusionVocabulary


class EditableDocument:
    """A document whose content can change between passes, like an open editor."""

    def __init__(
        self,
        text: str,
        identity: str = "paper.tex",
        language_id: str | None = "latex",
        file_name: str | None = None,
    ) -> None:
        self.identity = identity
        self.language_id = language_id
        self.file_name = file_name
        self.lines = text.split("\n")

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_at(self, index: int) -> str:
        return self.lines[index]

    def set_text(self, text: str) -> None:
        self.lines = text.split("\n")


class RecordingRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple[str, list[AnalysisResult]]] = []

    def render(self, cache_key: str, results: list[AnalysisResult]) -> None:
        self.calls.append((cache_key, results))


BASE_TEXT = "\n".join(
    [
        "Although Although the results",
        "",
        "The model model works.",
        "",
        "Data data everywhere.",
    ]
)


@pytest.fixture
def registry() -> DetectorRegistry:
    registry = DetectorRegistry()
    registry.register(
        DuplicateTokenDetector(ExclusionVocabulary.from_words(["the", "a"]))
    )
    return registry


@pytest.fixture
def metrics() -> InMemoryMetricsHook:
    return InMemoryMetricsHook()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def analyzer(
    registry: DetectorRegistry,
    renderer: RecordingRenderer,
    metrics: InMemoryMetricsHook,
) -> IncrementalAnalyzer:
    return IncrementalAnalyzer(registry, renderer=renderer, metrics_hook=metrics)


@pytest.fixture
def base_text() -> str:
    return BASE_TEXT


@pytest.fixture
def make_document() -> type[EditableDocument]:
    return EditableDocument


@pytest.fixture
def document() -> EditableDocument:
    return EditableDocument(BASE_TEXT)
