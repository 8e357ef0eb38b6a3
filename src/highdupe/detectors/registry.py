import logging

from highdupe.config import HighDupeConfig

from .base import Detector

logger = logging.getLogger(__name__)


class DetectorRegistry:
    """Detectors in registration order, which is also the order they run in."""

    def __init__(self) -> None:
        self._detectors: dict[str, Detector] = {}

    def register(self, detector: Detector) -> None:
        if detector.name in self._detectors:
            raise ValueError(f"Detector '{detector.name}' already registered")

        self._detectors[detector.name] = detector
        logger.debug("Registered detector: %s", detector.name)

    def get(self, name: str) -> Detector:
        try:
            return self._detectors[name]
        except KeyError:
            logger.error("Detector not found: %s", name)
            raise KeyError(f"Detector '{name}' not found")

    def remove(self, name: str) -> None:
        try:
            del self._detectors[name]
            logger.debug("Removed detector: %s", name)
        except KeyError:
            logger.error("Cannot remove detector, not found: %s", name)
            raise KeyError(f"Detector '{name}' not found")

    def enabled(self) -> list[Detector]:
        return [detector for detector in self._detectors.values() if detector.enabled]

    def configure(self, config: HighDupeConfig) -> None:
        for detector in self._detectors.values():
            detector.configure(config)

    def list(self) -> dict[str, Detector]:
        return dict(self._detectors)


def create_default_registry(config: HighDupeConfig | None = None) -> DetectorRegistry:
    """Registry holding every built-in detector, configured from ``config``.

    Without a config the detectors use the default settings, including the
    bundled exclusion list.
    """
    from .duplicate_tokens import DuplicateTokenDetector

    registry = DetectorRegistry()
    registry.register(DuplicateTokenDetector())
    registry.configure(config or HighDupeConfig())
    return registry
