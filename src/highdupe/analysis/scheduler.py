# src/highdupe/analysis/scheduler.py

from __future__ import annotations

import asyncio
import contextlib
import logging

from highdupe.config import HighDupeConfig
from highdupe.observability import names
from highdupe.observability.base import MetricsHook, NoOpMetricsHook

from .analyzer import AnalysisPass, IncrementalAnalyzer
from .document import TextDocument

logger = logging.getLogger(__name__)


class CheckScheduler:
    """
    Periodic checking on the running event loop.

    This is a thin driver around IncrementalAnalyzer:
    - one task per document identity
    - a tick is skipped while a pass for the same document is running
    - trigger() runs a pass immediately, outside the timer
    """

    def __init__(
        self,
        analyzer: IncrementalAnalyzer,
        *,
        interval_ms: int = 3000,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be > 0")
        self.analyzer = analyzer
        self.interval_ms = interval_ms
        self.metrics_hook = metrics_hook
        self._tasks: dict[str, asyncio.Task[None]] = {}
        self._documents: dict[str, TextDocument] = {}

    @classmethod
    def from_config(
        cls,
        analyzer: IncrementalAnalyzer,
        config: HighDupeConfig,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> CheckScheduler:
        return cls(
            analyzer, interval_ms=config.check_interval_ms, metrics_hook=metrics_hook
        )

    async def start(self, document: TextDocument) -> None:
        """Run a pass now, then one every ``interval_ms`` until stopped."""
        await self.stop(document.identity)
        self._documents[document.identity] = document
        self._tasks[document.identity] = asyncio.create_task(self._run(document))
        logger.info(
            "Started checking %s every %dms", document.identity, self.interval_ms
        )

    async def stop(self, identity: str) -> None:
        self._documents.pop(identity, None)
        task = self._tasks.pop(identity, None)
        if task is None:
            return

        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Stopped checking %s", identity)

    async def stop_all(self) -> None:
        for identity in list(self._tasks):
            await self.stop(identity)

    async def configure(self, config: HighDupeConfig) -> None:
        """Apply new settings; running checks restart on the new interval."""
        self.analyzer.configure(config)
        self.interval_ms = config.check_interval_ms
        for document in list(self._documents.values()):
            await self.start(document)

    def is_scheduled(self, identity: str) -> bool:
        return identity in self._tasks

    def trigger(self, document: TextDocument) -> AnalysisPass | None:
        """One-shot pass; None if a pass for the document is already running."""
        if self.analyzer.is_running(document.identity):
            logger.debug("Skipping check of %s, pass in flight", document.identity)
            self.metrics_hook.increment(names.SCHEDULER_TICKS_SKIPPED)
            return None
        return self.analyzer.analyze_pass(document)

    async def _run(self, document: TextDocument) -> None:
        while True:
            try:
                self.trigger(document)
            except Exception:
                logger.exception("Check of %s failed", document.identity)
            await asyncio.sleep(self.interval_ms / 1000)
