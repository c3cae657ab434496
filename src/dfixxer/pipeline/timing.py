# topmark:header:start
#
#   project      : dfixxer
#   file         : timing.py
#   file_relpath : src/dfixxer/pipeline/timing.py
#   license      : MIT
#   copyright    : (c) 2025 dfixxer contributors
#
# topmark:header:end

"""Per-phase timing for one pipeline run."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeVar

from dfixxer.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from dfixxer.config.logging import DfixxerLogger

logger: DfixxerLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class TimingCollector:
    """Records how long each named operation took, in insertion order."""

    timings: dict[str, float] = field(default_factory=lambda: {})

    def time_operation(self, name: str, operation: Callable[[], T]) -> T:
        """Run ``operation``, record its duration under ``name`` and return its result.

        The duration is recorded even when ``operation`` raises.
        """
        started: float = time.perf_counter()
        try:
            return operation()
        finally:
            elapsed: float = time.perf_counter() - started
            self.timings[name] = elapsed
            logger.debug("%s took %.3f ms", name, elapsed * 1000)

    @property
    def total(self) -> float:
        return sum(self.timings.values())

    def log_summary(self) -> None:
        logger.info("Performance summary:")
        for name, elapsed in self.timings.items():
            logger.info("  %s: %.3f ms", name, elapsed * 1000)
        logger.info("  Total processing: %.3f ms", self.total * 1000)
