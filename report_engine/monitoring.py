"""
Phase timing for report generation.

A PhaseTimer lives for one generation call. It times named phases and
forwards each duration to an optional hook, so callers can plug in their
own metrics without the engine keeping any global state.
"""

import time
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Iterator, List, Optional

logger = logging.getLogger("ReportEngine.Monitoring")

# Phase names reported to hooks
PHASE_IMAGE_LAYOUT = "image-layout"
PHASE_HEADER_LAYOUT = "header-layout"
PHASE_COLUMN_SIZING = "column-sizing"
PHASE_CELL_WRAPPING = "cell-wrapping"
PHASE_RENDER = "render"
PHASE_SERIALIZE = "serialize"

PhaseHook = Callable[[str, float], None]


@dataclass
class TimingRecord:
    """Record of a timed phase."""

    phase: str
    duration_ms: float
    timestamp: datetime = field(default_factory=datetime.now)


class PhaseTimer:
    """
    Per-call phase timer.

    Usage:
        timer = PhaseTimer(hook=lambda phase, ms: metrics.observe(phase, ms))
        with timer.phase("render"):
            render()
    """

    def __init__(self, hook: Optional[PhaseHook] = None):
        self._hook = hook
        self._records: List[TimingRecord] = []

    @contextmanager
    def phase(self, name: str) -> Iterator[None]:
        """Time a block. The record is kept even if the block raises."""
        start = time.perf_counter()
        try:
            yield
        finally:
            duration = (time.perf_counter() - start) * 1000  # ms
            self._records.append(TimingRecord(phase=name, duration_ms=duration))
            logger.debug("Phase %s took %.1f ms", name, duration)
            if self._hook is not None:
                self._hook(name, duration)

    @property
    def records(self) -> List[TimingRecord]:
        return list(self._records)

    def totals(self) -> Dict[str, float]:
        """Total milliseconds per phase (a phase may run more than once)."""
        totals: Dict[str, float] = {}
        for record in self._records:
            totals[record.phase] = totals.get(record.phase, 0.0) + record.duration_ms
        return totals

    @property
    def total_ms(self) -> float:
        return sum(r.duration_ms for r in self._records)
