"""
Latency tracing

``[TIMING]`` console lines around the validation stages and the outbound
research call.
"""

import time
from contextlib import asynccontextmanager, contextmanager
from typing import Dict, Optional


def log_timing(stage: str, action: str, duration_ms: Optional[float] = None):
    suffix = f" duration={duration_ms:.0f}ms" if duration_ms is not None else ""
    print(f"[TIMING] {stage}: {action}{suffix}")


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@asynccontextmanager
async def async_timer(stage: str, action: str = "OPERATION"):
    """Log START/END around an awaited block."""
    log_timing(stage, f"{action} START")
    start = time.perf_counter()
    try:
        yield
    finally:
        log_timing(stage, f"{action} END", _elapsed_ms(start))


class StepTimer:
    """Per-step durations for one pipeline run, plus a TOTAL line."""

    def __init__(self, stage: str):
        self.stage = stage
        self.steps: Dict[str, float] = {}
        self._started = time.perf_counter()

    def _record(self, name: str, start: float) -> None:
        self.steps[name] = _elapsed_ms(start)
        log_timing(self.stage, name, self.steps[name])

    @contextmanager
    def step(self, name: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            self._record(name, start)

    @asynccontextmanager
    async def async_step(self, name: str):
        start = time.perf_counter()
        try:
            yield
        finally:
            self._record(name, start)

    def summary(self) -> float:
        total_ms = _elapsed_ms(self._started)
        log_timing(self.stage, "TOTAL", total_ms)
        return total_ms
