"""Benchmark timing: iteration calibration, warmup and measured epochs."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, NamedTuple, Sequence

from gentest.case import Assertion, Case, active_context
from gentest.options import BenchConfig

_MAX_ITERATIONS = 1 << 30


@dataclass
class BenchResult:
    """Per-call timings of a benchmark, in nanoseconds."""

    epochs: int = 0
    iters_per_epoch: int = 0
    best_ns: float = 0.0
    median_ns: float = 0.0
    mean_ns: float = 0.0


class EpochResult(NamedTuple):
    """Outcome of one timed epoch."""

    elapsed_s: float
    iterations_done: int
    assertion_failed: bool


def median(values: Sequence[float]) -> float:
    """The median of ``values``; 0.0 when there are none."""
    ordered = sorted(values)
    n = len(ordered)
    if n == 0:
        return 0.0
    if n % 2:
        return ordered[n // 2]
    return 0.5 * (ordered[n // 2 - 1] + ordered[n // 2])


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def run_epoch(case: Case, ctx: Any, iterations: int) -> EpochResult:
    """Call the case ``iterations`` times inside a test context and time it.

    An Assertion stops the epoch early; any other exception is ignored.
    """
    done = 0
    failed = False
    with active_context(case.name):
        start = time.perf_counter()
        for i in range(iterations):
            try:
                case.fn(ctx)
            except Assertion:
                failed = True
                break
            except Exception:
                pass
            done = i + 1
        elapsed = time.perf_counter() - start
    return EpochResult(elapsed, done, failed)


def run_bench(case: Case, ctx: Any, config: BenchConfig) -> BenchResult:
    """Calibrate iterations per epoch, warm up, then measure epochs."""
    iters = 1
    while run_epoch(case, ctx, iters).elapsed_s < config.min_epoch_time_s:
        iters *= 2
        if iters > _MAX_ITERATIONS:
            break
    for _ in range(config.warmup_epochs):
        run_epoch(case, ctx, iters)
    per_call_ns = []
    start_all = time.perf_counter()
    for _ in range(config.measure_epochs):
        epoch = run_epoch(case, ctx, iters)
        per_call_ns.append(epoch.elapsed_s * 1e9 / (epoch.iterations_done or 1))
        if time.perf_counter() - start_all > config.max_total_time_s:
            break
    if not per_call_ns:
        return BenchResult()
    return BenchResult(
        epochs=len(per_call_ns),
        iters_per_epoch=iters,
        best_ns=min(per_call_ns),
        median_ns=median(per_call_ns),
        mean_ns=_mean(per_call_ns),
    )