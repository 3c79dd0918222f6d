"""Metrics facade.

Service code should ONLY call the semantic helpers here so we can change backend freely.

Metrics:
- reports_generated_total{report}   Reports produced, by report kind
- salary_calculations_total         Individual salary decompositions
- report_errors_total{code}         Rejected or failed requests, by error code
- report_generation_seconds{report} Time spent building a report
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

logger = logging.getLogger("metrics")

_REPORTS_GENERATED = Counter("reports_generated_total", "Reports generated", ["report"])
_SALARY_CALCULATIONS = Counter("salary_calculations_total", "Salary decompositions computed")
_REPORT_ERRORS = Counter("report_errors_total", "Requests rejected or failed", ["code"])
_REPORT_LATENCY = Histogram(
    "report_generation_seconds",
    "Time spent generating a report",
    ["report"],
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 5),
)


def report_generated_record(report: str) -> None:
    _REPORTS_GENERATED.labels(report=report).inc()


def salary_calculation_record(count: int = 1) -> None:
    _SALARY_CALCULATIONS.inc(count)


def report_error_record(code: str) -> None:
    _REPORT_ERRORS.labels(code=code).inc()


@contextmanager
def report_timer(report: str) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        _REPORT_LATENCY.labels(report=report).observe(elapsed)
        logger.debug("report=%s generated in %.4fs", report, elapsed)


def render_latest() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
