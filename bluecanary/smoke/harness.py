"""Smoke checks for a canary instance of the prediction service.

The suite issues a fixed sequence of requests and checks the shape and content
of each answer. Single-scenario checks fail fast with :class:`SmokeCheckError`;
the load loop counts failures instead of raising and reports response-time
statistics without asserting on them.
"""

import statistics
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

import httpx

from bluecanary.common.exceptions import SmokeCheckError
from bluecanary.logger import init_logger
from bluecanary.smoke.client import PredictionClient

logger = init_logger(__name__)

POSITIVE_REVIEW = "This movie was fantastic!"
NEGATIVE_REVIEW = "This movie was terrible!"
NEUTRAL_REVIEW = "This movie was okay."

LOAD_REVIEWS: tuple[str, ...] = (
    "This movie was fantastic!",
    "This movie was terrible!",
    "This movie was okay.",
    "I loved the acting and the soundtrack.",
    "The plot was boring and far too long.",
    "An average film with a few good moments.",
    "Absolutely brilliant, I would watch it again.",
    "A complete waste of time.",
    "Not bad, but not great either.",
)

DEFAULT_LOAD_REQUESTS = 100
REQUIRED_KEYS = ("sentiment", "confidence")


@dataclass
class CheckResult:
    name: str
    passed: bool
    message: str = ""


@dataclass
class LoadReport:
    total: int = 0
    passed: int = 0
    failed: int = 0
    response_times: list[float] = field(default_factory=list)
    """Milliseconds per completed request."""

    @property
    def median(self) -> float | None:
        return statistics.median(self.response_times) if self.response_times else None

    @property
    def minimum(self) -> float | None:
        return min(self.response_times) if self.response_times else None

    @property
    def maximum(self) -> float | None:
        return max(self.response_times) if self.response_times else None

    @property
    def mean(self) -> float | None:
        return statistics.fmean(self.response_times) if self.response_times else None

    def summary(self) -> str:
        lines = [f"requests: {self.total}, passed: {self.passed}, failed: {self.failed}"]
        if self.response_times:
            lines.append(
                f"response time ms: median={self.median:.2f} min={self.minimum:.2f} "
                f"max={self.maximum:.2f} mean={self.mean:.2f}"
            )
        return "\n".join(lines)


@dataclass
class SmokeReport:
    checks: list[CheckResult] = field(default_factory=list)
    load: LoadReport | None = None

    @property
    def ok(self) -> bool:
        if not self.checks or not all(check.passed for check in self.checks):
            return False
        return self.load is not None

    def summary(self) -> str:
        lines = [f"[{'PASS' if check.passed else 'FAIL'}] {check.name} {check.message}".rstrip() for check in self.checks]
        if self.load is not None:
            lines.append(self.load.summary())
        return "\n".join(lines)


def _require_keys(payload, keys: Sequence[str] = REQUIRED_KEYS) -> None:
    if not isinstance(payload, dict):
        raise SmokeCheckError(f"expected a JSON object, got {payload!r}")
    missing = [key for key in keys if key not in payload]
    if missing:
        raise SmokeCheckError(f"response {payload} is missing keys {missing}")


class SmokeSuite:
    def __init__(self, client: PredictionClient, clock: Callable[[], float] = time.perf_counter):
        self._client = client
        self._clock = clock

    def check_health(self) -> None:
        response = self._client.health()
        if response.status_code != 200 or response.json() != {"status": "ok"}:
            raise SmokeCheckError(f"unexpected health answer {response.status_code}: {response.text}")

    def _check_label(self, review: str, expected: str) -> None:
        payload = self._client.predict(review)
        _require_keys(payload)
        if payload["sentiment"] != expected:
            raise SmokeCheckError(f"{review!r} classified as {payload['sentiment']!r}, expected {expected!r}")

    def check_positive(self) -> None:
        self._check_label(POSITIVE_REVIEW, "positive")

    def check_negative(self) -> None:
        self._check_label(NEGATIVE_REVIEW, "negative")

    def check_neutral(self) -> None:
        _require_keys(self._client.predict(NEUTRAL_REVIEW))

    def run_load(self, count: int = DEFAULT_LOAD_REQUESTS, reviews: Sequence[str] = LOAD_REVIEWS) -> LoadReport:
        if count <= 0:
            raise ValueError(f"count must be positive, got {count}")
        if not reviews:
            raise ValueError("reviews must not be empty")

        report = LoadReport()
        for i in range(count):
            review = reviews[i % len(reviews)]
            report.total += 1
            start = self._clock()
            try:
                payload = self._client.predict(review)
                report.response_times.append((self._clock() - start) * 1000)
                _require_keys(payload)
            except (httpx.HTTPError, ValueError, SmokeCheckError) as e:
                report.failed += 1
                logger.warning(f"load request {i} failed: {e}")
                continue
            report.passed += 1

        logger.info(report.summary())
        return report

    def checks(self) -> list[tuple[str, Callable[[], None]]]:
        return [
            ("health", self.check_health),
            ("positive", self.check_positive),
            ("negative", self.check_negative),
            ("neutral", self.check_neutral),
        ]

    def run(self, load_requests: int = DEFAULT_LOAD_REQUESTS) -> SmokeReport:
        """Run the checks in order, stopping at the first failure, then the load loop."""
        report = SmokeReport()
        for name, check in self.checks():
            try:
                check()
            except (SmokeCheckError, httpx.HTTPError, ValueError) as e:
                logger.error(f"smoke check {name} failed: {e}")
                report.checks.append(CheckResult(name=name, passed=False, message=str(e)))
                return report
            logger.info(f"smoke check {name} passed")
            report.checks.append(CheckResult(name=name, passed=True))

        report.load = self.run_load(load_requests)
        return report
