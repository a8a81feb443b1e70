"""Offline measurement of backend hashing cost for operator tuning."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from passguard.application.ports.hash_backend_port import HashBackendPort

logger = logging.getLogger(__name__)

CALIBRATION_PASSWORD = "password"


@dataclass(frozen=True)
class CalibrationSample:
    """Wall-clock duration of one hash at one cost parameter."""

    cost: int
    elapsed_seconds: float

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed_seconds * 1000)


class CalibrationService:
    """Time single backend hash calls; results are advisory only."""

    def __init__(
        self,
        *,
        backend: HashBackendPort,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._backend = backend
        self._clock = clock

    def measure(self, *, cost: int) -> CalibrationSample:
        """Hash a representative password once at `cost` and return elapsed time."""

        started = self._clock()
        self._backend.hash_password(CALIBRATION_PASSWORD, cost=cost)
        sample = CalibrationSample(cost=cost, elapsed_seconds=self._clock() - started)
        logger.info("calibration_measured cost=%s elapsed_ms=%s", cost, sample.elapsed_ms)
        return sample

    def measure_many(self, *, costs: Iterable[int]) -> list[CalibrationSample]:
        return [self.measure(cost=cost) for cost in costs]
