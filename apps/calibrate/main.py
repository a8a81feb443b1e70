"""calibration entrypoint: print hashing time for candidate cost parameters."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from passguard.application.services.calibration_service import (
    CalibrationSample,
    CalibrationService,
)
from passguard.config.settings import Settings, load_settings
from passguard.infrastructure.logging import configure_logging
from passguard.infrastructure.security.backend_factory import build_hash_backend

logger = logging.getLogger(__name__)

_COST_LABELS = {
    "bcrypt": "Log rounds",
    "pbkdf2_sha512": "Rounds",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passguard-calibrate",
        description="Measure how long one password hash takes at each cost parameter.",
    )
    parser.add_argument(
        "--cost",
        dest="costs",
        type=int,
        action="append",
        help="cost parameter to measure (repeatable); defaults to the configured cost",
    )
    return parser


def format_sample(*, settings: Settings, sample: CalibrationSample) -> str:
    """Render one measurement as `<label>: <cost>, Time: <ms> ms`."""

    label = _COST_LABELS[settings.password_hash_backend]
    return f"{label}: {sample.cost}, Time: {sample.elapsed_ms} ms"


def run_calibration(*, settings: Settings, costs: Sequence[int] | None) -> list[str]:
    backend = build_hash_backend(settings=settings)
    service = CalibrationService(backend=backend)
    resolved_costs = list(costs) if costs else [backend.default_cost()]
    logger.info(
        "calibration_starting backend=%s costs=%s",
        settings.password_hash_backend,
        resolved_costs,
    )
    samples = service.measure_many(costs=resolved_costs)
    return [format_sample(settings=settings, sample=sample) for sample in samples]


def main(argv: Sequence[str] | None = None) -> None:
    """Measure and print hashing cost for the configured backend."""

    args = build_parser().parse_args(argv)
    settings = load_settings()
    configure_logging(level=settings.log_level)
    for line in run_calibration(settings=settings, costs=args.costs):
        print(line)


if __name__ == "__main__":
    main()
