"""
Claim performance suite.

Times the hot paths of the claim algebra over generated samples:

    claim.check positive number   — Claim.check, passing branch
    claim.check negative branch   — Claim.check, failing branch
    claim.and (positive & even)   — ClaimAnd.check
    claim.or (number | string)    — ClaimOr.check
    claim.on (object.value)       — ClaimOn.check over partly invalid records

Each case runs one untimed warmup round, then ``rounds`` timed rounds.
Timings are wall-clock seconds per round from time.perf_counter.
"""

from __future__ import annotations

import math
import os
import time
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from ..claim import Claim


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

DEFAULT_SAMPLE_SIZE = 5_000
DEFAULT_ROUNDS = 20

SAMPLES_ENV_VAR = "HOWARD_BENCH_SAMPLES"
ROUNDS_ENV_VAR = "HOWARD_BENCH_ROUNDS"


class BenchmarkError(Exception):
    """Raised when a benchmark case observes a wrong claim result."""
    pass


def _setting(explicit: Optional[int], env_var: str, default: int) -> int:
    """Explicit value, then environment, then default. Must be >= 1."""
    if explicit is not None:
        value = explicit
    else:
        value = int(os.getenv(env_var, str(default)))

    if value < 1:
        raise ValueError(f"{env_var.lower()} must be >= 1, got {value}")
    return value


# =============================================================================
# SAMPLE CLAIMS
# =============================================================================

def _is_positive_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


def _is_even_number(value: Any) -> bool:
    # integral floats count, as with Number.isInteger
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value % 2 == 0
    return isinstance(value, int) and value % 2 == 0


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_plain_object(value: Any) -> bool:
    return isinstance(value, Mapping)


IS_POSITIVE_NUMBER = Claim(_is_positive_number)
IS_EVEN_NUMBER = Claim(_is_even_number)
IS_STRING = Claim(_is_string)
IS_PLAIN_OBJECT = Claim(_is_plain_object)

EVEN_POSITIVE_NUMBER = IS_POSITIVE_NUMBER.and_(IS_EVEN_NUMBER)
POSITIVE_OR_STRING = IS_POSITIVE_NUMBER.or_(IS_STRING)
OBJECT_WITH_VALUE = IS_PLAIN_OBJECT.on("value", EVEN_POSITIVE_NUMBER)


# =============================================================================
# SAMPLE DATA
# =============================================================================

@dataclass
class Samples:
    """Generated inputs shared by all benchmark cases."""
    numbers: list[int]
    mixed: list[Any]
    records: list[dict]
    invalid_records: list[dict]


def build_samples(size: int) -> Samples:
    """
    Build deterministic samples of the given size.

    ``mixed`` alternates ints and their string form. ``invalid_records``
    nulls every 4th value and negates every 5th.
    """
    numbers = list(range(1, size + 1))
    mixed = [value if index % 2 == 0 else str(value) for index, value in enumerate(numbers)]

    records = [
        {
            "value": value,
            "nested": {"even": value % 2 == 0, "label": f"value-{value}"},
            "tags": ["primary"] if index % 3 == 0 else ["secondary"],
        }
        for index, value in enumerate(numbers)
    ]

    invalid_records = []
    for index, record in enumerate(records):
        if index % 4 == 0:
            invalid_records.append({**record, "value": None})
        elif index % 5 == 0:
            invalid_records.append({**record, "value": -record["value"]})
        else:
            invalid_records.append(dict(record))

    return Samples(
        numbers=numbers,
        mixed=mixed,
        records=records,
        invalid_records=invalid_records,
    )


# =============================================================================
# BENCHMARK CASES
# =============================================================================

def _check_positive(samples: Samples) -> None:
    for value in samples.numbers:
        if not IS_POSITIVE_NUMBER.check(value):
            raise BenchmarkError(f"Expected {value!r} to be positive")


def _check_negative_branch(samples: Samples) -> None:
    for value in samples.mixed:
        if isinstance(value, str) and IS_POSITIVE_NUMBER.check(value):
            raise BenchmarkError(f"Expected string {value!r} to fail positive number claim")


def _check_and(samples: Samples) -> None:
    for value in samples.numbers:
        EVEN_POSITIVE_NUMBER.check(value)


def _check_or(samples: Samples) -> None:
    for value in samples.mixed:
        POSITIVE_OR_STRING.check(value)


def _check_on(samples: Samples) -> None:
    for record in samples.invalid_records:
        OBJECT_WITH_VALUE.check(record)


BENCHMARK_CASES: list[tuple[str, Callable[[Samples], None]]] = [
    ("claim.check positive number", _check_positive),
    ("claim.check negative branch", _check_negative_branch),
    ("claim.and (positive & even)", _check_and),
    ("claim.or (number | string)", _check_or),
    ("claim.on (object.value)", _check_on),
]


# =============================================================================
# RESULTS
# =============================================================================

@dataclass
class BenchmarkResult:
    """Timing summary for one case. All times are seconds per round."""
    name: str
    rounds: int
    samples: int
    mean: float
    min: float
    max: float

    @property
    def ops_per_sec(self) -> float:
        """Claim checks per second, from the mean round time."""
        if self.mean <= 0:
            return float("inf")
        return self.samples / self.mean

    def to_dict(self) -> dict:
        data = asdict(self)
        data["ops_per_sec"] = self.ops_per_sec
        return data


def run_case(
    name: str,
    case: Callable[[Samples], None],
    samples: Samples,
    rounds: int,
) -> BenchmarkResult:
    """Run one warmup round, then time ``rounds`` rounds of ``case``."""
    case(samples)

    timings = []
    for _ in range(rounds):
        start = time.perf_counter()
        case(samples)
        timings.append(time.perf_counter() - start)

    return BenchmarkResult(
        name=name,
        rounds=rounds,
        samples=len(samples.numbers),
        mean=sum(timings) / len(timings),
        min=min(timings),
        max=max(timings),
    )


def run_benchmarks(
    sample_size: Optional[int] = None,
    rounds: Optional[int] = None,
) -> list[BenchmarkResult]:
    """
    Run every benchmark case.

    ``sample_size`` and ``rounds`` fall back to HOWARD_BENCH_SAMPLES and
    HOWARD_BENCH_ROUNDS, then to the module defaults.

    Raises:
        ValueError: If a setting is not a positive integer
        BenchmarkError: If a claim returns an unexpected result
    """
    size = _setting(sample_size, SAMPLES_ENV_VAR, DEFAULT_SAMPLE_SIZE)
    round_count = _setting(rounds, ROUNDS_ENV_VAR, DEFAULT_ROUNDS)

    samples = build_samples(size)
    return [
        run_case(name, case, samples, round_count)
        for name, case in BENCHMARK_CASES
    ]
