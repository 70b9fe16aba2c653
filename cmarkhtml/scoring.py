"""Scores that tell linear growth of parse time from super-linear growth."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import combinations

ACCEPTANCE_STDDEV = 300.0
"""Slope standard deviation above which growth counts as non-linear."""

ACCEPTANCE_CORRELATION = 0.995
"""Pearson correlation below which growth counts as non-linear."""

Sample = tuple[float, float]


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _mean(values: Sequence[float]) -> float:
    return _divide(math.fsum(values), len(values))


def slope_stddev(time_samples: Sequence[Sample]) -> tuple[float, bool]:
    """Standard deviation of the slopes between every pair of samples.

    The samples are ``(length, time)`` points. Points on a straight line give
    equal slopes and a deviation of zero. Returns the deviation and whether it
    exceeds :data:`ACCEPTANCE_STDDEV`.
    """
    slopes = [
        _divide(y2 - y1, x2 - x1)
        for (x1, y1), (x2, y2) in combinations(time_samples, 2)
    ]
    mean = _mean(slopes)
    variance = _mean([(slope - mean) ** 2 for slope in slopes])
    stddev = math.sqrt(variance) if not math.isnan(variance) else math.nan
    return stddev, stddev > ACCEPTANCE_STDDEV


def pearson_correlation(time_samples: Sequence[Sample]) -> tuple[float, bool]:
    """Pearson correlation between sample lengths and times.

    Returns the coefficient and whether it falls below
    :data:`ACCEPTANCE_CORRELATION`.
    """
    xs = [x for x, _ in time_samples]
    ys = [y for _, y in time_samples]
    mean_x = _mean(xs)
    mean_y = _mean(ys)
    covariance = math.fsum((x - mean_x) * (y - mean_y) for x, y in zip(xs, ys))
    spread_x = math.fsum((x - mean_x) ** 2 for x in xs)
    spread_y = math.fsum((y - mean_y) ** 2 for y in ys)
    corr = _divide(covariance, math.sqrt(spread_x * spread_y))
    return corr, corr < ACCEPTANCE_CORRELATION