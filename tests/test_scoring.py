import math

import pytest

from cmarkhtml.scoring import pearson_correlation, slope_stddev

LINEAR = list(zip([10.0, 20.0, 30.0, 40.0, 50.0], [100.0, 201.0, 299.5, 385.0, 510.0]))
NOISY_LINEAR = list(zip([0.1, 0.2, 0.3, 0.4, 0.5], [85.0, 222.0, 270.5, 385.0, 520.0]))
QUADRATIC = list(zip([0.1, 0.2, 0.3, 0.4, 0.5], [100.0, 400.0, 880.0, 1630.0, 2440.0]))
SEMIQUADRATIC = list(zip([0.1, 0.2, 0.3, 0.4, 0.5], [105.0, 260.0, 505.0, 775.0, 1118.0]))


def test_linear_samples_are_accepted():
    score, non_linear = slope_stddev(LINEAR)
    assert non_linear is False
    assert score >= 0


def test_noisy_linear_samples_are_accepted():
    _, non_linear = slope_stddev(NOISY_LINEAR)
    assert non_linear is False


def test_quadratic_samples_are_flagged():
    _, non_linear = slope_stddev(QUADRATIC)
    assert non_linear is True


def test_power_one_and_a_half_samples_are_flagged():
    _, non_linear = slope_stddev(SEMIQUADRATIC)
    assert non_linear is True


def test_stddev_zero_on_perfect_line():
    samples = [(float(x), 3.0 * x + 7.0) for x in range(1, 6)]
    score, non_linear = slope_stddev(samples)
    assert score == pytest.approx(0.0, abs=1e-9)
    assert non_linear is False


def test_stddev_independent_of_sample_order():
    forward, _ = slope_stddev(QUADRATIC)
    backward, _ = slope_stddev(list(reversed(QUADRATIC)))
    assert forward == pytest.approx(backward)


def test_stddev_quadratic_scores_higher_than_linear():
    assert slope_stddev(QUADRATIC)[0] > slope_stddev(NOISY_LINEAR)[0]


def test_pearson_perfect_line():
    samples = [(float(x), 2.0 * x + 3.0) for x in range(1, 6)]
    corr, non_linear = pearson_correlation(samples)
    assert corr == pytest.approx(1.0)
    assert non_linear is False


def test_pearson_quadratic_flagged():
    corr, non_linear = pearson_correlation(QUADRATIC)
    assert non_linear is True
    assert -1.0 <= corr < 1.0


def test_pearson_symmetric_in_axes():
    swapped = [(y, x) for x, y in SEMIQUADRATIC]
    assert pearson_correlation(SEMIQUADRATIC)[0] == pytest.approx(
        pearson_correlation(swapped)[0]
    )


def test_pearson_constant_times_is_nan():
    corr, non_linear = pearson_correlation([(1.0, 5.0), (2.0, 5.0), (3.0, 5.0)])
    assert math.isnan(corr)
    assert non_linear is False