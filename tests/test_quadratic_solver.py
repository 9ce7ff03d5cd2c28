from __future__ import annotations

import math

import numpy as np
import pytest

from solvesquare.models import InfiniteRoots, NoRoots, OneRoot, TwoRoots
from solvesquare.solvers.quadratic import EPSILON, discriminant, is_approx_zero, solve, solve_linear


@pytest.mark.parametrize(
    "a, b, c, expected",
    [
        (1, 0, -1, TwoRoots(-1.0, 1.0)),
        (1, -2, 1, OneRoot(1.0)),
        (1, 0, 1, NoRoots()),
        (0, 2, -4, OneRoot(2.0)),
        (0, 0, 5, NoRoots()),
        (0, 0, 0, InfiniteRoots()),
        (1, -3, 2, TwoRoots(1.0, 2.0)),
        (2, 4, 2, OneRoot(-1.0)),
    ],
)
def test_solve_reference_cases(a, b, c, expected) -> None:
    assert solve(a, b, c) == expected


def test_epsilon_is_double_machine_epsilon() -> None:
    assert EPSILON == 2.0 ** -52
    assert EPSILON == np.finfo(float).eps


def test_is_approx_zero_band_is_symmetric_and_open() -> None:
    assert is_approx_zero(0.0)
    assert is_approx_zero(-0.0)
    assert is_approx_zero(EPSILON / 2)
    assert is_approx_zero(-EPSILON / 2)
    assert not is_approx_zero(EPSILON)
    assert not is_approx_zero(-EPSILON)
    assert not is_approx_zero(float("nan"))


def test_tiny_leading_coefficient_falls_back_to_linear() -> None:
    r = solve(EPSILON / 4, 2.0, -4.0)
    assert r == OneRoot(2.0)


def test_leading_coefficient_of_one_epsilon_stays_quadratic() -> None:
    r = solve(EPSILON, 2.0, -4.0)
    assert isinstance(r, TwoRoots)


def test_solve_linear_cases() -> None:
    assert solve_linear(0.0, 0.0) == InfiniteRoots()
    assert solve_linear(EPSILON / 2, -EPSILON / 2) == InfiniteRoots()
    assert solve_linear(0.0, 1e-3) == NoRoots()
    assert solve_linear(4.0, 2.0) == OneRoot(-0.5)


def test_negative_discriminant_inside_band_is_one_root() -> None:
    # b^2 = 2^-20 and 4ac = 2^-20 + 2^-72, both exact: d = -2^-72
    a, b, c = 1.0, 2.0 ** -10, 2.0 ** -22 + 2.0 ** -74
    d = discriminant(a, b, c)
    assert d == -(2.0 ** -72)
    assert abs(d) < EPSILON
    assert solve(a, b, c) == OneRoot(-(2.0 ** -11))


def test_negative_discriminant_outside_band_is_no_roots() -> None:
    assert solve(1.0, 0.0, 1e-15) == NoRoots()


def test_discriminant_exactly_minus_epsilon_is_no_roots() -> None:
    # b*b - 4ac == -eps exactly: classified, never sqrt of a negative
    a, b, c = 0.25, 0.0, EPSILON
    assert discriminant(a, b, c) == -EPSILON
    assert solve(a, b, c) == NoRoots()


def test_two_roots_are_ascending_for_negative_leading_coefficient() -> None:
    r = solve(-1.0, 0.0, 4.0)
    assert r == TwoRoots(-2.0, 2.0)


def test_nan_coefficient_is_not_rejected_by_the_core() -> None:
    r = solve(float("nan"), 1.0, 1.0)
    assert isinstance(r, TwoRoots)
    assert math.isnan(r.value1) and math.isnan(r.value2)


def _poly(a, b, c, x):
    return a * x * x + b * x + c


def _close_to_root(a, b, c, x) -> bool:
    scale = abs(a) * x * x + abs(b) * abs(x) + abs(c)
    return abs(_poly(a, b, c, x)) <= 1e-9 * max(scale, 1.0)


def test_two_roots_satisfy_equation_and_are_ordered() -> None:
    rng = np.random.default_rng(20150101)
    checked = 0
    for a, b, c in rng.uniform(-100.0, 100.0, size=(500, 3)):
        r = solve(float(a), float(b), float(c))
        if isinstance(r, TwoRoots):
            checked += 1
            assert r.value1 <= r.value2
            assert _close_to_root(a, b, c, r.value1)
            assert _close_to_root(a, b, c, r.value2)
        else:
            assert isinstance(r, NoRoots)
    assert checked > 100


@pytest.mark.parametrize("r0, a", [(1.0, 1.0), (-3.5, 2.0), (0.25, -4.0), (10.0, 0.5)])
def test_double_root_substitutes_to_zero(r0, a) -> None:
    # a(x - r0)^2 with coefficients exact in binary
    b = -2.0 * a * r0
    c = a * r0 * r0
    r = solve(a, b, c)
    assert isinstance(r, OneRoot)
    assert r.value == pytest.approx(r0)
    assert _close_to_root(a, b, c, r.value)


@pytest.mark.parametrize("a, b, c", [(1, 0, -1), (1, -3, 2), (2, 5, -3), (-1, 0, 4), (1, -2, 1), (1, 0, 1), (0, 2, -4)])
@pytest.mark.parametrize("k", [2.0, -3.0, 0.5, 1e3, -1e-2])
def test_scale_invariance(a, b, c, k) -> None:
    r1 = solve(a, b, c)
    r2 = solve(k * a, k * b, k * c)
    assert type(r1) is type(r2)
    assert r2.roots == pytest.approx(r1.roots)
