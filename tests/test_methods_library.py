"""Tests for the method coefficient tables."""

import numpy as np
import pytest

from fixedstep.methods.adams import (
    abm2,
    abm3,
    abm4,
    abm5,
    abm6,
    abm7,
    abm8,
    adams_bashforth_moulton,
    is_consistent,
)
from fixedstep.methods.runge_kutta import explicit_euler, rk4
from fixedstep.core.method import ABMethod


ALL_ABM = [abm2, abm3, abm4, abm5, abm6, abm7, abm8]


@pytest.mark.parametrize("factory", ALL_ABM)
def test_abm_tables_are_consistent(factory):
    """Both formulas integrate a constant derivative exactly."""
    method = factory()

    assert is_consistent(method)
    assert len(method.predictor) == len(method.corrector) == method.order


def test_abm_orders_match_names():
    assert [factory().order for factory in ALL_ABM] == [2, 3, 4, 5, 6, 7, 8]


def test_abm7_coefficients():
    """Exact 7th-order numerators over 60480."""
    method = abm7()

    assert method.denominator == 60480
    assert method.predictor == (
        198721, -447288, 705549, -688256, 407139, -134472, 19087
    )
    assert method.corrector == (19087, 65112, -46461, 37504, -20211, 6312, -863)


def test_oldest_predictor_weight_matches_implicit_weight():
    """|oldest AB numerator| equals the implicit AM numerator at every order."""
    for factory in ALL_ABM:
        method = factory()
        assert abs(method.predictor[-1]) == method.corrector[0]


def test_lookup_by_order():
    for order, factory in zip(range(2, 9), ALL_ABM):
        assert adams_bashforth_moulton(order) == factory()


def test_lookup_rejects_unknown_order():
    with pytest.raises(ValueError, match="Unsupported ABM order 9"):
        adams_bashforth_moulton(9)

    with pytest.raises(ValueError, match="available orders are 2 to 8"):
        adams_bashforth_moulton(1)


def test_inconsistent_table_detected():
    method = ABMethod(predictor=(3, -2), corrector=(1, 1), denominator=2)
    assert not is_consistent(method)


def test_explicit_euler_structure():
    method = explicit_euler()

    assert method.s == 1
    assert method.is_explicit
    assert np.allclose(method.b, 1.0)
    assert np.allclose(method.c, 0.0)


def test_rk4_butcher_tableau():
    method = rk4()

    assert method.s == 4
    assert method.is_explicit
    assert np.isclose(method.A[1, 0], 0.5)
    assert np.isclose(method.A[2, 1], 0.5)
    assert np.isclose(method.A[3, 2], 1.0)
    assert np.allclose(method.b, [1.0/6.0, 1.0/3.0, 1.0/3.0, 1.0/6.0])
    assert np.allclose(method.c, [0.0, 0.5, 0.5, 1.0])
