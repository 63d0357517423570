"""Adams-Bashforth-Moulton coefficient tables.

Each ``abmN`` pairs the N-step Adams-Bashforth predictor with the
Adams-Moulton corrector of the same order. Both sets of weights share one
denominator, so a step reads

    y_p     = y_n + (h/D) * sum_j P[j] f_{n-j}
    y_{n+1} = y_n + (h/D) * (C[0] f(t_{n+1}, y_p) + sum_{j>=1} C[j] f_{n-j+1})
"""

from fixedstep.core.method import ABMethod


def abm2() -> ABMethod:
    """2-step ABM (2nd order): AB2 predictor, trapezoidal corrector."""
    return ABMethod(predictor=(3, -1), corrector=(1, 1), denominator=2)


def abm3() -> ABMethod:
    """3-step ABM (3rd order)."""
    return ABMethod(
        predictor=(23, -16, 5),
        corrector=(5, 8, -1),
        denominator=12,
    )


def abm4() -> ABMethod:
    """4-step ABM (4th order)."""
    return ABMethod(
        predictor=(55, -59, 37, -9),
        corrector=(9, 19, -5, 1),
        denominator=24,
    )


def abm5() -> ABMethod:
    """5-step ABM (5th order)."""
    return ABMethod(
        predictor=(1901, -2774, 2616, -1274, 251),
        corrector=(251, 646, -264, 106, -19),
        denominator=720,
    )


def abm6() -> ABMethod:
    """6-step ABM (6th order)."""
    return ABMethod(
        predictor=(4277, -7923, 9982, -7298, 2877, -475),
        corrector=(475, 1427, -798, 482, -173, 27),
        denominator=1440,
    )


def abm7() -> ABMethod:
    """7-step ABM (7th order)."""
    return ABMethod(
        predictor=(198721, -447288, 705549, -688256, 407139, -134472, 19087),
        corrector=(19087, 65112, -46461, 37504, -20211, 6312, -863),
        denominator=60480,
    )


def abm8() -> ABMethod:
    """8-step ABM (8th order)."""
    return ABMethod(
        predictor=(
            434241, -1152169, 2183877, -2664477,
            2102243, -1041723, 295767, -36799,
        ),
        corrector=(
            36799, 139849, -121797, 123133,
            -88547, 41499, -11351, 1375,
        ),
        denominator=120960,
    )


_TABLES = {
    2: abm2,
    3: abm3,
    4: abm4,
    5: abm5,
    6: abm6,
    7: abm7,
    8: abm8,
}


def adams_bashforth_moulton(order: int) -> ABMethod:
    """
    Look up the ABM method of a given order.

    Args:
        order: Number of steps m, 2 through 8

    Returns:
        ABMethod instance

    Raises:
        ValueError: If no table exists for the order
    """
    try:
        return _TABLES[order]()
    except KeyError:
        raise ValueError(
            f"Unsupported ABM order {order}; available orders are "
            f"{min(_TABLES)} to {max(_TABLES)}"
        ) from None


def is_consistent(method: ABMethod) -> bool:
    """
    Check the basic consistency condition of both formulas.

    A constant derivative must be integrated exactly, so each set of
    numerators has to sum to the denominator.
    """
    return (
        sum(method.predictor) == method.denominator
        and sum(method.corrector) == method.denominator
    )
