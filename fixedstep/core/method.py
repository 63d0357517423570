"""Integration method specifications."""

from dataclasses import dataclass
from functools import cached_property
import numpy as np
from numpy.typing import NDArray


def _integers(values, name: str) -> tuple[int, ...]:
    """Convert to a tuple of ints, rejecting values that are not integral."""
    result = []
    for value in values:
        as_int = int(value)
        if as_int != value:
            raise ValueError(
                f"{name} values must be integers, got {value!r}"
            )
        result.append(as_int)
    return tuple(result)


@dataclass(frozen=True)
class ABMethod:
    """Adams-Bashforth-Moulton predictor-corrector coefficients.

    Coefficients are exact integer numerators over a common denominator.
    """

    predictor: tuple[int, ...]  # (m,) AB weights, newest evaluation first
    corrector: tuple[int, ...]  # (m,) AM weights, f(t+h, y_p) first, then newest
    denominator: int

    def __post_init__(self) -> None:
        # Frozen, so normalise through object.__setattr__
        object.__setattr__(self, "predictor", _integers(self.predictor, "Predictor"))
        object.__setattr__(self, "corrector", _integers(self.corrector, "Corrector"))
        object.__setattr__(
            self, "denominator", _integers((self.denominator,), "Denominator")[0]
        )

        if len(self.predictor) == 0:
            raise ValueError("Predictor coefficients must not be empty")
        if len(self.predictor) != len(self.corrector):
            raise ValueError(
                f"Predictor has {len(self.predictor)} coefficients but "
                f"corrector has {len(self.corrector)}"
            )
        if self.denominator <= 0:
            raise ValueError(
                f"Denominator must be positive, got {self.denominator}"
            )

    @cached_property
    def order(self) -> int:
        """Number of steps m (also the order of accuracy)."""
        return len(self.predictor)

    @cached_property
    def predictor_weights(self) -> NDArray:
        """Predictor numerators as floats, newest evaluation first."""
        return np.array(self.predictor, dtype=float)

    @cached_property
    def corrector_weights(self) -> NDArray:
        """Corrector numerators as floats, predicted evaluation first."""
        return np.array(self.corrector, dtype=float)


@dataclass(frozen=True)
class RKMethod:
    """Runge-Kutta Butcher tableau."""

    A: NDArray  # (s, s) - stage coefficients
    b: NDArray  # (s,)   - output weights
    c: NDArray  # (s,)   - abscissae

    @cached_property
    def s(self) -> int:
        """Number of stages."""
        return self.A.shape[0]

    @cached_property
    def is_explicit(self) -> bool:
        """True if A is strictly lower triangular."""
        return bool(np.allclose(self.A, np.tril(self.A, -1)))
