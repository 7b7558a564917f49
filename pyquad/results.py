"""
Result types returned by the quadratic root solvers.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import NamedTuple, Any

import numpy as np


# ======================================================================

class RootType(Enum):
    """
    Classification of the result of `compute_roots`.  The meaning of the
    returned values `r1` and `r2` depends on the type:

    ====================  ===============  ===================  ==========
    Type                  `r1`             `r2`                 Meaning
    ====================  ===============  ===================  ==========
    `SUCCESS_REAL`        Root 1           Root 2               Two real
                                                                roots.
    `SUCCESS_COMPLEX`     Real part        Imaginary magnitude  Roots are
                                                                r1 ± i.r2.
    `INPUT_HAS_NAN`       NaN              NaN                  Invalid.
    `INPUT_HAS_INFINITY`  NaN              NaN                  Invalid.
    `ONE_REAL_ROOT`       Root             NaN                  `a` = 0.
    `ALL_REAL_NUMBERS`    NaN              NaN                  `a` = `b`
                                                                = `c` = 0.
    ====================  ===============  ===================  ==========
    """
    SUCCESS_REAL = auto()
    SUCCESS_COMPLEX = auto()
    INPUT_HAS_NAN = auto()
    INPUT_HAS_INFINITY = auto()
    ONE_REAL_ROOT = auto()
    ALL_REAL_NUMBERS = auto()

    @property
    def is_success(self) -> bool:
        """`True` if two (real or complex) roots were found."""
        return self in (RootType.SUCCESS_REAL, RootType.SUCCESS_COMPLEX)

    @property
    def is_invalid(self) -> bool:
        """`True` if the coefficients included NaN or Infinity."""
        return self in (RootType.INPUT_HAS_NAN, RootType.INPUT_HAS_INFINITY)

    @property
    def is_degenerate(self) -> bool:
        """`True` if the leading coefficient was zero."""
        return self in (RootType.ONE_REAL_ROOT, RootType.ALL_REAL_NUMBERS)


# ----------------------------------------------------------------------

class RootResult(NamedTuple):
    """
    Roots of a quadratic equation as returned by `compute_roots`.  `r1`
    and `r2` are scalars of the working precision; see `RootType` for
    their meaning.  Unused values are NaN.
    """
    r1: Any
    r2: Any
    type: RootType

    def roots(self) -> tuple[float | complex, ...]:
        """
        Return the roots as Python numbers:

        - `SUCCESS_REAL`: ``(r1, r2)`` as `float`.
        - `SUCCESS_COMPLEX`: ``(r1 - i.r2, r1 + i.r2)`` as `complex`.
        - `ONE_REAL_ROOT`: ``(r1,)`` as `float`.
        - Otherwise: ``()``.

        Examples
        --------
        >>> RootResult(np.float64(0.0), np.float64(2.0),
        ...            RootType.SUCCESS_COMPLEX).roots()
        (-2j, 2j)
        """
        if self.type == RootType.SUCCESS_REAL:
            return float(self.r1), float(self.r2)

        elif self.type == RootType.SUCCESS_COMPLEX:
            re, im = float(self.r1), float(self.r2)
            return complex(re, -im), complex(re, im)

        elif self.type == RootType.ONE_REAL_ROOT:
            return (float(self.r1),)

        return ()
