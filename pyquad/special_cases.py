"""
Handling of quadratic equations that are degenerate or invalid, before
the general algorithm is applied.
"""
from __future__ import annotations

from .decompose import div_root
from .results import RootResult, RootType
from .traits import FloatTraits


# ======================================================================

def handle_special_cases(a, b, c,
                         traits: FloatTraits) -> RootResult | None:
    """
    Check for NaN / Infinity coefficients and for zero `a`, `b` or `c`,
    returning the final result if any of these apply.  Checks are done
    in order, so NaN takes priority over Infinity, etc.

    Parameters
    ----------
    a, b, c : scalar
        Coefficients of the format described by `traits`.
    traits : FloatTraits
        Floating point format.

    Returns
    -------
    RootResult or None
        Final result, or `None` if `a`, `b` and `c` are all finite and
        nonzero and the general algorithm is required.
    """
    nan = traits.nan
    if traits.isnan(a) or traits.isnan(b) or traits.isnan(c):
        return RootResult(nan, nan, RootType.INPUT_HAS_NAN)

    if traits.isinf(a) or traits.isinf(b) or traits.isinf(c):
        return RootResult(nan, nan, RootType.INPUT_HAS_INFINITY)

    if a == 0:
        # Line bx + c = 0, so x = -c/b.  If b underflows this may give
        # ±Infinity.
        if b == 0 and c == 0:
            return RootResult(nan, nan, RootType.ALL_REAL_NUMBERS)

        return RootResult(traits.float(-c / b), nan, RootType.ONE_REAL_ROOT)

    if b == 0:
        # ax² + c = 0, so x = ±sqrt(-c/a).
        if traits.sign(a) * traits.sign(c) <= 0:
            r1 = div_root(-c, a, traits)
            return RootResult(r1, -r1, RootType.SUCCESS_REAL)
        else:
            # Purely imaginary, 0 ± i.r2.
            return RootResult(traits.zero, div_root(c, a, traits),
                              RootType.SUCCESS_COMPLEX)

    if c == 0:
        # ax² + bx = 0, so x = 0 or x = -b/a.
        return RootResult(traits.zero, traits.float(-b / a),
                          RootType.SUCCESS_REAL)

    return None
