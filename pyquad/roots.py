"""
Roots of the quadratic equation :math:`ax^2 + bx + c = 0` in half,
single or double precision.
"""
from __future__ import annotations

import math
import warnings

import numpy as np
from numpy.typing import DTypeLike

from .discriminant import discriminant_info
from .results import RootResult, RootType
from .special_cases import handle_special_cases
from .traits import FloatTraits, DOUBLE, HALF, SINGLE, traits_for

# ======================================================================


def compute_roots(a, b, c, *,
                  dtype: DTypeLike | str | FloatTraits = None) -> RootResult:
    """
    Return the roots of the quadratic equation given by
    :math:`0 = ax^2 + bx + c`, where `a`, `b`, `c` are real floating
    point coefficients.  The calculation avoids overflow and underflow
    of intermediate values and cancellation errors, so that accurate
    roots are returned for any finite coefficients whose roots are
    themselves representable [1]_.

    Degenerate and invalid equations are classified rather than giving
    NaN results; see `RootType`.

    Parameters
    ----------
    a, b, c : float
        Real-valued coefficients of the equation.

    dtype : DTypeLike, str or FloatTraits, optional
        Working precision: ``np.float16``, ``np.float32`` or
        ``np.float64`` (or ``'half'``, ``'single'``, ``'double'``).  If
        omitted the precision of the coefficients is used, with Python
        numbers giving double precision.

    Returns
    -------
    RootResult
        ``(r1, r2, type)`` where `r1` and `r2` are scalars of the working
        precision and `type` is a `RootType`:

        - `SUCCESS_REAL`: Two real roots `r1` and `r2`.
        - `SUCCESS_COMPLEX`: Two complex roots :math:`r_1 \\pm i r_2`.
        - `INPUT_HAS_NAN`, `INPUT_HAS_INFINITY`: Invalid coefficients,
          `r1` = `r2` = NaN.
        - `ONE_REAL_ROOT`: ``a = 0``, the single root of the line is
          `r1` (this may be ±Infinity) and `r2` = NaN.
        - `ALL_REAL_NUMBERS`: ``a = b = c = 0``, `r1` = `r2` = NaN.

    Raises
    ------
    TypeError
        If the precision is not supported or a coefficient is complex.

    References
    ----------
    .. [1] Lomont, C., "A Better Quadratic Formula Algorithm", 2022,
           https://lomont.org/posts/2022/a-better-quadratic-formula-algorithm/

    Examples
    --------
    Equation :math:`x^2 - 3x + 2 = 0` has two real roots:
    >>> r1, r2, root_type = compute_roots(1.0, -3.0, 2.0)
    >>> float(r1), float(r2), root_type
    (2.0, 1.0, <RootType.SUCCESS_REAL: 1>)

    Equation :math:`x^2 + 4x + 5 = 0` has two complex roots
    :math:`-2 \\pm i`:
    >>> compute_roots(1.0, 4.0, 5.0, dtype=np.float32).roots()
    ((-2-1j), (-2+1j))
    """
    traits = _working_traits(a, b, c, dtype)
    a, b, c = _coerce(a, traits), _coerce(b, traits), _coerce(c, traits)

    with np.errstate(all='ignore'):  # IEEE results are values here.
        if (result := handle_special_cases(a, b, c, traits)) is not None:
            return result

        # a, b, c are now finite and nonzero.
        root, nonnegative, scale = discriminant_info(a, b, c, traits)
        root = traits.scale2(root, scale)
        two_a = traits.scale2(a, 1)

        if nonnegative:
            # Choose the sign that avoids cancellation for the first root,
            # then use r1.r2 = c/a for the second.
            if traits.abs(b) < traits.max_value / 2:
                r1 = traits.float((-b - traits.copysign(root, b)) / two_a)
            else:
                r1 = traits.float(-b / two_a -
                                  traits.copysign(root, b) / two_a)

            r2 = traits.float(c / (r1 * a))
            return RootResult(r1, r2, RootType.SUCCESS_REAL)

        else:
            r1 = traits.float(-b / two_a)
            r2 = traits.float(root / two_a)
            return RootResult(r1, r2, RootType.SUCCESS_COMPLEX)


def half_roots(a, b, c) -> RootResult:
    """Shorthand for ``compute_roots(a, b, c, dtype=np.float16)``."""
    return compute_roots(a, b, c, dtype=HALF)


def single_roots(a, b, c) -> RootResult:
    """Shorthand for ``compute_roots(a, b, c, dtype=np.float32)``."""
    return compute_roots(a, b, c, dtype=SINGLE)


def double_roots(a, b, c) -> RootResult:
    """Shorthand for ``compute_roots(a, b, c, dtype=np.float64)``."""
    return compute_roots(a, b, c, dtype=DOUBLE)


# ----------------------------------------------------------------------

def quadratic_roots(a: float, b: float, c: float, *,
                    allow_complex: bool = True,
                    dtype: DTypeLike | str | FloatTraits = None
                    ) -> tuple[float | complex, ...]:
    """
    Return roots of the quadratic equation given by
    :math:`0 = ax^2 + bx + c` as a tuple of Python numbers.  Roots are
    computed using `compute_roots`.  The straight-line case (``a=0``) is
    also handled.

    Parameters
    ----------
    a, b, c : float
      Real-valued coefficients of the equation.

    allow_complex : bool, default = True
      If `True`, complex valued roots are included in the result (if
      present).  If `False`, these are omitted.

    dtype : DTypeLike, str or FloatTraits, optional
      Working precision, see `compute_roots`.

    Returns
    -------
    roots : tuple[float | complex, ...]
        A tuple containing the roots of the quadratic equation, with
        length depending on the result:

        - `len(roots) == 0`: No real roots if ``allow_complex=False``,
          or no root for a line parallel to the x-axis (i.e. ``a=0``
          and ``b=0``).
        - `len(roots) == 1`: One real root.
        - `len(roots) == 2`: Two real roots, or two complex roots with
          ``allow_complex=True``.

    Raises
    ------
    ValueError
        If any coefficient is NaN or Infinity.

    Examples
    --------
    Equation :math:`x^2 -3x + 2 = 0` has two real roots:
    >>> quadratic_roots(1, -3, 2)
    (2.0, 1.0)

    Equation :math:`x^2 -2x + 1 = 0` has a single real root:
    >>> quadratic_roots(1, -2, 1)
    (1.0,)

    Equation :math:`x^2 + 1 = 0` has two complex roots:
    >>> quadratic_roots(1, 0, 1)
    (-1j, 1j)

    Equation :math:`x^2 + 4x + 5 = 0` has two complex roots:
    >>> quadratic_roots(1, 4, 5)
    ((-2-1j), (-2+1j))

    Repeating this equation with ``allow_complex=False`` omits the
    complex roots:
    >>> quadratic_roots(1, 4, 5, allow_complex=False)
    ()

    Equation :math:`5x - 3 = 0` is a straight line with a single real
    root:
    >>> quadratic_roots(0, 5, -3)
    (0.6,)

    Equation :math:`0x + 2 = 0` is a straight line parallel to the
    x-axis (no roots):
    >>> quadratic_roots(0, 0, 2)
    ()
    """
    traits = _working_traits(a, b, c, dtype)
    result = compute_roots(a, b, c, dtype=traits)
    if result.type.is_invalid:
        raise ValueError(f"Coefficients must be finite, got a = {a}, "
                         f"b = {b}, c = {c}.")

    roots = result.roots()
    if result.type == RootType.ONE_REAL_ROOT:
        # A sloped line may still give ±Infinity if -c/b overflows.
        with np.errstate(over='ignore'):
            if traits.float(b) == 0:
                return ()  # Line parallel to x-axis.

    elif result.type == RootType.SUCCESS_REAL:
        if roots[0] == roots[1]:
            return roots[:1]  # Repeated root.

    elif result.type == RootType.SUCCESS_COMPLEX:
        if not allow_complex:
            return ()

    return roots


# ----------------------------------------------------------------------

def _coerce(x, traits: FloatTraits):
    # Convert a coefficient to the working precision, warning if it is
    # changed by doing so.
    if isinstance(x, traits.dtype.type):
        return x

    with np.errstate(over='ignore'):
        y = traits.float(x)

    if not (float(y) == float(x) or (math.isnan(y) and math.isnan(x))):
        warnings.warn(f"Coefficient {x!r} is not exactly representable in "
                      f"{traits.name} precision, using {y!r}.",
                      RuntimeWarning, stacklevel=3)
    return y


def _working_traits(a, b, c, dtype) -> FloatTraits:
    if any(np.iscomplexobj(x) for x in (a, b, c)):
        raise TypeError("Complex coefficients are not supported.")

    if dtype is not None:
        return traits_for(dtype)

    res_type = np.result_type(a, b, c)
    if not np.issubdtype(res_type, np.floating):
        return DOUBLE  # Python / NumPy integers.

    return traits_for(res_type)
