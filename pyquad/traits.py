"""
Per-precision parameters and primitive operations for IEEE-754 binary
floating point formats.  All of the root finding code is written once
against a `FloatTraits` object, which supplies both the format constants
(widths, bias) and the handful of primitive operations it needs (square
root, FMA, power-of-two scaling, bit reinterpretation, etc).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

# ======================================================================


@dataclass(frozen=True, kw_only=True)
class FloatTraits:
    """
    Dataclass describing a single IEEE-754 binary floating point format
    and providing the primitive operations used by the root finding
    algorithm.  Values handled are NumPy scalars of type `dtype`.

    Parameters
    ----------
    name : str
        Short name of the format (e.g. ``'single'``).
    dtype : numpy.dtype
        NumPy floating point type for the format.
    uint_dtype : numpy.dtype
        Unsigned integer type of the same width, used to reinterpret the
        raw bits of a value.
    precision_bits : int
        Number of significand bits including the implicit leading bit
        (e.g. 53 for double precision).
    exponent_bits : int
        Width of the biased exponent field.
    """
    name: str
    dtype: np.dtype
    uint_dtype: np.dtype
    precision_bits: int
    exponent_bits: int

    total_bits: int = field(init=False)
    exponent_bias: int = field(init=False)
    exponent_mask: int = field(init=False)

    def __post_init__(self):
        # Normalise dtypes and compute derived constants.  Frozen, so
        # use object.__setattr__.
        object.__setattr__(self, 'dtype', np.dtype(self.dtype))
        object.__setattr__(self, 'uint_dtype', np.dtype(self.uint_dtype))
        object.__setattr__(self, 'total_bits', 8 * self.dtype.itemsize)
        object.__setattr__(self, 'exponent_bias',
                           (1 << (self.exponent_bits - 1)) - 1)
        object.__setattr__(self, 'exponent_mask',
                           (1 << self.exponent_bits) - 1)

        if self.uint_dtype.itemsize != self.dtype.itemsize:
            raise ValueError(f"'uint_dtype' must have the same width as "
                             f"'dtype', got {self.uint_dtype} and "
                             f"{self.dtype}.")
        if (1 + (self.precision_bits - 1) + self.exponent_bits !=
                self.total_bits):
            raise ValueError(f"Sign, exponent and mantissa widths do not "
                             f"add up to {self.total_bits} bits.")

    def __repr__(self):
        return f"FloatTraits({self.name!r})"

    # -- Format Constants --------------------------------------------------

    @property
    def max_value(self):
        """Largest finite value of the format."""
        return np.finfo(self.dtype).max

    @property
    def nan(self):
        """Quiet NaN of the format."""
        return self.dtype.type(np.nan)

    @property
    def smallest_normal(self):
        """Smallest positive normal value of the format."""
        return np.finfo(self.dtype).smallest_normal

    @property
    def zero(self):
        return self.dtype.type(0)

    # -- Primitive Operations ----------------------------------------------

    def float(self, x: Any):
        """Convert `x` to a scalar of this format (with rounding)."""
        return self.dtype.type(x)

    def abs(self, x):
        return self.float(np.abs(x))

    def copysign(self, x, y):
        """Return the magnitude of `x` with the sign of `y`."""
        return self.float(np.copysign(x, y))

    def sign(self, x) -> int:
        """Return -1, 0 or +1 (as an `int`) depending on the sign of `x`."""
        if x > 0:
            return 1
        elif x < 0:
            return -1
        return 0

    def sqrt(self, x):
        return self.float(np.sqrt(x))

    def scale2(self, x, n: int):
        """
        Return :math:`x \\cdot 2^n`, rounded once to this format.  Results
        that exceed the format range give ±Infinity or (signed) zero.
        """
        return self.float(np.ldexp(self.float(x), int(n)))

    def fma(self, x, y, z):
        """
        Fused multiply-add :math:`x \\cdot y + z` with a single rounding to
        this format.

        NumPy has no FMA, so the result is computed exactly using rational
        arithmetic and then rounded.  For formats narrower than double
        precision the exact result is first rounded to double precision
        using round-to-odd, which guarantees that the final conversion to
        the narrower format is correctly rounded [1]_.

        References
        ----------
        .. [1] Boldo, S. and Melquiond, G., "Emulation of FMA and
           Correctly Rounded Sums: Proved Algorithms Using Rounding to
           Odd", IEEE Transactions on Computers, 57(4), 2008.
        """
        x, y, z = self.float(x), self.float(y), self.float(z)
        if not (np.isfinite(x) and np.isfinite(y) and np.isfinite(z)):
            return self.float(x * y + z)  # IEEE rules for NaN / Inf.

        exact = Fraction(float(x)) * Fraction(float(y)) + Fraction(float(z))
        if exact == 0:
            # Exact zero: the sign follows ordinary addition rules and the
            # product must have been exact.
            return self.float(x * y + z)

        try:
            approx = float(exact)  # Correctly rounded to double.
        except OverflowError:
            return self.float(math.inf if exact > 0 else -math.inf)

        if approx == 0.0:
            return self.float(0.0 if exact > 0 else -0.0)

        if self.total_bits < 64 and Fraction(approx) != exact:
            # Round to odd: if the double is inexact and even, step one
            # ulp towards the exact value.
            if int(np.float64(approx).view(np.uint64)) & 1 == 0:
                towards = math.inf if exact > approx else -math.inf
                approx = float(np.nextafter(approx, towards))

        return self.float(approx)

    def isfinite(self, x) -> bool:
        return bool(np.isfinite(x))

    def isinf(self, x) -> bool:
        return bool(np.isinf(x))

    def isnan(self, x) -> bool:
        return bool(np.isnan(x))

    def isnormal(self, x) -> bool:
        """`True` if `x` is finite, nonzero and not subnormal."""
        return (self.isfinite(x) and
                bool(np.abs(x) >= self.smallest_normal))

    def to_bits(self, x) -> int:
        """Return the raw bit pattern of `x` as a Python `int`."""
        return int(np.asarray(x, dtype=self.dtype).view(self.uint_dtype))


# ----------------------------------------------------------------------

HALF = FloatTraits(name='half', dtype=np.float16, uint_dtype=np.uint16,
                   precision_bits=11, exponent_bits=5)
SINGLE = FloatTraits(name='single', dtype=np.float32, uint_dtype=np.uint32,
                     precision_bits=24, exponent_bits=8)
DOUBLE = FloatTraits(name='double', dtype=np.float64, uint_dtype=np.uint64,
                     precision_bits=53, exponent_bits=11)

_ALL_TRAITS = (HALF, SINGLE, DOUBLE)


def traits_for(dtype: DTypeLike | str | FloatTraits) -> FloatTraits:
    """
    Return the `FloatTraits` for the given precision.

    Parameters
    ----------
    dtype : DTypeLike, str or FloatTraits
        A NumPy floating point dtype / scalar type (e.g. ``np.float32``),
        a format name (``'half'``, ``'single'``, ``'double'``) or an
        existing `FloatTraits` object (returned unchanged).

    Returns
    -------
    FloatTraits

    Raises
    ------
    TypeError
        If the precision is not one of the supported formats.

    Examples
    --------
    >>> traits_for(np.float32)
    FloatTraits('single')
    >>> traits_for('half').precision_bits
    11
    """
    if isinstance(dtype, FloatTraits):
        return dtype

    if isinstance(dtype, str):
        for traits in _ALL_TRAITS:
            if dtype == traits.name:
                return traits

    try:
        dtype = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"Unsupported precision: {dtype!r}.") from None

    for traits in _ALL_TRAITS:
        if dtype == traits.dtype:
            return traits

    raise TypeError(f"Unsupported precision: {dtype}.  Supported types "
                    f"are float16, float32 and float64.")
