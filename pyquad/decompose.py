"""
Low level building blocks: decomposition of a value into sign, exponent
and mantissa, an overflow-safe :math:`\\sqrt{|x/y|}` and a compensated
2x2 determinant.
"""
from __future__ import annotations

from typing import NamedTuple, Any

from .traits import FloatTraits


# ======================================================================

class NormalizedForm(NamedTuple):
    """
    A finite value decomposed as ``sign * 2**exponent * mantissa``, with
    ``1 <= mantissa < 2`` for nonzero values.  Zero is represented as
    ``(1, 0, 0)``.
    """
    sign: int
    exponent: int
    mantissa: Any


# ----------------------------------------------------------------------

def normalize(value, traits: FloatTraits) -> NormalizedForm:
    """
    Decompose finite `value` into `NormalizedForm` ``(sign, exponent,
    mantissa)`` such that ``sign * 2**exponent * mantissa == value``
    exactly.

    The sign and exponent are taken directly from the bit pattern of
    `value`.  Subnormal values have a zero exponent field, so after the
    first scaling their mantissa is still too small; this is normalised
    again and the exponents combined.

    Parameters
    ----------
    value : scalar
        Finite value of the format described by `traits`.  NaN or
        Infinity is not permitted.
    traits : FloatTraits
        Floating point format.

    Returns
    -------
    NormalizedForm
    """
    value = traits.float(value)
    assert traits.isfinite(value), "normalize() requires a finite value."
    if value == 0:
        return NormalizedForm(1, 0, traits.zero)

    bits = traits.to_bits(value)
    sign = -1 if bits >> (traits.total_bits - 1) else 1
    exp = (((bits >> (traits.precision_bits - 1)) & traits.exponent_mask)
           - traits.exponent_bias)
    frac = traits.scale2(value, -exp)
    if sign < 0:
        frac = -frac

    if not traits.isnormal(value):
        sub_sign, sub_exp, frac = normalize(frac, traits)
        exp += sub_exp
        assert sub_sign == 1

    assert 1 <= frac < 2
    assert sign * traits.scale2(frac, exp) == value
    return NormalizedForm(sign, exp, frac)


def div_root(x, y, traits: FloatTraits):
    """
    Compute :math:`\\sqrt{|x/y|}` without the intermediate overflow or
    underflow that ``sqrt(x / y)`` suffers when `x` and `y` have widely
    different exponents (e.g. :math:`x = 2^{120}`, :math:`y = 2^{-120}`
    in single precision).

    `x` and `y` must be finite with `y` nonzero, and `x / y` must not be
    negative.  Zero `x` gives zero.
    """
    x_sign, x_exp, x_frac = normalize(x, traits)
    y_sign, y_exp, y_frac = normalize(y, traits)
    assert x_sign * y_sign >= 0 or x_frac == 0

    q = traits.float(x_frac / y_frac)  # Both in [1, 2), can't overflow.
    e = x_exp - y_exp
    if e & 1:
        # Odd exponent: move one factor of 2 into the mantissa so that
        # the root can be scaled exactly afterwards.
        q = traits.scale2(q, 1)
        e -= 1

    return traits.scale2(traits.sqrt(q), e // 2)


def det2x2(a, b, c, d, traits: FloatTraits):
    """
    Compute :math:`ab - cd` accurately even when :math:`ab` and :math:`cd`
    nearly cancel.  The rounding error of :math:`cd` is recovered using a
    fused multiply-add and added back on at the end [1]_.

    References
    ----------
    .. [1] Kahan, W., "On the Cost of Floating-Point Computation Without
       Extra-Precise Arithmetic", 2004.
    """
    v1 = traits.float(c * d)  # Rounded.
    v2 = traits.fma(-c, d, v1)  # Lost low order part of c.d.
    v3 = traits.fma(a, b, -v1)  # a.b - c.d (high part).
    return traits.float(v3 + v2)
