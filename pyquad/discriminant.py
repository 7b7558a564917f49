"""
Scaled square root of the discriminant :math:`b^2 - 4ac`.
"""
from __future__ import annotations

from typing import NamedTuple, Any

from .decompose import det2x2, normalize
from .traits import FloatTraits


# ======================================================================

class DiscriminantInfo(NamedTuple):
    """
    Result of `discriminant_info`.  The square root of the magnitude of
    the discriminant is ``root * 2**scale``, and `nonnegative` is `True`
    if :math:`b^2 - 4ac \\geq 0`.
    """
    root: Any
    nonnegative: bool
    scale: int


def _div_trunc(n: int, d: int) -> int:
    # Integer division rounding toward zero.
    q = abs(n) // d
    return q if n >= 0 else -q


# ----------------------------------------------------------------------

def discriminant_info(a, b, c, traits: FloatTraits) -> DiscriminantInfo:
    """
    Compute the square root of :math:`|b^2 - 4ac|` in scaled form,
    without intermediate overflow or underflow and with the cancellation
    between :math:`b^2` and :math:`4ac` compensated.

    Depending on the exponents of the coefficients one of three regimes
    is used:

    - :math:`b^2` dominant: :math:`4ac` is below the rounding level, so
      the root is just :math:`|b|`.
    - :math:`4ac` dominant: :math:`b^2` is negligible, the root is
      :math:`\\sqrt{4|ac|}` computed from the mantissas.
    - Comparable: `a`, `b` and `c` are rescaled so that their exponents
      are centred on zero and the discriminant is formed with `det2x2`.

    Parameters
    ----------
    a, b, c : scalar
        Finite, nonzero coefficients of the format described by `traits`.
    traits : FloatTraits
        Floating point format.

    Returns
    -------
    DiscriminantInfo
    """
    a, b, c = traits.float(a), traits.float(b), traits.float(c)
    a_sign, a_exp, a_frac = normalize(a, traits)
    _, b_exp, b_frac = normalize(b, traits)
    c_sign, c_exp, c_frac = normalize(c, traits)
    p_bits = traits.precision_bits

    # The margins P + 5 and P + 1 were established by testing.
    if 2 * b_exp > a_exp + c_exp + p_bits + 5:
        return DiscriminantInfo(b_frac, True, b_exp)

    elif 2 * b_exp < a_exp + c_exp - p_bits - 1:
        scale = a_exp + c_exp
        if scale & 1:
            scale -= 1
            a_frac = traits.scale2(a_frac, 1)
        scale = scale // 2 + 1  # +1 for the 4 in 4ac.

        root = traits.sqrt(a_frac * c_frac)
        return DiscriminantInfo(root, a_sign * c_sign < 0, scale)

    assert (-p_bits - 1 <= 2 * b_exp - a_exp - c_exp <= p_bits + 5)

    # Centre the exponents of b.b and a.c on zero.  a and c are also
    # moved towards each other, leaving a.c unchanged.
    delta_exp = _div_trunc(a_exp - c_exp, 2)
    mid = _div_trunc(2 * b_exp + a_exp + c_exp, 4)
    a_scl = traits.scale2(a, 2 - mid - delta_exp)  # +2 for the 4 in 4ac.
    b_scl = traits.scale2(b, -mid)
    c_scl = traits.scale2(c, -mid + delta_exp)
    assert (traits.isfinite(a_scl) and traits.isfinite(b_scl) and
            traits.isfinite(c_scl))

    d = det2x2(b_scl, b_scl, a_scl, c_scl, traits)
    return DiscriminantInfo(traits.sqrt(traits.abs(d)), bool(d >= 0), mid)
