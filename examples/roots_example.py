#!usr/bin/env python3

# Comparison of the textbook quadratic formula with compute_roots() for
# some poorly conditioned equations.

import numpy as np

from pyquad import compute_roots


def textbook_roots(a, b, c):
    """Direct use of x = (-b ± sqrt(b² - 4ac)) / 2a."""
    disc = np.sqrt(b * b - 4 * a * c)
    return (-b + disc) / (2 * a), (-b - disc) / (2 * a)


# Equations given as (a, b, c) along with a description.
equations = [
    ((1.0, -3.0, 2.0), "Well conditioned, roots 1 and 2"),
    ((1.0, -1e8, 1.0), "Cancellation in the small root"),
    ((2.0 ** 600, -3 * 2.0 ** 600, 2.0 ** 600), "b² and 4ac overflow"),
    ((2.0 ** -600, -3 * 2.0 ** -600, 2.0 ** -600), "b² and 4ac underflow"),
    ((1.0, -2 * (1 + 2 ** -29), 1 + 2 ** -28), "Near repeated root"),
    ((0.0, 2.0, 4.0), "Linear equation"),
    ((1.0, 0.0, 4.0), "Purely imaginary roots"),
    ((np.nan, 1.0, 1.0), "Invalid coefficient"),
]

with np.errstate(all='ignore'):
    for (a, b, c), desc in equations:
        print(f"\n{desc}: a = {a:.6G}, b = {b:.6G}, c = {c:.6G}")
        print(f"    Textbook:      {textbook_roots(a, b, c)}")
        r1, r2, root_type = compute_roots(a, b, c)
        print(f"    compute_roots: r1 = {r1!r}, r2 = {r2!r}, "
              f"type = {root_type.name}")

# The same equation in each precision.
for dtype in (np.float16, np.float32, np.float64):
    result = compute_roots(1.0, -5.0, 6.0, dtype=dtype)
    print(f"\n{np.dtype(dtype).name}: roots = {result.roots()}")
