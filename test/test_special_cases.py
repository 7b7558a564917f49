from unittest import TestCase

import numpy as np

from pyquad.results import RootType
from pyquad.special_cases import handle_special_cases
from pyquad.traits import DOUBLE, HALF, SINGLE


# ======================================================================

class TestHandleSpecialCases(TestCase):
    def check(self, coeffs, r1, r2, root_type, traits=DOUBLE):
        a, b, c = (traits.float(x) for x in coeffs)
        with np.errstate(all='ignore'):
            result = handle_special_cases(a, b, c, traits)

        self.assertIsNotNone(result)
        self.assertIs(result.type, root_type)
        for value, expected in zip(result[:2], (r1, r2)):
            self.assertIsInstance(value, traits.dtype.type)
            if np.isnan(expected):
                self.assertTrue(np.isnan(value))
            else:
                self.assertEqual(value, expected)

    def test_invalid(self):
        nan, inf = np.nan, np.inf
        self.check((nan, 1, 1), nan, nan, RootType.INPUT_HAS_NAN)
        self.check((1, 1, nan), nan, nan, RootType.INPUT_HAS_NAN)
        self.check((inf, 1, 1), nan, nan, RootType.INPUT_HAS_INFINITY)
        self.check((1, -inf, 1), nan, nan, RootType.INPUT_HAS_INFINITY)

        # NaN takes priority over Infinity.
        self.check((inf, nan, 0), nan, nan, RootType.INPUT_HAS_NAN)

    def test_zero_a(self):
        nan = np.nan
        self.check((0, 0, 0), nan, nan, RootType.ALL_REAL_NUMBERS)
        self.check((-0.0, 0, -0.0), nan, nan, RootType.ALL_REAL_NUMBERS)
        self.check((0, 2, 4), -2, nan, RootType.ONE_REAL_ROOT)
        self.check((0, 4, 0), 0, nan, RootType.ONE_REAL_ROOT)

        # Line parallel to the x-axis, or division overflow.
        self.check((0, 0, 1), -np.inf, nan, RootType.ONE_REAL_ROOT)
        self.check((0, 5e-324, -1), np.inf, nan, RootType.ONE_REAL_ROOT)

    def test_zero_b(self):
        self.check((1, 0, -4), 2, -2, RootType.SUCCESS_REAL)
        self.check((-1, 0, 4), 2, -2, RootType.SUCCESS_REAL)
        self.check((1, 0, 4), 0, 2, RootType.SUCCESS_COMPLEX)
        self.check((-4, 0, -1), 0, 0.5, RootType.SUCCESS_COMPLEX)
        self.check((-1, 0, 0), 0, 0, RootType.SUCCESS_REAL)

        # Ratio c/a far outside the range of the format.
        self.check((2.0 ** -120, 0, -2.0 ** 120), 2.0 ** 120, -2.0 ** 120,
                   RootType.SUCCESS_REAL, traits=SINGLE)
        self.check((2.0 ** 14, 0, 2.0 ** -14), 0, 2.0 ** -14,
                   RootType.SUCCESS_COMPLEX, traits=HALF)

    def test_zero_c(self):
        self.check((1, 3, 0), 0, -3, RootType.SUCCESS_REAL)
        self.check((2, -1, 0), 0, 0.5, RootType.SUCCESS_REAL)

    def test_not_handled(self):
        for traits in (HALF, SINGLE, DOUBLE):
            a, b, c = (traits.float(x) for x in (1, -3, 2))
            self.assertIsNone(handle_special_cases(a, b, c, traits))
