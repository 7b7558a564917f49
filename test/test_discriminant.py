from unittest import TestCase

import numpy as np


class TestDiscriminantInfo(TestCase):
    def test_b_dominant(self):
        from pyquad.discriminant import discriminant_info
        from pyquad.traits import DOUBLE, SINGLE

        # b² = 2^80 swamps 4ac = 4.
        self.assertEqual(discriminant_info(1.0, 2.0 ** 40, 1.0, DOUBLE),
                         (1.0, True, 40))
        self.assertEqual(discriminant_info(1.0, -3 * 2.0 ** 40, -1.0,
                                           DOUBLE), (1.5, True, 41))

        # Threshold for single precision is much lower.
        self.assertEqual(discriminant_info(1.0, 2.0 ** 16, 1.0, SINGLE),
                         (1.0, True, 16))

    def test_ac_dominant(self):
        from pyquad.discriminant import discriminant_info
        from pyquad.traits import DOUBLE

        # 4ac = 2^82 swamps b² = 1, sqrt = 2^41 (negative discriminant).
        self.assertEqual(discriminant_info(2.0 ** 40, 1.0, 2.0 ** 40,
                                           DOUBLE), (1.0, False, 41))

        # Odd exponent sum.  sqrt(4 * 2^81) = sqrt(2) * 2^41.
        root, nonneg, scale = discriminant_info(2.0 ** 40, 1.0, -2.0 ** 41,
                                                DOUBLE)
        self.assertEqual(root, np.sqrt(2.0))
        self.assertTrue(nonneg)
        self.assertEqual(scale, 41)

    def test_comparable(self):
        from pyquad.discriminant import discriminant_info
        from pyquad.traits import DOUBLE, HALF, SINGLE

        # x² - 3x + 2: D = 1.
        for traits in (HALF, SINGLE, DOUBLE):
            with self.subTest(traits=traits.name):
                root, nonneg, scale = discriminant_info(1, -3, 2, traits)
                self.assertIsInstance(root, traits.dtype.type)
                self.assertEqual((root, nonneg, scale), (1, True, 0))

        # x² + 4x + 5: D = -4.
        self.assertEqual(discriminant_info(1.0, 4.0, 5.0, DOUBLE),
                         (1.0, False, 1))

        # Near cancellation: D = 2^-58 but b.b - 4.a.c directly gives 0.
        b, c = 2 + 2 ** -29, 1 + 2 ** -29
        self.assertEqual(b * b - 4 * c, 0.0)
        self.assertEqual(discriminant_info(1.0, b, c, DOUBLE),
                         (2 ** -29, True, 0))

    def test_no_overflow(self):
        from pyquad.discriminant import discriminant_info
        from pyquad.traits import DOUBLE

        # b² and 4ac both overflow if computed directly; D = 5.2^1200.
        a = c = 2.0 ** 600
        b = -3 * 2.0 ** 600
        root, nonneg, scale = discriminant_info(a, b, c, DOUBLE)
        self.assertTrue(nonneg)
        self.assertEqual(DOUBLE.scale2(root, scale - 600), np.sqrt(5.0))

    def test_b_dominant_threshold(self):
        from pyquad.discriminant import discriminant_info
        from pyquad.traits import DOUBLE, HALF, SINGLE

        # With a = 1 and c = 2^c_exp, 2.bE - aE - cE == P + 5 is the last
        # value using the comparable regime (scale = mid), and P + 6 is
        # the first using only b (root = 1, scale = bE).
        for traits in (HALF, SINGLE, DOUBLE):
            p_bits = traits.precision_bits
            eps = np.finfo(traits.dtype).eps
            with self.subTest(traits=traits.name):
                c_exp = (p_bits + 5) % 2
                b_exp = (p_bits + 5 + c_exp) // 2
                a, b, c = 1.0, 2.0 ** b_exp, 2.0 ** c_exp
                root, nonneg, scale = discriminant_info(a, b, c, traits)
                self.assertTrue(nonneg)
                self.assertEqual(scale, (2 * b_exp + c_exp) // 4)
                self.assertNotEqual(scale, b_exp)
                np.testing.assert_allclose(
                    float(traits.scale2(root, scale)),
                    np.sqrt(b * b - 4 * a * c), rtol=2 * eps)

                c_exp = (p_bits + 6) % 2
                b_exp = (p_bits + 6 + c_exp) // 2
                self.assertEqual(
                    discriminant_info(1.0, 2.0 ** b_exp, 2.0 ** c_exp,
                                      traits), (1, True, b_exp))

    def test_ac_dominant_threshold(self):
        from pyquad.discriminant import discriminant_info
        from pyquad.traits import DOUBLE, HALF, SINGLE

        # With a = b = 1, 2.bE - aE - cE == -P - 1 is the last value using
        # the comparable regime, and -P - 2 is the first using only a.c.
        for traits in (HALF, SINGLE, DOUBLE):
            p_bits = traits.precision_bits
            eps = np.finfo(traits.dtype).eps
            with self.subTest(traits=traits.name):
                c = 2.0 ** (p_bits + 1)
                root, nonneg, scale = discriminant_info(1.0, 1.0, c, traits)
                self.assertFalse(nonneg)
                self.assertEqual(scale, (p_bits + 1) // 4)
                np.testing.assert_allclose(
                    float(traits.scale2(root, scale)),
                    np.sqrt(4 * c - 1), rtol=2 * eps)

                c_exp = p_bits + 2
                root, nonneg, scale = discriminant_info(1.0, 1.0,
                                                        2.0 ** c_exp, traits)
                self.assertFalse(nonneg)
                if c_exp % 2:
                    self.assertEqual((root, scale),
                                     (traits.sqrt(2), (c_exp - 1) // 2 + 1))
                else:
                    self.assertEqual((root, scale), (1, c_exp // 2 + 1))
