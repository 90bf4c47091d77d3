import math
from unittest import TestCase

from .scalar_tst_functions import f, f_exact, f_golden, f_golden_exact


# ======================================================================

class TestBisect(TestCase):
    def test_bisect(self):
        from pyroots.solve import bisect

        # Check normal operation.
        x = bisect(f, 0.0, 2.0, 0.001)
        self.assertGreaterEqual(x, 1.4140625)
        self.assertLessEqual(x, 1.4150390625)
        self.assertAlmostEqual(x, f_exact, delta=0.001)

        x = bisect(f_golden, 1.0, 2.0, 1e-12)
        self.assertAlmostEqual(x, f_golden_exact, delta=1e-12)

    def test_bisect_unordered(self):
        from pyroots.solve import bisect

        self.assertEqual(bisect(f, 2.0, 0.0, 0.001),
                         bisect(f, 0.0, 2.0, 0.001))

    def test_bisect_exact_root(self):
        from pyroots.solve import bisect

        def h(x):
            return (2 * x - 1) * (x - 3)

        x, info = bisect(h, 0.0, 1.0, 1e-9, full_output=True)
        self.assertEqual(x, 0.5)
        self.assertEqual(info.iterations, 1)
        self.assertEqual(info.flag, 'exact')

    def test_bisect_tolerance(self):
        from pyroots.solve import bisect

        # Error is bounded by the final half-width.
        for eps in (1e-2, 1e-4, 1e-6, 1e-8, 1e-10):
            x = bisect(f, 0.0, 2.0, eps)
            self.assertLessEqual(abs(x - f_exact), eps)

    def test_bisect_invalid_bracket(self):
        from pyroots.solve import bisect, InvalidBracketError

        calls = []

        def h(x):
            calls.append(x)
            return f(x)

        # Same sign at both ends: fails before any iteration.
        with self.assertRaises(InvalidBracketError):
            bisect(h, 2.0, 3.0, 0.001)
        self.assertEqual(calls, [2.0, 3.0])

        # Also a ValueError.
        with self.assertRaises(ValueError):
            bisect(f, -3.0, 3.0, 0.001)

        # Non-finite function value at an endpoint.
        with self.assertRaises(InvalidBracketError):
            bisect(lambda x: math.inf if x < 0 else x - 1, -1.0, 2.0, 0.001)

        # Root at an endpoint.
        with self.assertRaises(InvalidBracketError):
            bisect(lambda x: x, 0.0, 1.0, 0.001)

    def test_bisect_not_converged(self):
        from pyroots.solve import bisect, NotConvergedError, SolverError

        # Check failure to converge is flagged.
        with self.assertRaises(NotConvergedError) as cm:
            bisect(f_golden, 1.0, 2.0, 1e-15, maxits=10)
        self.assertEqual(cm.exception.flag, 1)
        self.assertEqual(cm.exception.iterations, 10)
        self.assertIsInstance(cm.exception, SolverError)

    def test_bisect_bad_params(self):
        from pyroots.solve import bisect

        with self.assertRaises(ValueError):
            bisect(f, 0.0, 2.0, 0.0)
        with self.assertRaises(ValueError):
            bisect(f, 0.0, 2.0, 0.001, maxits=0)
