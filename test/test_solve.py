import math
from unittest import TestCase


# ======================================================================

def f(x):
    return x * x - 2


class TestRootFinding(TestCase):
    """Check each method against f(x) = x**2 - 2."""

    def test_methods_agree(self):
        from pyroots.solve import bisect, false_position, fixed_point, secant

        exact = math.sqrt(2)
        self.assertAlmostEqual(bisect(f, 0, 2, 0.001), exact, delta=0.001)
        self.assertAlmostEqual(secant(f, 1, 2, 0.001), exact, delta=0.001)
        self.assertAlmostEqual(false_position(f, 0, 2, 0.001), exact,
                               delta=0.001)
        self.assertEqual(fixed_point(lambda x: math.sqrt(2), 1, 0.001),
                         exact)

    def test_unbounded_iterations(self):
        from pyroots.solve import bisect, secant

        # maxits=None removes the iteration limit.
        self.assertAlmostEqual(bisect(f, 0, 2, 1e-9, maxits=None),
                               math.sqrt(2), delta=1e-9)
        self.assertAlmostEqual(secant(f, 1, 2, 1e-9, maxits=None),
                               math.sqrt(2), delta=1e-9)

    def test_verbose(self):
        import contextlib
        import io
        from pyroots.solve import bisect

        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            bisect(f, 0, 2, 0.25, verbose=True)
        lines = buf.getvalue().splitlines()
        self.assertEqual(lines[0], "Bisection Root:")
        self.assertTrue(lines[1].startswith("... Iteration 1:"))
        self.assertEqual(lines[-1], "... Converged.")


class TestSolverError(TestCase):
    def test_error_details(self):
        from pyroots.solve import (bisect, DivergenceError,
                                   InvalidBracketError, NotConvergedError,
                                   SolverError)

        with self.assertRaises(InvalidBracketError) as cm:
            bisect(f, 2, 3, 0.001)
        err = cm.exception
        self.assertEqual((err.x_a, err.x_b, err.f_a, err.f_b),
                         (2, 3, 2, 7))
        self.assertIn("f_b -> 7", str(err))

        # Exception hierarchy.
        self.assertTrue(issubclass(SolverError, RuntimeError))
        self.assertTrue(issubclass(InvalidBracketError, ValueError))
        self.assertTrue(issubclass(NotConvergedError, DivergenceError))
