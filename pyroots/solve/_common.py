"""
Helpers shared by the scalar root finding functions in `pyroots.solve`.
"""

# Written by Eric J. Whitney, April 2023.

import operator
from collections import namedtuple

import numpy as np

from .exception import InvalidBracketError, NotConvergedError


# ======================================================================

RootResults = namedtuple('RootResults', ['root', 'iterations',
                                         'function_calls', 'flag'])
RootResults.__doc__ = """
Convergence information returned with the root when ``full_output=True``.

- `root`: Converged estimate.
- `iterations`: Number of iterations performed.
- `function_calls`: Number of evaluations of the user function.
- `flag`: Test that stopped the iteration, one of ``'exact'`` (function
  was exactly zero), ``'xtol'`` (bracket / iterate distance within
  tolerance) or ``'step'`` (successive estimates within tolerance).
"""


# ----------------------------------------------------------------------

def check_params(epsilon: float, maxits: int | None) -> int | None:
    """
    Validate the convergence tolerance and iteration limit common to all
    solvers, returning `maxits` as an integer (or None for no limit).
    """
    if not epsilon > 0:
        raise ValueError(f"epsilon must be > 0, got {epsilon}.")

    if maxits is None:
        return None

    maxits = operator.index(maxits)
    if maxits < 1:
        raise ValueError("maxits must be greater than 0.")
    return maxits


def opposite_sign(f1: float, f2: float) -> bool:
    """
    True if `f1` and `f2` have strictly opposite signs.  Equivalent to
    ``f1 * f2 < 0`` but compares signs directly so that the product of
    very small values cannot underflow to zero.
    """
    return np.sign(f1) * np.sign(f2) < 0


def check_bracket(f_a: float, f_b: float, x_a: float, x_b: float):
    """
    Raise `InvalidBracketError` unless `f_a` and `f_b` have strictly
    opposite signs.
    """
    if not (np.isfinite(f_a) and np.isfinite(f_b)):
        raise InvalidBracketError(
            "Function is not finite at the bracket endpoints.",
            x_a=x_a, x_b=x_b, f_a=f_a, f_b=f_b)

    if f_a == 0 or f_b == 0:
        raise InvalidBracketError(
            "Function has the same sign at both endpoints.",
            details="One of the endpoints is already a root.",
            x_a=x_a, x_b=x_b, f_a=f_a, f_b=f_b)

    if not opposite_sign(f_a, f_b):
        raise InvalidBracketError(
            "Function has the same sign at both endpoints.",
            x_a=x_a, x_b=x_b, f_a=f_a, f_b=f_b)


def check_its(name: str, its: int, maxits: int | None, **diagnostics):
    """
    Raise `NotConvergedError` if `its` has reached `maxits`.  Any
    `diagnostics` are attached to the exception.
    """
    if maxits is not None and its >= maxits:
        raise NotConvergedError(f"{name}() failed to converge:", flag=1,
                                details=f"Reached {maxits} iteration "
                                        f"limit.",
                                iterations=its, **diagnostics)


def results_select(full_output: bool, x: float, its: int, fevals: int,
                   flag: str):
    """Return `x` alone or with its `RootResults`."""
    if full_output:
        return x, RootResults(x, its, fevals, flag)
    return x
