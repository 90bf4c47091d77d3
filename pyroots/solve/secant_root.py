from collections.abc import Callable

import numpy as np

from ._common import check_its, check_params, results_select
from .exception import DivergenceError

# Written by Eric J. Whitney, April 2023.


# ======================================================================

def secant(func: Callable[[float], float], x0: float, x1: float,
           epsilon: float, *, maxits: int | None = 100,
           full_output: bool = False, verbose: bool = False):
    r"""
    Approximate solution of :math:`f(x) = 0` by the secant method,
    starting from two initial estimates `x0` and `x1`.  Each step
    replaces the oldest point with the :math:`x`-intercept of the line
    through the last two points:

    .. math:: x_2 = x_1 - f(x_1) \frac{x_1 - x_0}{f(x_1) - f(x_0)}

    Convergence is superlinear (order :math:`\approx 1.618`) near a
    simple root, however there is no bracket and so no guarantee of
    convergence from arbitrary starting points.

    Examples
    --------
    >>> f = lambda x: x**2 - 2
    >>> round(secant(f, 1, 2, 1e-3), 5)
    1.41421

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x0, x1 : float
        Initial estimates of the root.
    epsilon : float
        Stop when successive estimates satisfy :math:`|x_1 - x_0| \leq
        \epsilon`.  Must be > 0.
    maxits : int or None, default = 100
        Maximum number of iterations.  If None there is no limit.
    full_output : bool, default = False
        If True, return ``(x, RootResults)``.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x : float
        Best estimate of root found i.e. :math:`f(x) \approx 0`.

    Raises
    ------
    DivergenceError
        If the secant line becomes horizontal (:math:`f(x_1) = f(x_0)`,
        which includes ``x0 == x1``) or a non-finite estimate is produced.
    NotConvergedError
        If `maxits` is reached before a solution is found.
    """
    maxits = check_params(epsilon, maxits)
    if verbose:
        print(f"Secant Root:")

    f0, f1 = func(x0), func(x1)
    fevals, it = 2, 0

    while True:
        check_its('secant', it, maxits, x0=x0, x1=x1,
                  function_calls=fevals)

        if f1 == f0:
            raise DivergenceError("secant() failed to converge:", flag=2,
                                  details="Secant line is horizontal, "
                                          "f(x1) == f(x0).",
                                  x0=x0, x1=x1, f0=f0, f1=f1,
                                  iterations=it, function_calls=fevals)

        x2 = x1 - f1 * (x1 - x0) / (f1 - f0)
        it += 1

        if not np.isfinite(x2):
            raise DivergenceError("secant() failed to converge:", flag=3,
                                  details="Non-finite estimate.",
                                  x0=x0, x1=x1, x2=x2, f0=f0, f1=f1,
                                  iterations=it, function_calls=fevals)

        if verbose:
            print(f"... Iteration {it}: x = {x2}")

        x0, f0 = x1, f1
        x1 = x2
        if abs(x1 - x0) <= epsilon:
            if verbose:
                print(f"... Converged.")
            return results_select(full_output, x1, it, fevals, 'xtol')

        f1 = func(x1)
        fevals += 1
