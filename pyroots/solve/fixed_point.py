from collections.abc import Callable

import numpy as np

from ._common import check_its, check_params, results_select
from .exception import DivergenceError

# Written by Eric J. Whitney, April 2023.


# ======================================================================

def fixed_point(func: Callable[[float], float], x0: float, epsilon: float,
                *, maxits: int | None = 100, full_output: bool = False,
                verbose: bool = False):
    r"""
    Find the fixed point of a function :math:`x = g(x)` by direct
    iteration :math:`x' = g(x)`, starting from `x0`.

    Convergence depends entirely on :math:`g` being a contraction near
    the fixed point :math:`x^*`, i.e. :math:`|g'(x^*)| < 1`.  This is not
    checked; the caller is responsible for supplying a suitable :math:`g`.

    Examples
    --------
    A fixed-point iteration of a scalar function:

        >>> def g(x_): return (x_ + 10) ** 0.25
        >>> x = fixed_point(g, x0=-3, epsilon=1e-6, verbose=True)
        Fixed Point Iteration:
        ... Iteration 1: x =  1.846558
        ... Iteration 2: x =  1.855231
        ... Iteration 3: x =  1.855571
        ... Iteration 4: x =  1.855584
        ... Iteration 5: x =  1.855585
        ... Converged.

    Parameters
    ----------
    func : Callable[[float], float]
        Function :math:`g(x)` that returns a better estimate of `x`.
    x0 : float
        Starting value for `x`.
    epsilon : float
        Stop when ``abs(x' - x) <= epsilon``.  Must be > 0.
    maxits : int or None, default = 100
        Iteration limit.  If None there is no limit and a non-contracting
        `func` may iterate forever.
    full_output : bool, default = False
        If True, return ``(x, RootResults)``.
    verbose : bool, default = False
        If True, print iterations.

    Returns
    -------
    result : float
        Converged `x` value.

    Raises
    ------
    DivergenceError
        If an iterate is not finite.
    NotConvergedError
        If `maxits` is exceeded.
    """
    maxits = check_params(epsilon, maxits)
    if verbose:
        print(f"Fixed Point Iteration:")

    x1 = func(x0)
    fevals, its = 1, 0

    while True:
        if not np.isfinite(x1):
            raise DivergenceError("fixed_point() failed to converge:",
                                  flag=3, details="Non-finite estimate.",
                                  x0=x0, x1=x1, iterations=its,
                                  function_calls=fevals)

        if abs(x1 - x0) <= epsilon:
            if verbose:
                print(f"... Converged.")
            return results_select(full_output, x1, its, fevals, 'xtol')

        check_its('fixed_point', its, maxits, x0=x0, x1=x1,
                  function_calls=fevals)

        x0 = x1
        x1 = func(x0)
        fevals += 1
        its += 1

        if verbose:
            print(f"... Iteration {its}: x = {x1:9.6f}")
