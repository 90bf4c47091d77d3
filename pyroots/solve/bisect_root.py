from collections.abc import Callable

from ._common import (check_bracket, check_its, check_params,
                      opposite_sign, results_select)

# Written by Eric J. Whitney, April 2023.


# ======================================================================

def bisect(func: Callable[[float], float], x_a: float, x_b: float,
           epsilon: float, *, maxits: int | None = 100,
           full_output: bool = False, verbose: bool = False):
    # noinspection PyUnresolvedReferences
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in [x_a,
    x_b]` by the bisection method.  For bisection to work :math:`f(x)` must
    change sign across the interval, i.e. ``func(x_a)`` and ``func(x_b)``
    must return values of opposite sign.  Each iteration halves the
    interval, so convergence is linear but guaranteed for continuous
    :math:`f(x)`.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> bisect(f, 1, 2, 1e-5)  # This will take 16 iterations.
    1.6180343627929688
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisect(f, 0, 1, 1e-5)  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x_a, x_b : float
        Each end of the search interval, in any order.
    epsilon : float
        Stop when the half-width of the interval :math:`|x_b - x_a| / 2
        \leq \epsilon`.  Must be > 0.
    maxits : int or None, default = 100
        Maximum number of iterations.  If None there is no limit and the
        search may not terminate if `epsilon` is below the floating
        point spacing near the root.
    full_output : bool, default = False
        If True, return ``(x, RootResults)``.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x_m : float
        Midpoint of the final interval, i.e. :math:`f(x_m) \approx 0`.

    Raises
    ------
    InvalidBracketError
        If ``func(x_a)`` and ``func(x_b)`` do not have opposite sign.
    NotConvergedError
        If `maxits` is reached before a solution is found.
    """
    maxits = check_params(epsilon, maxits)
    if verbose:
        print(f"Bisection Root:")

    x_a_next, x_b_next = x_a, x_b
    f_a_next, f_b_next = func(x_a_next), func(x_b_next)
    fevals = 2
    check_bracket(f_a_next, f_b_next, x_a, x_b)

    it = 0
    while True:
        # Compute midpoint.
        x_m = (x_a_next + x_b_next) / 2
        if abs(x_b_next - x_a_next) / 2 <= epsilon:
            if verbose:
                print(f"... Converged.")
            return results_select(full_output, x_m, it, fevals, 'xtol')

        check_its('bisect', it, maxits, x_a=x_a_next, x_b=x_b_next,
                  function_calls=fevals)

        f_m = func(x_m)
        fevals += 1
        it += 1

        if verbose:
            print(f"... Iteration {it}: x = [{x_a_next}, {x_m}, "
                  f"{x_b_next}], f = [{f_a_next}, {f_m}, {f_b_next}]")

        if f_m == 0.0:
            if verbose:
                print(f"... Exact root.")
            return results_select(full_output, x_m, it, fevals, 'exact')

        # Check which side root is on, narrow interval.
        if opposite_sign(f_m, f_a_next):
            x_b_next, f_b_next = x_m, f_m
        else:
            x_a_next, f_a_next = x_m, f_m
