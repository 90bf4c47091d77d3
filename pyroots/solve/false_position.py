from collections.abc import Callable

import numpy as np

from ._common import (check_bracket, check_its, check_params,
                      opposite_sign, results_select)

# Written by Eric J. Whitney, April 2023.


# ======================================================================

def false_position(func: Callable[[float], float], x_a: float,
                   x_b: float, epsilon: float, *,
                   maxits: int | None = 100, full_output: bool = False,
                   verbose: bool = False):
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in [x_a,
    x_b]` by the false position method (*regula falsi*).  As for
    bisection, ``func(x_a)`` and ``func(x_b)`` must have opposite sign.
    Instead of the midpoint, each step uses the :math:`x`-intercept of
    the chord joining the ends of the interval:

    .. math:: x_c = x_a - f(x_a) \frac{x_b - x_a}{f(x_b) - f(x_a)}

    The interval is then narrowed to the side containing the sign change.

    Notes
    -----
    - This is usually faster than bisection for well-behaved functions.
    - For strongly convex or concave functions one end of the interval
      can remain fixed for many iterations, so the interval width may
      never reach `epsilon`.  When successive estimates :math:`x_c` move
      by no more than `epsilon`, `func` is also evaluated at a point
      `epsilon` beyond :math:`x_c`.  If the sign changes the root is
      within `epsilon` and iteration stops, otherwise the stalled end of
      the interval is moved to that point and iteration continues.

    Examples
    --------
    >>> f = lambda x: x**2 - 2
    >>> round(false_position(f, 0, 2, 1e-3), 3)
    1.414

    Parameters
    ----------
    func : Callable[[float], float]
        Function which we are searching for root.
    x_a, x_b : float
        Each end of the search interval, in any order.
    epsilon : float
        Stop when :math:`|x_b - x_a| \leq \epsilon`, or when the root is
        confirmed to lie within `epsilon` of the estimate.  Must be > 0.
    maxits : int or None, default = 100
        Maximum number of iterations.  If None there is no limit.
    full_output : bool, default = False
        If True, return ``(x, RootResults)``.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x_c : float
        Best estimate of root found i.e. :math:`f(x_c) \approx 0`.

    Raises
    ------
    InvalidBracketError
        If ``func(x_a)`` and ``func(x_b)`` do not have opposite sign.
    NotConvergedError
        If `maxits` is reached before a solution is found.
    """
    maxits = check_params(epsilon, maxits)
    if verbose:
        print(f"False Position Root:")

    x_a_next, x_b_next = x_a, x_b
    f_a_next, f_b_next = func(x_a_next), func(x_b_next)
    fevals = 2
    check_bracket(f_a_next, f_b_next, x_a, x_b)

    it, x_c = 0, None
    while abs(x_b_next - x_a_next) > epsilon:
        check_its('false_position', it, maxits, x_a=x_a_next,
                  x_b=x_b_next, x_c=x_c, function_calls=fevals)

        x_c_prev = x_c
        x_c = x_a_next - f_a_next * ((x_b_next - x_a_next) /
                                     (f_b_next - f_a_next))
        f_c = func(x_c)
        fevals += 1
        it += 1

        if verbose:
            print(f"... Iteration {it}: x = [{x_a_next}, {x_c}, "
                  f"{x_b_next}], f = [{f_a_next}, {f_c}, {f_b_next}]")

        if f_c == 0.0:
            if verbose:
                print(f"... Exact root.")
            return results_select(full_output, x_c, it, fevals, 'exact')

        # Check which side root is on, narrow interval.
        if opposite_sign(f_c, f_a_next):
            x_b_next, f_b_next = x_c, f_c
            x_far = x_a_next
        else:
            x_a_next, f_a_next = x_c, f_c
            x_far = x_b_next

        if (x_c_prev is None or abs(x_c - x_c_prev) > epsilon or
                abs(x_far - x_c) <= epsilon):
            continue

        # Estimates have stopped moving.  Step `epsilon` towards the far
        # end; a sign change there means the root is within `epsilon`.
        x_p = x_c + np.copysign(epsilon, x_far - x_c)
        f_p = func(x_p)
        fevals += 1

        if verbose:
            print(f"... Step check: x = {x_p}, f = {f_p}")

        if f_p == 0.0:
            if verbose:
                print(f"... Exact root.")
            return results_select(full_output, x_p, it, fevals, 'exact')

        if opposite_sign(f_p, f_c):
            if verbose:
                print(f"... Converged (step).")
            return results_select(full_output, x_c, it, fevals, 'step')

        # Root is beyond the step, move the stalled end up to it.
        if x_b_next == x_c:
            x_b_next, f_b_next = x_p, f_p
        else:
            x_a_next, f_a_next = x_p, f_p
        x_c = x_p

    if x_c is None:
        # Interval was already within tolerance.
        x_c = (x_a_next + x_b_next) / 2

    if verbose:
        print(f"... Converged.")
    return results_select(full_output, x_c, it, fevals, 'xtol')
