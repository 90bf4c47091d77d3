#!/usr/bin/env python3

# Examples of finding the root of f(x) = x^2 - 2 using each method.
# Last updated: April 2023 by Eric J. Whitney

from math import sqrt
from pyroots.solve import bisect, false_position, fixed_point, secant


def f(x):
    """Root at x = sqrt(2)."""
    return x * x - 2


def g(x):
    """Example function for fixed point iteration."""
    return sqrt(2)


print(f"Root found by Bisection Method: {bisect(f, 0, 2, 0.001)}")
print(f"Root found by Secant Method: {secant(f, 1, 2, 0.001)}")
print(f"Root found by False Position Method: "
      f"{false_position(f, 0, 2, 0.001)}")
print(f"Root found by Fixed Point Method: {fixed_point(g, 1, 0.001)}")

# Show the progress of each iteration.
x_result = false_position(f, 0, 2, 1e-6, verbose=True)
print(f"\nResult x = {x_result}")
