"""
==================================
Solvers (:mod:`pyroots.solve`)
==================================

.. currentmodule:: pyroots.solve

Classical iterative methods for finding a root of a scalar function
:math:`f(x) = 0`, or a fixed point :math:`x = g(x)`.  Each function is
independent and keeps no state between calls.

Functions
---------

.. autosummary::
    :toctree:

    bisect
    false_position
    fixed_point
    secant

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    InvalidBracketError
    DivergenceError
    NotConvergedError

"""

from ._common import RootResults
from .bisect_root import bisect
from .exception import (SolverError, InvalidBracketError, DivergenceError,
                        NotConvergedError)
from .false_position import false_position
from .fixed_point import fixed_point
from .secant_root import secant
