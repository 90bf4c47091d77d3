# Written by Eric J. Whitney, April 2023.


# ======================================================================

class SolverError(RuntimeError):
    """
    Base class for failures of the scalar root finders in
    `pyroots.solve`.  Diagnostic values from the point of failure are
    attached as attributes and listed by `str()`.

    Notes
    -----
    The `flag` values used by the solvers are:

        - 1: Reached `maxits` (`NotConvergedError`).
        - 2: Secant line is horizontal, i.e. `f(x1) == f(x0)`
          (`DivergenceError`).
        - 3: Non-finite estimate produced (`DivergenceError`).

    `InvalidBracketError` leaves `flag` unset and carries the endpoints
    `x_a`, `x_b` and function values `f_a`, `f_b` instead.  Other
    attributes depend on the solver, typically the latest estimates
    along with `iterations` and `function_calls`.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  Typically `flag` != 0 as many error code systems
            assume that `flag` == 0 implies that the solution was
            successful.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidBracketError(SolverError, ValueError):
    """
    Raised before any iteration when the function values at the ends of
    a bracket do not have strictly opposite signs.
    """
    pass


class DivergenceError(SolverError):
    """
    Raised when an iterative update becomes numerically undefined, e.g.
    a zero denominator or a non-finite iterate.
    """
    pass


class NotConvergedError(DivergenceError):
    """
    Raised when the iteration limit is reached before the convergence
    tolerance is satisfied.
    """
    pass
