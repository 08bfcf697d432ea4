"""exceptions raised by glicko_period"""


class Glicko2Error(Exception):
    """Base class for all errors raised while building or calculating a rating period."""


class InvalidConfiguration(Glicko2Error, ValueError):
    """
    Raised when an input violates the mathematical preconditions of Glicko-2:
    a non-positive tau, deviation or volatility, a self-match, or an unknown outcome.
    """


class NumericalNonConvergence(Glicko2Error, ArithmeticError):
    """
    Raised when an update cannot be computed numerically, either because the volatility
    root-finder ran out of iterations or because a player's estimated variance is degenerate.

    When raised by RatingPeriod.calculate, failures maps each failed player to its own error.
    """

    def __init__(self, message, failures=None):
        super().__init__(message)
        self.failures = failures if failures is not None else {}
