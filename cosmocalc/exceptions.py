"""
Errors raised by the cosmology engine.
"""


class CosmologyError(Exception):
    """Base class for every failure raised by cosmocalc."""


class DomainError(CosmologyError, ValueError):
    """
    A value fell outside the mathematical domain of an expression: a negative
    square-root radicand, a non-positive logarithm argument or a division by zero.
    """


class IntegrationError(CosmologyError, ArithmeticError):
    """
    Adaptive quadrature reached its minimum step width before meeting the tolerance.
    """

    def __init__(self, message: str, lower: float, upper: float, min_h: float, tolerance: float):
        super().__init__(message)
        self.lower = lower
        self.upper = upper
        self.min_h = min_h
        self.tolerance = tolerance

    def __reduce__(self):
        return (
            self.__class__,
            (str(self), self.lower, self.upper, self.min_h, self.tolerance),
        )


class InvalidArgument(CosmologyError, ValueError):
    """An inverse target lies outside the range the forward function can attain."""


class RootFindingError(CosmologyError):
    """Brent's method could not produce a root."""


class RootNotBracketed(RootFindingError):
    """The search bracket shows no sign change."""


class RootNotConverged(RootFindingError):
    """The iteration budget ran out before the tolerance was met."""


class DegradedResultWarning(UserWarning):
    """A fallback value was returned in place of a solved root."""
