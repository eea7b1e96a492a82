from __future__ import annotations


class FormulaError(ValueError):
    """Raised when a compound formula cannot be parsed."""


class BalanceError(ValueError):
    """Base class for failures of the balancing pipeline."""


class UnbalanceableError(BalanceError):
    """The equation has no solution in positive integer coefficients."""


class UnderdeterminedError(BalanceError):
    """The equation has more than one independent solution.

    Parameters
    ----------
    nullity:
        Dimension of the null space of the composition matrix.
    """

    def __init__(self, message: str, nullity: int) -> None:
        super().__init__(message)
        self.nullity = int(nullity)
