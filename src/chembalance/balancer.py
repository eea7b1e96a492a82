from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

import sympy as sp

from .composition import atom_universe, composition_matrix
from .equation import ChemicalEquation
from .errors import UnbalanceableError, UnderdeterminedError
from .linalg import derive_coefficients, nullspace_vector, rref, scale_to_integers


logger = logging.getLogger(__name__)


@dataclass
class EquationBalancer:
    """Balance a chemical equation through the exact linear-algebra pipeline.

    The stages are exposed individually:

        atoms() -> composition_matrix() -> reduced() -> raw_coefficients()
        -> coefficients() -> balance()

    Parameters
    ----------
    equation:
        The unbalanced equation.

    Notes
    -----
    A balanced equation corresponds to a positive vector in the null space of
    the composition matrix. With ``strict=True`` the null space must be
    one-dimensional and spanned by a vector whose entries are all nonzero and
    of one sign; anything else raises a `BalanceError` subclass. With
    ``strict=False`` the heuristic coefficient rules are applied whatever the
    nullity, and the result is best-effort.
    """

    equation: ChemicalEquation

    @property
    def compounds(self) -> Tuple[str, ...]:
        return self.equation.compounds

    # Formulas are parsed and the matrix reduced once per balancer; the
    # public accessors hand out copies.
    @cached_property
    def _atoms(self) -> List[str]:
        return atom_universe(self.compounds)

    @cached_property
    def _composition(self) -> sp.Matrix:
        return composition_matrix(self.compounds, self.equation.n_reactants, atoms=self._atoms)

    @cached_property
    def _reduced(self) -> Tuple[sp.Matrix, Tuple[int, ...]]:
        return rref(self._composition)

    def atoms(self) -> List[str]:
        return list(self._atoms)

    def composition_matrix(self) -> sp.Matrix:
        return self._composition.copy()

    def reduced(self) -> Tuple[sp.Matrix, Tuple[int, ...]]:
        """Return (RREF of the composition matrix, pivot columns)."""
        reduced, pivots = self._reduced
        return reduced.copy(), pivots

    def nullity(self) -> int:
        _reduced, pivots = self._reduced
        return len(self.compounds) - len(pivots)

    def raw_coefficients(self, strict: bool = True) -> List[sp.Rational]:
        """Return one rational coefficient per compound, before integer scaling."""
        reduced, pivots = self._reduced
        k = len(self.compounds) - len(pivots)
        logger.debug("Reduced matrix has rank %d and nullity %d", len(pivots), k)

        if not strict:
            if k != 1:
                logger.warning(
                    "Equation '%s' has nullity %d; coefficients are a best-effort guess",
                    self.equation.to_string(),
                    k,
                )
            return derive_coefficients(reduced)

        if k == 0:
            raise UnbalanceableError(f"'{self.equation.to_string()}' cannot be balanced: only the trivial solution exists")
        if k > 1:
            raise UnderdeterminedError(
                f"'{self.equation.to_string()}' has {k} independent solutions; "
                "coefficients are not determined up to scale",
                nullity=k,
            )

        x = nullspace_vector(reduced, pivots)

        absent = [c for c, v in zip(self.compounds, x) if v == 0]
        if absent:
            raise UnbalanceableError(
                f"'{self.equation.to_string()}' cannot be balanced: "
                f"{', '.join(absent)} cannot take part in the reaction"
            )
        if any(v > 0 for v in x) and any(v < 0 for v in x):
            raise UnbalanceableError(
                f"'{self.equation.to_string()}' cannot be balanced with positive coefficients"
            )
        return x

    def coefficients(self, strict: bool = True, places: Optional[int] = None) -> List[int]:
        """Return the minimal positive integer coefficients, in compound order."""
        raw = self.raw_coefficients(strict=strict)
        ints = scale_to_integers(raw, places=places)

        if strict:
            residual = self._composition * sp.Matrix(ints)
            if any(v != 0 for v in residual):
                raise UnbalanceableError(
                    f"Coefficients {ints} do not balance '{self.equation.to_string()}'"
                )
        return ints

    def balance(self, strict: bool = True, places: Optional[int] = None) -> Dict[str, int]:
        """Return an ordered mapping compound -> coefficient.

        A formula listed more than once appears once, at its first position,
        with the coefficient of its last occurrence.
        """
        ints = self.coefficients(strict=strict, places=places)
        result: Dict[str, int] = {}
        for compound, c in zip(self.compounds, ints):
            result[compound] = c
        return result


def balance(
    reactants: Sequence[str],
    products: Sequence[str],
    *,
    strict: bool = True,
    places: Optional[int] = None,
) -> Dict[str, int]:
    """Balance a chemical equation.

    For ``balance(["H2", "O2"], ["H2O"])`` the result is
    ``{"H2": 2, "O2": 1, "H2O": 2}``, i.e. 2 H2 + O2 -> 2 H2O.

    Parameters
    ----------
    reactants, products:
        Formula strings.
    strict:
        Raise `UnbalanceableError` / `UnderdeterminedError` instead of
        returning a guess when the equation has no unique balancing.
    places:
        If given, rescale with decimal rounding to this many places instead
        of exact rational reconstruction.

    Raises
    ------
    FormulaError
        If a formula is malformed.
    BalanceError
        If the equation cannot be balanced (see `strict`).
    """
    equation = ChemicalEquation.from_sides(reactants, products)
    return EquationBalancer(equation).balance(strict=strict, places=places)


def balance_equation(text: str, *, strict: bool = True, places: Optional[int] = None) -> Dict[str, int]:
    """Parse an equation string like 'Fe + O2 -> Fe2O3' and balance it."""
    equation = ChemicalEquation.from_string(text)
    return EquationBalancer(equation).balance(strict=strict, places=places)


def is_balanced(
    reactants: Sequence[str],
    products: Sequence[str],
    coefficients: Union[Sequence[int], Mapping[str, int]],
) -> bool:
    """Check atom conservation for given positive integer coefficients.

    `coefficients` is either aligned with ``reactants + products`` or a
    mapping from formula to coefficient. The check is exact; any value that
    is not a positive integer (e.g. 2.9 or 0) makes the result False.
    """
    compounds = list(reactants) + list(products)
    if isinstance(coefficients, Mapping):
        values = [coefficients[c] for c in compounds]
    else:
        values = list(coefficients)
    if len(values) != len(compounds):
        raise ValueError(f"Expected {len(compounds)} coefficients, got {len(values)}")

    c = [sp.sympify(v) for v in values]
    if not all(v.is_Integer and v > 0 for v in c):
        return False
    residual = composition_matrix(compounds, len(reactants)) * sp.Matrix(c)
    return all(v == 0 for v in residual)
