"""Top-level package API for chembalance.

This package balances chemical equations exactly: it builds the signed
atom-composition matrix of the compounds, reduces it to row echelon form over
the rationals (SymPy) and rescales the null space vector to the smallest
positive integer coefficients.

Public API:
- balance, balance_equation, is_balanced
- ChemicalEquation, EquationBalancer
- Formula parsing: parse_formula, atoms_in, count_atoms
- Linear algebra: rref, nullity, derive_coefficients, scale_to_integers
- Reporting helpers and built-in example equations
"""

from .errors import BalanceError, FormulaError, UnbalanceableError, UnderdeterminedError
from .formula import atoms_in, count_atoms, parse_formula
from .composition import atom_universe, composition_matrix
from .linalg import derive_coefficients, nullity, nullspace_vector, rref, scale_to_integers
from .equation import ChemicalEquation
from .balancer import EquationBalancer, balance, balance_equation, is_balanced
from .report import (
    BalanceReportOptions,
    format_balance_report,
    format_equation,
    format_matrix,
)
from .examples import (
    calcium_phosphate_precipitation,
    iron_oxidation,
    list_available_equations,
    neutralization,
    photosynthesis,
    propane_combustion,
    water_synthesis,
)

__version__ = "1.0.0"

__all__ = [
    "BalanceError",
    "FormulaError",
    "UnbalanceableError",
    "UnderdeterminedError",
    "parse_formula",
    "atoms_in",
    "count_atoms",
    "atom_universe",
    "composition_matrix",
    "rref",
    "nullity",
    "nullspace_vector",
    "derive_coefficients",
    "scale_to_integers",
    "ChemicalEquation",
    "EquationBalancer",
    "balance",
    "balance_equation",
    "is_balanced",
    "BalanceReportOptions",
    "format_balance_report",
    "format_equation",
    "format_matrix",
    "water_synthesis",
    "iron_oxidation",
    "neutralization",
    "propane_combustion",
    "photosynthesis",
    "calcium_phosphate_precipitation",
    "list_available_equations",
]
