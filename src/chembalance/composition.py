from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import sympy as sp

from .formula import atoms_in, parse_formula


logger = logging.getLogger(__name__)


def atom_universe(compounds: Sequence[str]) -> List[str]:
    """Return the distinct element symbols of all compounds.

    Order is first occurrence across `compounds`; e.g.
    ["H2", "O2", "Fe", "NaOH"] gives ["H", "O", "Fe", "Na"].
    """
    atoms: Dict[str, None] = {}
    for compound in compounds:
        atoms.update(dict.fromkeys(atoms_in(compound)))
    return list(atoms)


def _check_n_reactants(compounds: Sequence[str], n_reactants: int) -> None:
    if not 0 <= n_reactants <= len(compounds):
        raise ValueError(f"n_reactants must be in [0, {len(compounds)}]; got {n_reactants}")


def composition_matrix(
    compounds: Sequence[str],
    n_reactants: int,
    atoms: Optional[Sequence[str]] = None,
) -> sp.Matrix:
    """Return the signed chemical-composition matrix.

    Rows are atoms, columns are compounds (reactants first). Entries are the
    atom counts, negated for product columns, so that a coefficient vector c
    balances the equation iff A*c = 0.

    For ["H2", "O2", "H2O"] with two reactants:

            H2  O2  H2O
        H    2   0   -2
        O    0   2   -1

    Parameters
    ----------
    compounds:
        Formula strings, reactants followed by products.
    n_reactants:
        Number of leading entries of `compounds` that are reactants.
    atoms:
        Optional explicit row order; defaults to `atom_universe(compounds)`.
    """
    _check_n_reactants(compounds, n_reactants)
    if atoms is None:
        atoms = atom_universe(compounds)

    parsed = [parse_formula(c) for c in compounds]
    rows = []
    for atom in atoms:
        row = []
        for j, counts in enumerate(parsed):
            count = sp.Integer(counts.get(atom, 0))
            row.append(count if j < n_reactants else -count)
        rows.append(row)

    logger.debug("Composition matrix: %d atoms x %d compounds", len(atoms), len(compounds))
    if not rows:
        return sp.Matrix.zeros(0, len(compounds))
    return sp.Matrix(rows)

