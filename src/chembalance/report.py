"""Human-readable reporting utilities.

This module turns balancing results into readable console / Markdown text:

- balanced equations ("2 H2 + O2 -> 2 H2O"),
- composition and reduced matrices as aligned tables, and
- a step-by-step report of the balancing pipeline.

Nothing here is required for balancing itself; it is strictly presentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple, Union

import sympy as sp

from .balancer import EquationBalancer
from .errors import BalanceError


def _term(compound: str, coefficient: int) -> str:
    return compound if coefficient == 1 else f"{coefficient} {compound}"


def format_equation(
    coefficients: Union[Mapping[str, int], Sequence[Tuple[str, int]]],
    n_reactants: int,
    *,
    arrow: str = "->",
) -> str:
    """Format a balanced equation; a coefficient of 1 is omitted.

    `coefficients` holds (compound, coefficient) pairs in column order, either
    as a mapping or as a sequence of pairs. A mapping from `balance` collapses
    repeated formulas, so for an equation like H2 -> H2 pass the pairs
    instead; both sides must keep at least one term.
    """
    pairs = list(coefficients.items()) if isinstance(coefficients, Mapping) else list(coefficients)
    if not 1 <= n_reactants < len(pairs):
        raise ValueError(
            f"n_reactants must leave at least one term on each side of {len(pairs)}; got {n_reactants}"
        )
    lhs = " + ".join(_term(c, int(k)) for c, k in pairs[:n_reactants])
    rhs = " + ".join(_term(c, int(k)) for c, k in pairs[n_reactants:])
    return f"{lhs} {arrow} {rhs}"


def format_matrix(matrix: sp.Matrix, row_labels: Sequence[str], col_labels: Sequence[str]) -> List[str]:
    """Format a matrix as right-aligned text rows with labels."""
    M = sp.Matrix(matrix)
    if M.rows != len(row_labels) or M.cols != len(col_labels):
        raise ValueError(f"labels do not match matrix shape {M.shape}")

    cells = [[sp.sstr(M[i, j]) for j in range(M.cols)] for i in range(M.rows)]
    widths = [
        max([len(col_labels[j])] + [len(cells[i][j]) for i in range(M.rows)])
        for j in range(M.cols)
    ]
    label_w = max([len(r) for r in row_labels] + [0])

    lines = [" " * label_w + "  " + "  ".join(c.rjust(w) for c, w in zip(col_labels, widths))]
    for label, row in zip(row_labels, cells):
        lines.append(label.ljust(label_w) + "  " + "  ".join(c.rjust(w) for c, w in zip(row, widths)))
    return lines


@dataclass
class BalanceReportOptions:
    """Tunable knobs for report verbosity."""

    include_matrices: bool = True
    strict: bool = True
    places: Optional[int] = None
    arrow: str = "->"


def format_balance_report(balancer: EquationBalancer, *, options: Optional[BalanceReportOptions] = None) -> str:
    """Format the balancing pipeline of one equation as a Markdown-ish report."""
    opt = options or BalanceReportOptions()
    eq = balancer.equation
    compounds = list(balancer.compounds)
    atoms = balancer.atoms()

    lines: List[str] = []
    lines.append(f"### {eq.to_string(opt.arrow)}")
    lines.append("Atoms: " + ", ".join(atoms))

    if opt.include_matrices:
        reduced, pivots = balancer.reduced()
        lines.append("Composition matrix:")
        lines.extend("  " + s for s in format_matrix(balancer.composition_matrix(), atoms, compounds))
        lines.append("Reduced row echelon form:")
        lines.extend("  " + s for s in format_matrix(reduced, atoms, compounds))
        lines.append(f"Pivot columns: {list(pivots)}")

    lines.append(f"Nullity: {balancer.nullity()}")

    try:
        ints = balancer.coefficients(strict=opt.strict, places=opt.places)
    except BalanceError as exc:
        lines.append(f"Not balanced: {exc}")
    else:
        pairs = list(zip(compounds, ints))
        lines.append("Balanced: " + format_equation(pairs, eq.n_reactants, arrow=opt.arrow))

    return "\n".join(lines) + "\n"
