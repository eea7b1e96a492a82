"""Exact linear algebra for equation balancing.

All matrix work happens over SymPy rationals so that the zero tests used for
pivot selection are exact. Floats handed in are converted to rationals first.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import sympy as sp

from .errors import BalanceError


logger = logging.getLogger(__name__)


def _to_rational(x) -> sp.Rational:
    if isinstance(x, sp.Rational):
        return x
    value = sp.nsimplify(x, rational=True)
    if not isinstance(value, sp.Rational):
        raise TypeError(f"Expected a rational number, got {x!r}")
    return value


def rref(matrix) -> Tuple[sp.Matrix, Tuple[int, ...]]:
    """Reduce a matrix to reduced row echelon form by Gauss-Jordan elimination.

    The input is never modified; elimination runs on a rational copy.

    Returns
    -------
    (reduced, pivots)
        `reduced` has the shape of the input; `pivots` are the pivot column
        indices in row order.

    Notes
    -----
    Rank-deficient and inconsistent systems are not errors: the elimination
    just skips columns without a pivot and leaves zero rows at the bottom.
    """
    M = sp.Matrix(matrix).applyfunc(_to_rational)
    rows, cols = M.shape
    pivots: List[int] = []

    r = 0
    lead = 0
    while r < rows and lead < cols:
        # Find a row at or below r with a nonzero entry in the lead column.
        i = r
        while i < rows and M[i, lead] == 0:
            i += 1
        if i == rows:
            lead += 1
            continue

        if i != r:
            M.row_swap(i, r)

        pivot = M[r, lead]
        M[r, :] = M[r, :] / pivot

        for I in range(rows):
            if I == r:
                continue
            factor = M[I, lead]
            if factor != 0:
                M[I, :] = M[I, :] - factor * M[r, :]

        pivots.append(lead)
        r += 1
        lead += 1

    return M, tuple(pivots)


def rank(matrix) -> int:
    return len(rref(matrix)[1])


def nullity(matrix) -> int:
    """Dimension of the right null space: columns minus rank."""
    M = sp.Matrix(matrix)
    return M.cols - rank(M)


def nullspace_vector(reduced: sp.Matrix, pivots: Sequence[int]) -> List[sp.Rational]:
    """Return the null space generator of a reduced matrix with nullity 1.

    The single free variable is fixed to 1 and every pivot variable is read
    off its row: x_p = -reduced[row, free].
    """
    pivot_set = set(pivots)
    free = [j for j in range(reduced.cols) if j not in pivot_set]
    if len(free) != 1:
        raise ValueError(f"Expected exactly one free column, found {len(free)}")
    f = free[0]

    x: List[sp.Rational] = [sp.Integer(0)] * reduced.cols
    x[f] = sp.Integer(1)
    for row, p in enumerate(pivots):
        x[p] = -reduced[row, f]
    return x


def derive_coefficients(reduced: sp.Matrix) -> List[sp.Rational]:
    """Read one raw coefficient per column out of a reduced matrix.

    Row i yields the negated sum of its entries strictly right of column i,
    with an exact zero replaced by 1. Columns without a row are padded
    with 1.

    This assumes a single degree of freedom carried by the last column. With
    more free columns the padding is a guess and the result need not balance.
    """
    R, C = reduced.shape
    coeffs: List[sp.Rational] = []
    for i in range(min(R, C)):
        s = sum((reduced[i, j] for j in range(i + 1, C)), sp.Integer(0))
        value = -s
        coeffs.append(sp.Integer(1) if value == 0 else value)
    coeffs.extend([sp.Integer(1)] * max(0, C - R))
    return coeffs


def _round_half_away(x: sp.Rational) -> int:
    n = int(sp.floor(abs(x) + sp.Rational(1, 2)))
    return n if x >= 0 else -n


def _decimal_places(x: sp.Rational, limit: int) -> int:
    k = 0
    while k < limit and (x * 10**k).q != 1:
        k += 1
    return k


def scale_to_integers(values: Sequence, places: Optional[int] = None) -> List[int]:
    """Scale a coefficient vector to the minimal positive integer tuple.

    The vector is first divided by its smallest absolute entry. Then:

    - ``places=None`` (default): multiply by the LCM of the denominators,
      which is exact;
    - ``places=k``: round every entry to k decimals and multiply by the power
      of ten clearing the longest decimal expansion. This is a tolerance
      heuristic, and it gives wrong results when a ratio has a non
      terminating expansion longer than k digits (e.g. 4/3).

    The result is divided by its GCD; signs are dropped.

    Raises
    ------
    BalanceError
        If the smallest absolute entry is zero.
    """
    xs = [_to_rational(v) for v in values]
    if not xs:
        return []

    smallest = min(abs(x) for x in xs)
    if smallest == 0:
        raise BalanceError("Cannot scale a coefficient vector containing a zero entry")

    scaled = [x / smallest for x in xs]

    if places is None:
        # Clear denominators.
        multiplier = int(sp.ilcm(1, *[x.q for x in scaled]))
        ints = [int(x * multiplier) for x in scaled]
    else:
        if places < 0:
            raise ValueError("places must be nonnegative")
        unit = 10**places
        rounded = [sp.Rational(_round_half_away(x * unit), unit) for x in scaled]
        max_power = 10 ** max(_decimal_places(x, places) for x in rounded)
        ints = [int(x * max_power) for x in rounded]

    # Make primitive by dividing gcd.
    g = int(sp.igcd(0, *ints)) if any(ints) else 1
    out = [abs(i) // g for i in ints]
    logger.debug("Scaled %s to %s", [str(x) for x in xs], out)
    return out
