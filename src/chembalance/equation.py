from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple


# Supported arrow tokens; direction is irrelevant for balancing.
_ARROW_RE = re.compile(r"(<=>|<->|->|=>|→|=)")

# A single term like "2H2O", "2 H2O" or "H2O".
_TERM_RE = re.compile(r"^\s*(?:(\d+)\s*(?=[A-Z(\[{]))?(\S+)\s*$")


def _parse_side(side_str: str, line: str) -> List[str]:
    """Parse one side like '2H2 + O2' into ['H2', 'O2'].

    Leading integer coefficients are dropped; only the formulas matter.
    """
    parts = [p.strip() for p in side_str.split("+")]
    if not side_str.strip() or any(p == "" for p in parts):
        raise ValueError(f"Empty side in equation: '{line}'")

    formulas: List[str] = []
    for part in parts:
        m = _TERM_RE.match(part)
        if not m:
            raise ValueError(f"Could not parse equation term: '{part}'")
        formulas.append(m.group(2))
    return formulas


@dataclass(frozen=True)
class ChemicalEquation:
    """An unbalanced chemical equation.

    Parameters
    ----------
    reactants:
        Reactant formulas, in order.
    products:
        Product formulas, in order.

    Notes
    -----
    The compound columns used by the balancer are `reactants + products`;
    the role of a compound is implied by its position.
    """

    reactants: Tuple[str, ...]
    products: Tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "reactants", tuple(self.reactants))
        object.__setattr__(self, "products", tuple(self.products))
        if not self.reactants:
            raise ValueError("at least one reactant is required")
        if not self.products:
            raise ValueError("at least one product is required")

    @property
    def compounds(self) -> Tuple[str, ...]:
        return self.reactants + self.products

    @property
    def n_reactants(self) -> int:
        return len(self.reactants)

    def to_string(self, arrow: str = "->") -> str:
        return f"{' + '.join(self.reactants)} {arrow} {' + '.join(self.products)}"

    # -----------------------------
    # Constructors
    # -----------------------------

    @classmethod
    def from_string(cls, text: str) -> "ChemicalEquation":
        """Parse an equation like 'H2 + O2 -> H2O'.

        Supported arrows: "->", "=>", "→", "=", "<->", "<=>". Leading
        coefficients such as "2H2" or "2 H2" are accepted and ignored.
        """
        line = text.strip()
        arrows = list(_ARROW_RE.finditer(line))
        if not arrows:
            raise ValueError(f"No supported arrow found in equation: '{text}'")
        if len(arrows) > 1:
            raise ValueError(f"More than one arrow in equation: '{text}'")

        m = arrows[0]
        lhs = _parse_side(line[: m.start()], text)
        rhs = _parse_side(line[m.end() :], text)
        return cls(reactants=tuple(lhs), products=tuple(rhs))

    @classmethod
    def from_sides(cls, reactants: Iterable[str], products: Iterable[str]) -> "ChemicalEquation":
        return cls(reactants=tuple(reactants), products=tuple(products))
