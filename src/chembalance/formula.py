"""Parsing of chemical formulas into element counts.

Supported syntax
----------------
- element symbols: one uppercase letter followed by lowercase letters
  (``H``, ``Fe``, ``Uue``), each with an optional positive multiplicity;
- groups in ``()``, ``[]`` or ``{}`` with an optional multiplicity, nested
  to any depth (``Ca3(PO4)2``, ``K4[Fe(CN)6]``);
- adduct separators ``·``, ``.`` or ``*`` whose right-hand part may carry a
  leading multiplier (``CuSO4·5H2O``).

Charges, isotopes and whitespace inside a formula are not supported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from .errors import FormulaError


_TOKEN_SPEC = [
    ("ELEM", r"[A-Z][a-z]*"),
    ("NUM", r"\d+"),
    ("OPEN", r"[(\[{]"),
    ("CLOSE", r"[)\]}]"),
    ("SEP", r"[·.*]"),
    ("INVALID", r"."),
]

_TOKEN_RE = re.compile("|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC))

_CLOSING = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class _Token:
    kind: str
    text: str
    pos: int


def _tokenize(formula: str) -> List[_Token]:
    tokens = [_Token(m.lastgroup, m.group(), m.start()) for m in _TOKEN_RE.finditer(formula)]
    tokens.append(_Token("END", "", len(formula)))
    return tokens


def _muladd(target: Dict[str, int], source: Dict[str, int], n: int) -> None:
    for elem, count in source.items():
        target[elem] = target.get(elem, 0) + n * count


class _FormulaParser:
    """Recursive-descent parser over the token list of a single formula."""

    def __init__(self, formula: str) -> None:
        self._formula = formula
        self._tokens = _tokenize(formula)
        self._i = 0

    def parse(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        _muladd(counts, self._part(), 1)
        while self._peek().kind == "SEP":
            self._next()
            _muladd(counts, self._part(), 1)
        self._expect("END")
        return counts

    def _part(self) -> Dict[str, int]:
        multiplier = self._multiplicity() if self._peek().kind == "NUM" else 1
        counts: Dict[str, int] = {}
        _muladd(counts, self._sequence(closing=None), multiplier)
        return counts

    def _sequence(self, closing: Optional[str]) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        start = self._peek()
        while True:
            tok = self._peek()
            if tok.kind == "ELEM":
                self._next()
                n = self._multiplicity() if self._peek().kind == "NUM" else 1
                counts[tok.text] = counts.get(tok.text, 0) + n
            elif tok.kind == "OPEN":
                self._next()
                inner = self._sequence(closing=_CLOSING[tok.text])
                n = self._multiplicity() if self._peek().kind == "NUM" else 1
                _muladd(counts, inner, n)
            else:
                break

        if self._peek() is start:
            raise self._error(self._peek(), "expected an element symbol or an opening bracket")

        if closing is not None:
            tok = self._peek()
            if tok.kind != "CLOSE" or tok.text != closing:
                raise self._error(tok, f"expected '{closing}'")
            self._next()
        return counts

    def _multiplicity(self) -> int:
        tok = self._next()
        n = int(tok.text)
        if n == 0:
            raise self._error(tok, "multiplicity must be positive")
        return n

    def _peek(self) -> _Token:
        return self._tokens[self._i]

    def _next(self) -> _Token:
        tok = self._tokens[self._i]
        if tok.kind != "END":
            self._i += 1
        return tok

    def _expect(self, kind: str) -> _Token:
        tok = self._next()
        if tok.kind != kind:
            raise self._error(tok, f"expected {kind}")
        return tok

    def _error(self, tok: _Token, message: str) -> FormulaError:
        found = "end of formula" if tok.kind == "END" else f"'{tok.text}'"
        return FormulaError(f"Could not parse formula '{self._formula}': {message}, found {found} at {tok.pos}")


def parse_formula(formula: str) -> Dict[str, int]:
    """Parse a formula like 'Ca3(PO4)2' into {'Ca': 3, 'P': 2, 'O': 8}.

    Elements appear in the order of their first occurrence in the string.

    Raises
    ------
    FormulaError
        If the formula is empty or malformed.
    """
    if not isinstance(formula, str):
        raise FormulaError(f"Formula must be a string, got {type(formula).__name__}")
    if formula == "":
        raise FormulaError("Formula must be a non-empty string")
    return _FormulaParser(formula).parse()


def atoms_in(formula: str) -> List[str]:
    """Distinct element symbols of a formula, in first-occurrence order."""
    return list(parse_formula(formula))


def count_atoms(formula: str, atom: str) -> int:
    """Number of atoms of `atom` in `formula` (0 when absent)."""
    return parse_formula(formula).get(atom, 0)
