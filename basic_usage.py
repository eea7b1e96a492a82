#!/usr/bin/env python3
"""
Basic Usage Examples for the chembalance package

This script demonstrates the core features of the package with simple,
self-contained examples.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from chembalance import (
    ChemicalEquation, EquationBalancer, BalanceError,
    balance, balance_equation, is_balanced, parse_formula,
    format_balance_report, format_equation,
    list_available_equations, propane_combustion,
)


def example_1_balance_lists():
    """Balance equations given as lists of formulas."""
    print("\n" + "=" * 50)
    print("Example 1: Balancing from Formula Lists")
    print("=" * 50)

    result = balance(["H2", "O2"], ["H2O"])
    print(f"\n  {result}")
    print(f"  {format_equation(result, n_reactants=2)}")

    result = balance(["NaOH", "H2SO4"], ["Na2SO4", "H2O"])
    print(f"\n  {format_equation(result, n_reactants=2)}")
    print(f"  Conserves atoms: {is_balanced(['NaOH', 'H2SO4'], ['Na2SO4', 'H2O'], result)}")


def example_2_equation_strings():
    """Balance equations given as strings."""
    print("\n" + "=" * 50)
    print("Example 2: Equation Strings")
    print("=" * 50)

    for text in ["Fe + O2 -> Fe2O3", "KMnO4 + HCl = KCl + MnCl2 + H2O + Cl2", "CuSO4·5H2O -> CuSO4 + H2O"]:
        eq = ChemicalEquation.from_string(text)
        result = balance_equation(text)
        print(f"\n  {text}")
        print(f"    {format_equation(result, eq.n_reactants)}")


def example_3_formula_parser():
    """Demonstrate the formula parser."""
    print("\n" + "=" * 50)
    print("Example 3: Formula Parser")
    print("=" * 50)

    for formula in ["H2SO4", "Ca3(PO4)2", "K4[Fe(CN)6]", "CuSO4·5H2O"]:
        print(f"  {formula}: {parse_formula(formula)}")


def example_4_pipeline_report():
    """Show every stage of the pipeline for a built-in equation."""
    print("\n" + "=" * 50)
    print("Example 4: Pipeline Report")
    print("=" * 50)

    print("\nAvailable equations:")
    for name, desc in list_available_equations().items():
        print(f"  {name}(): {desc}")

    balancer = EquationBalancer(propane_combustion())
    print()
    print(format_balance_report(balancer))


def example_5_degenerate_systems():
    """Strict mode reports equations without a unique balancing."""
    print("\n" + "=" * 50)
    print("Example 5: Degenerate Systems")
    print("=" * 50)

    for reactants, products in [(["H2", "O2"], ["H2O", "H2O2"]), (["H2"], ["O2"])]:
        try:
            balance(reactants, products)
        except BalanceError as exc:
            print(f"\n  {type(exc).__name__}: {exc}")
        print(f"  best effort: {balance(reactants, products, strict=False)}")


if __name__ == "__main__":
    example_1_balance_lists()
    example_2_equation_strings()
    example_3_formula_parser()
    example_4_pipeline_report()
    example_5_degenerate_systems()
