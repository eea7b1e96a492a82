from __future__ import annotations

from typing import Dict

from .equation import ChemicalEquation


def water_synthesis() -> ChemicalEquation:
    """Hydrogen combustion: 2 H2 + O2 -> 2 H2O."""
    return ChemicalEquation(reactants=("H2", "O2"), products=("H2O",))


def iron_oxidation() -> ChemicalEquation:
    """Rusting of iron: 4 Fe + 3 O2 -> 2 Fe2O3."""
    return ChemicalEquation(reactants=("Fe", "O2"), products=("Fe2O3",))


def neutralization() -> ChemicalEquation:
    """Sodium hydroxide and sulfuric acid: 2 NaOH + H2SO4 -> Na2SO4 + 2 H2O."""
    return ChemicalEquation(reactants=("NaOH", "H2SO4"), products=("Na2SO4", "H2O"))


def propane_combustion() -> ChemicalEquation:
    """Complete combustion of propane: C3H8 + 5 O2 -> 3 CO2 + 4 H2O."""
    return ChemicalEquation(reactants=("C3H8", "O2"), products=("CO2", "H2O"))


def photosynthesis() -> ChemicalEquation:
    """Net photosynthesis: 6 CO2 + 6 H2O -> C6H12O6 + 6 O2."""
    return ChemicalEquation(reactants=("CO2", "H2O"), products=("C6H12O6", "O2"))


def calcium_phosphate_precipitation() -> ChemicalEquation:
    """Precipitation with a grouped formula: 3 CaCl2 + 2 Na3PO4 -> Ca3(PO4)2 + 6 NaCl."""
    return ChemicalEquation(reactants=("CaCl2", "Na3PO4"), products=("Ca3(PO4)2", "NaCl"))


def list_available_equations() -> Dict[str, str]:
    """Return the built-in example equations with a short description."""
    return {
        "water_synthesis": "H2 + O2 -> H2O",
        "iron_oxidation": "Fe + O2 -> Fe2O3",
        "neutralization": "NaOH + H2SO4 -> Na2SO4 + H2O",
        "propane_combustion": "C3H8 + O2 -> CO2 + H2O",
        "photosynthesis": "CO2 + H2O -> C6H12O6 + O2",
        "calcium_phosphate_precipitation": "CaCl2 + Na3PO4 -> Ca3(PO4)2 + NaCl",
    }
