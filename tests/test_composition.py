import pytest
import sympy as sp

from chembalance import atom_universe, composition_matrix


def test_atom_universe_first_occurrence_order():
    assert atom_universe(["H2", "O2", "Fe", "NaOH"]) == ["H", "O", "Fe", "Na"]


def test_composition_matrix_signs_products():
    A = composition_matrix(["H2", "O2", "H2O"], 2)
    assert A == sp.Matrix([[2, 0, -2], [0, 2, -1]])


def test_composition_matrix_explicit_atom_order():
    A = composition_matrix(["H2", "O2", "H2O"], 2, atoms=["O", "H"])
    assert A == sp.Matrix([[0, 2, -1], [2, 0, -2]])


@pytest.mark.parametrize("n_reactants", [-1, 4])
def test_n_reactants_out_of_range(n_reactants):
    with pytest.raises(ValueError):
        composition_matrix(["H2", "O2", "H2O"], n_reactants)
