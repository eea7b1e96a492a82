import pytest

from chembalance import FormulaError, atoms_in, count_atoms, parse_formula


def test_simple_formula_counts_and_order():
    counts = parse_formula("H2SO4")
    assert counts == {"H": 2, "S": 1, "O": 4}
    assert list(counts) == ["H", "S", "O"]


def test_repeated_element_is_summed():
    assert parse_formula("CH3COOH") == {"C": 2, "H": 4, "O": 2}


def test_groups_are_multiplied():
    assert parse_formula("Ca3(PO4)2") == {"Ca": 3, "P": 2, "O": 8}
    assert parse_formula("Al2(SO4)3") == {"Al": 2, "S": 3, "O": 12}


def test_nested_mixed_brackets():
    assert parse_formula("K4[Fe(CN)6]") == {"K": 4, "Fe": 1, "C": 6, "N": 6}
    assert parse_formula("{[(H)2]3}2") == {"H": 12}


@pytest.mark.parametrize("formula", ["CuSO4·5H2O", "CuSO4.5H2O", "CuSO4*5H2O"])
def test_hydrate_separator_with_multiplier(formula):
    assert parse_formula(formula) == {"Cu": 1, "S": 1, "O": 9, "H": 10}


def test_atoms_in_and_count_atoms():
    assert atoms_in("NaOH") == ["Na", "O", "H"]
    assert count_atoms("H2SO4", "S") == 1
    assert count_atoms("H2SO4", "Fe") == 0


@pytest.mark.parametrize(
    "formula",
    ["", "h2o", "H2O)", "(H2O", "(H2O]", "H0", "()", "H2 O", "2", "H2O·", "Na+"],
)
def test_malformed_formulas_raise(formula):
    with pytest.raises(FormulaError):
        parse_formula(formula)


def test_formula_error_is_value_error():
    with pytest.raises(ValueError):
        parse_formula("Xy$")
