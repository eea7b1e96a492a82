import pytest
import sympy as sp

from chembalance import (
    BalanceError,
    composition_matrix,
    derive_coefficients,
    nullity,
    nullspace_vector,
    rref,
    scale_to_integers,
)


@pytest.mark.parametrize(
    "rows",
    [
        [[2, 0, -2], [0, 2, -1]],
        [[1, 0, -2, 0], [1, 4, -4, -1], [1, 2, 0, -2], [0, 1, -1, 0]],
        [[0, 1], [0, 2]],
        [[1, 2], [2, 4]],
        [[3, 0, -1, 0], [8, 0, 0, -2], [0, 2, -2, -1]],
        [[0, 0, 0], [0, 0, 0]],
    ],
)
def test_rref_matches_sympy(rows):
    A = sp.Matrix(rows)
    reduced, pivots = rref(A)
    expected, expected_pivots = A.rref()
    assert reduced == expected
    assert pivots == tuple(expected_pivots)


def test_rref_does_not_modify_input():
    A = sp.Matrix([[0, 2, -1], [2, 0, -2]])
    before = A.copy()
    rref(A)
    assert A == before


def test_rref_is_exact():
    reduced, _ = rref([[3, 1], [1, sp.Rational(1, 3)]])
    assert reduced == sp.Matrix([[1, sp.Rational(1, 3)], [0, 0]])


def test_rref_skips_columns_without_pivot():
    reduced, pivots = rref([[0, 1], [0, 2]])
    assert reduced == sp.Matrix([[0, 1], [0, 0]])
    assert pivots == (1,)


def test_rref_empty_matrix():
    reduced, pivots = rref(sp.Matrix.zeros(0, 3))
    assert reduced.shape == (0, 3)
    assert pivots == ()


def test_nullity_of_composition_matrices():
    assert nullity(composition_matrix(["H2", "O2", "H2O"], 2)) == 1
    assert nullity(composition_matrix(["H2", "O2", "H2O", "H2O2"], 2)) == 2
    assert nullity(composition_matrix(["H2", "O2"], 1)) == 0


def test_nullspace_vector_reads_free_column():
    reduced, pivots = rref([[2, 0, -2], [0, 2, -1]])
    assert nullspace_vector(reduced, pivots) == [1, sp.Rational(1, 2), 1]


def test_nullspace_vector_requires_single_free_column():
    reduced, pivots = rref([[2, 0, -2, -2], [0, 2, -1, -2]])
    with pytest.raises(ValueError):
        nullspace_vector(reduced, pivots)


def test_derive_coefficients_single_free_variable():
    reduced = sp.Matrix([[1, 0, -2], [0, 1, sp.Rational(-3, 2)]])
    assert derive_coefficients(reduced) == [2, sp.Rational(3, 2), 1]


def test_derive_coefficients_zero_sum_becomes_one():
    reduced = sp.Matrix([[1, 0, 0], [0, 1, 0]])
    assert derive_coefficients(reduced) == [1, 1, 1]


def test_derive_coefficients_ignores_extra_zero_rows():
    reduced = sp.Matrix([[1, -1], [0, 0], [0, 0]])
    assert derive_coefficients(reduced) == [1, 1]


def test_scale_to_integers_exact():
    assert scale_to_integers([2, sp.Rational(3, 2), 1]) == [4, 3, 2]
    assert scale_to_integers([sp.Rational(1, 4), sp.Rational(5, 4), sp.Rational(3, 4), 1]) == [1, 5, 3, 4]


def test_scale_to_integers_drops_signs():
    assert scale_to_integers([-1, sp.Rational(-1, 2), 1]) == [2, 1, 2]


def test_scale_to_integers_accepts_floats():
    assert scale_to_integers([0.5, 1.0]) == [1, 2]


def test_scale_to_integers_with_decimal_rounding():
    assert scale_to_integers([sp.Rational(1, 2), sp.Rational(1, 3), 1], places=6) == [3, 2, 6]


def test_decimal_rounding_cannot_recover_repeating_ratios():
    values = [sp.Rational(4, 3), 1]
    assert scale_to_integers(values) == [4, 3]
    assert scale_to_integers(values, places=6) == [1333333, 1000000]


def test_scale_to_integers_rejects_zero_entry():
    with pytest.raises(BalanceError):
        scale_to_integers([0, 1, 2])


def test_scale_to_integers_empty():
    assert scale_to_integers([]) == []


def test_scale_to_integers_single_value():
    assert scale_to_integers([sp.Rational(2, 3)]) == [1]


def test_scale_to_integers_keeps_large_values_exact():
    assert scale_to_integers([sp.Rational(1, 2**70), 1]) == [1, 2**70]
