"""Tests for coxgroups.matrices module."""
import pytest

from coxgroups.errors import InvalidMatrixError
from coxgroups.matrices.predicates import (
    as_coxeter_matrix,
    gcm_to_coxeter_matrix,
    is_coxeter_matrix,
    is_gcm,
)
from coxgroups.matrices.types import (
    cartan_A,
    cartan_B,
    cartan_C,
    cartan_D,
    cartan_E,
    cartan_matrix,
    coxeter_matrix_from_type,
    coxeter_type,
    parse_coxeter_type,
)
from coxgroups.matrices.diagram import coxeter_diagram, diagram_components


# --- predicates ---

def test_is_coxeter_matrix_empty():
    assert is_coxeter_matrix([]) is True


def test_is_coxeter_matrix_a2():
    assert is_coxeter_matrix([[1, 3], [3, 1]]) is True


def test_is_coxeter_matrix_infinite_bond():
    assert is_coxeter_matrix([[1, 0], [0, 1]]) is True


def test_is_coxeter_matrix_rejects_bad_diagonal():
    assert is_coxeter_matrix([[2, 3], [3, 1]]) is False


def test_is_coxeter_matrix_rejects_asymmetric():
    assert is_coxeter_matrix([[1, 3], [4, 1]]) is False


def test_is_coxeter_matrix_rejects_one_off_diagonal():
    assert is_coxeter_matrix([[1, 1], [1, 1]]) is False


def test_is_coxeter_matrix_rejects_non_square():
    assert is_coxeter_matrix([[1, 3, 2], [3, 1, 2]]) is False


def test_is_gcm_g2():
    assert is_gcm([[2, -3], [-1, 2]]) is True


def test_is_gcm_rejects_positive_entry():
    assert is_gcm([[2, 1], [1, 2]]) is False


def test_is_gcm_rejects_asymmetric_zeros():
    assert is_gcm([[2, 0], [-1, 2]]) is False


def test_coxeter_matrix_is_not_gcm():
    assert is_gcm([[1, 3], [3, 1]]) is False
    assert is_coxeter_matrix([[2, -1], [-1, 2]]) is False


def test_gcm_to_coxeter_matrix_products():
    # products 0, 1, 2, 3, 4 -> 2, 3, 4, 6, infinity
    assert gcm_to_coxeter_matrix([[2, 0], [0, 2]]) == [[1, 2], [2, 1]]
    assert gcm_to_coxeter_matrix([[2, -1], [-1, 2]]) == [[1, 3], [3, 1]]
    assert gcm_to_coxeter_matrix([[2, -2], [-1, 2]]) == [[1, 4], [4, 1]]
    assert gcm_to_coxeter_matrix([[2, -3], [-1, 2]]) == [[1, 6], [6, 1]]
    assert gcm_to_coxeter_matrix([[2, -2], [-2, 2]]) == [[1, 0], [0, 1]]
    assert gcm_to_coxeter_matrix([[2, -5], [-1, 2]]) == [[1, 0], [0, 1]]


def test_gcm_to_coxeter_matrix_rejects_non_gcm():
    with pytest.raises(InvalidMatrixError):
        gcm_to_coxeter_matrix([[1, 3], [3, 1]])


def test_as_coxeter_matrix_passthrough_and_convert():
    assert as_coxeter_matrix([[1, 5], [5, 1]]) == [[1, 5], [5, 1]]
    assert as_coxeter_matrix([[2, -1], [-1, 2]]) == [[1, 3], [3, 1]]
    with pytest.raises(InvalidMatrixError):
        as_coxeter_matrix([[0]])


def test_invalid_matrix_error_is_value_error():
    with pytest.raises(ValueError):
        gcm_to_coxeter_matrix([[3]])


@pytest.mark.parametrize(
    "mat",
    [
        [[1, 2.5], [2.5, 1]],
        [[1.0, 3], [3, 1]],
        [[1, "x"], ["x", 1]],
        [[True, 3], [3, True]],
        [1, 2],
        None,
        3,
        "ab",
    ],
)
def test_predicates_reject_non_integer_matrices(mat):
    assert is_coxeter_matrix(mat) is False
    assert is_gcm(mat) is False
    with pytest.raises(InvalidMatrixError):
        as_coxeter_matrix(mat)


def test_is_gcm_rejects_float_entries():
    assert is_gcm([[2, -0.5], [-0.5, 2]]) is False
    assert is_gcm([[2.9, -1], [-1, 2]]) is False
    with pytest.raises(InvalidMatrixError):
        gcm_to_coxeter_matrix([[2, -1.5], [-1, 2]])


# --- standard types ---

def test_cartan_A3():
    assert cartan_A(3) == [[2, -1, 0], [-1, 2, -1], [0, -1, 2]]


def test_cartan_A0_is_empty():
    assert cartan_A(0) == []


def test_cartan_B_and_C_are_transposes():
    B = cartan_B(4)
    C = cartan_C(4)
    assert B[0][1] == -2 and B[1][0] == -1
    assert C == [list(col) for col in zip(*B)]


def test_cartan_D4_fork():
    D = cartan_D(4)
    assert is_gcm(D)
    M = gcm_to_coxeter_matrix(D)
    # generator 3 is joined to 1, 2 and 4
    assert [M[2][j] for j in range(4)] == [3, 3, 1, 3]
    assert M[0][1] == 2


def test_cartan_D2_is_reducible():
    assert cartan_D(2) == [[2, 0], [0, 2]]


def test_cartan_E_branch():
    for n in (6, 7, 8):
        M = gcm_to_coxeter_matrix(cartan_E(n))
        assert M[2][n - 1] == 3
        assert sum(1 for m in M[2] if m == 3) == 3


@pytest.mark.parametrize("letter,rank", [("B", 1), ("D", 1), ("E", 5), ("E", 9), ("F", 3), ("G", 3), ("X", 2)])
def test_cartan_matrix_invalid(letter, rank):
    with pytest.raises(InvalidMatrixError):
        cartan_matrix(letter, rank)


def test_parse_coxeter_type():
    assert parse_coxeter_type("B~3") == ("B", 3, True)
    assert parse_coxeter_type("H4") == ("H", 4, False)
    with pytest.raises(InvalidMatrixError):
        parse_coxeter_type("Z3")


@pytest.mark.parametrize(
    "name",
    ["A1", "A4", "B3", "C5", "D4", "E6", "E8", "F4", "G2", "H3", "H4", "I5",
     "A~1", "A~3", "B~3", "C~2", "D~5", "E~6", "E~7", "E~8", "F~4", "G~2"],
)
def test_coxeter_matrix_from_type_is_valid(name):
    M = coxeter_matrix_from_type(name)
    assert is_coxeter_matrix(M)


def test_affine_ranks():
    assert len(coxeter_matrix_from_type("A~2")) == 3
    assert len(coxeter_matrix_from_type("E~8")) == 9
    assert coxeter_matrix_from_type("A~1") == [[1, 0], [0, 1]]


def test_affine_diagrams_are_connected_trees_or_cycles():
    for name in ["B~4", "C~3", "D~4", "E~6", "E~7", "E~8", "F~4", "G~2"]:
        G = coxeter_diagram(coxeter_matrix_from_type(name))
        assert len(diagram_components(coxeter_matrix_from_type(name))) == 1
        # every affine type except A~n has a tree diagram
        assert G.number_of_edges() == G.number_of_nodes() - 1
    G = coxeter_diagram(coxeter_matrix_from_type("A~4"))
    assert G.number_of_edges() == G.number_of_nodes()


def test_dihedral_from_type():
    assert coxeter_matrix_from_type("I7") == [[1, 7], [7, 1]]


@pytest.mark.parametrize(
    "letter,rank,order",
    [("A", 3, 24), ("B", 3, 48), ("C", 4, 384), ("D", 4, 192), ("E", 6, 51840),
     ("F", 4, 1152), ("G", 2, 12), ("H", 3, 120), ("H", 4, 14400), ("I", 5, 10)],
)
def test_coxeter_type_orders(letter, rank, order):
    t = coxeter_type(letter, rank)
    assert t.order == order
    assert is_coxeter_matrix(t.coxeter_matrix)


def test_coxeter_type_metadata():
    t = coxeter_type("I", 7)
    assert t.name == "I2(7)"
    assert t.rank == 2
    assert t.gcm is None
    b = coxeter_type("B", 2)
    assert b.gcm == ((2, -2), (-1, 2))
    assert b.coxeter_matrix == ((1, 4), (4, 1))


# --- diagram ---

def test_coxeter_diagram_edges():
    G = coxeter_diagram([[1, 5, 2], [5, 1, 3], [2, 3, 1]])
    assert sorted(G.nodes) == [1, 2, 3]
    assert G[1][2]["m"] == 5
    assert G[2][3]["m"] == 3
    assert not G.has_edge(1, 3)


def test_coxeter_diagram_accepts_gcm():
    G = coxeter_diagram(cartan_B(3))
    assert G[1][2]["m"] == 4


def test_diagram_components():
    M = [[1, 3, 2, 2], [3, 1, 2, 2], [2, 2, 1, 0], [2, 2, 0, 1]]
    assert diagram_components(M) == [[1, 2], [3, 4]]
