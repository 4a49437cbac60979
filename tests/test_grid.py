import pytest

from raymaze.grid import (
    MapError,
    check_edges,
    find_start,
    has_hole,
    is_path,
    pad_rows,
    validate_map,
)

SIMPLE = ["11111", "10N01", "11111"]


@pytest.mark.parametrize("cell", ["0", "N", "S", "W", "E"])
def test_is_path_true(cell):
    assert is_path(cell) is True


@pytest.mark.parametrize("cell", ["1", " ", "", "x", "00"])
def test_is_path_false(cell):
    assert is_path(cell) is False


def test_pad_rows_invariants():
    rows = ["1", "111", "11"]
    padded = pad_rows(rows)
    assert len({len(row) for row in padded}) == 1
    assert len(padded[0]) == 3
    assert all(p.startswith(r) and set(p[len(r):]) <= {" "} for p, r in zip(padded, rows))


def test_pad_rows_empty():
    assert pad_rows([]) == []


def test_find_start():
    assert find_start(SIMPLE) == (2, 1)


def test_find_start_duplicate():
    with pytest.raises(MapError, match="duplicate start"):
        find_start(["11111", "1NS01", "11111"])


def test_find_start_missing():
    with pytest.raises(MapError, match="Start position missing"):
        find_start(["111", "101", "111"])


def test_has_hole_closed():
    assert has_hole(SIMPLE, 1, 1) is False
    assert has_hole(SIMPLE, 3, 1) is False


def test_has_hole_space():
    assert has_hole(["11111", "10N0 ", "11111"], 3, 1) is True


def test_has_hole_floor_reaching_last_row():
    assert has_hole(["111", "101", "101"], 1, 1) is True


def test_validate_simple():
    rows, start = validate_map(SIMPLE)
    assert rows == SIMPLE
    assert start == (2, 1)


def test_validate_irregular_shape():
    source = ["  111", "111N1", "10001", "11111"]
    rows, start = validate_map(source)
    assert rows == source
    assert start == (3, 1)


def test_validate_pads_then_finds_hole():
    with pytest.raises(MapError, match="surrounded"):
        validate_map(["11111", "10N01", "111"])


def test_validate_inner_space_is_hole():
    with pytest.raises(MapError, match="surrounded"):
        validate_map(["1111111", "10N0 01", "1111111"])


def test_validate_floor_on_border():
    with pytest.raises(MapError, match="surrounded"):
        validate_map(["111", "1N1", "101"])


def test_validate_start_in_first_column_is_missing():
    with pytest.raises(MapError, match="Start position missing"):
        validate_map(["1111", "N001", "1111"])


def test_validate_start_on_top_edge():
    with pytest.raises(MapError, match="edge of the map"):
        validate_map(["11N11", "10001", "11111"])


def test_validate_empty():
    with pytest.raises(MapError, match="Start position missing"):
        validate_map([])


def test_check_edges_start_on_bottom():
    rows = ["11111", "10001", "11N11"]
    with pytest.raises(MapError, match="edge of the map"):
        check_edges(rows, find_start(rows))


def test_check_edges_accepts_valid():
    check_edges(SIMPLE, (2, 1))
    assert validate_map(SIMPLE)[1] == (2, 1)