import pytest

from numbercraft.tables import floyd_triangle, multiplication_table


@pytest.mark.parametrize("rows", [0, -3])
def test_floyd_triangle_empty(rows):
    assert floyd_triangle(rows) == []


@pytest.mark.parametrize("rows", [1, 2, 5, 12])
def test_floyd_triangle_row_lengths(rows):
    triangle = floyd_triangle(rows)
    assert len(triangle) == rows
    assert [len(row) for row in triangle] == list(range(1, rows + 1))


@pytest.mark.parametrize("rows", [1, 4, 9])
def test_floyd_triangle_counts_consecutively(rows):
    flat = [n for row in floyd_triangle(rows) for n in row]
    assert flat == list(range(1, len(flat) + 1))


def test_floyd_triangle_is_prefix_stable():
    assert floyd_triangle(6)[:4] == floyd_triangle(4)


def test_multiplication_table_default_length():
    table = multiplication_table(7)
    assert [m for m, _ in table] == list(range(1, 11))


@pytest.mark.parametrize("number", [7, -3, 0])
def test_multiplication_table_steps_by_number(number):
    table = multiplication_table(number, 12)
    products = [p for _, p in table]
    assert products[0] == number
    assert all(b - a == number for a, b in zip(products, products[1:]))


def test_multiplication_table_upto_zero_is_empty():
    assert multiplication_table(5, 0) == []