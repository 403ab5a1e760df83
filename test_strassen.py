import logging

import numpy as np
import pytest

import strassen_lib.strassen as strassen_mod
from strassen_lib.errors import AllocationError, InvalidSize, ShapeMismatch
from strassen_lib.matrix import Matrix, create, track_allocations
from strassen_lib.strassen import (assemble_quadrants, is_power_of_two, split_quadrants,
                                   strassen_multiply)


def test_base_case_two_by_two():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert strassen_multiply(a, b, threshold=2).to_rows() == [[19, 22], [43, 50]]


def test_two_by_two_through_recursion():
    a = Matrix.from_rows([[1, 2], [3, 4]])
    b = Matrix.from_rows([[5, 6], [7, 8]])
    assert strassen_multiply(a, b, threshold=1).to_rows() == [[19, 22], [43, 50]]


@pytest.mark.parametrize("n", [1, 2, 4, 8, 16])
@pytest.mark.parametrize("threshold", [1, 2, 4])
def test_matches_numpy(random_matrix, n, threshold):
    a, b = random_matrix(n), random_matrix(n)
    c = strassen_multiply(a, b, threshold=threshold)
    np.testing.assert_array_equal(c.data, a.data @ b.data)


def test_inputs_not_mutated(random_matrix):
    a, b = random_matrix(8), random_matrix(8)
    ca, cb = a.to_array(), b.to_array()
    strassen_multiply(a, b)
    np.testing.assert_array_equal(a.data, ca)
    np.testing.assert_array_equal(b.data, cb)


def test_split_and_assemble():
    m = Matrix.from_array(np.arange(16).reshape(4, 4))
    q11, q12, q21, q22 = split_quadrants(m)
    assert q11.to_rows() == [[0, 1], [4, 5]]
    assert q12.to_rows() == [[2, 3], [6, 7]]
    assert q21.to_rows() == [[8, 9], [12, 13]]
    assert q22.to_rows() == [[10, 11], [14, 15]]
    # quadrants are copies, not views
    q11[0, 0] = 100
    assert m[0, 0] == 0
    q11[0, 0] = 0
    np.testing.assert_array_equal(assemble_quadrants(q11, q12, q21, q22).data, m.data)


def test_split_rejects_odd():
    with pytest.raises(InvalidSize):
        split_quadrants(create(3, 3))


@pytest.mark.parametrize("n, expected", [(1, True), (2, True), (64, True), (0, False), (3, False), (12, False)])
def test_is_power_of_two(n, expected):
    assert is_power_of_two(n) is expected


def test_rejects_non_power_of_two():
    with pytest.raises(InvalidSize):
        strassen_multiply(create(6, 6), create(6, 6))


def test_rejects_mismatched_shapes():
    with pytest.raises(ShapeMismatch):
        strassen_multiply(create(4, 4), create(2, 2))
    with pytest.raises(ShapeMismatch):
        strassen_multiply(create(2, 4), create(2, 4))


def test_rejects_bad_threshold():
    with pytest.raises(InvalidSize):
        strassen_multiply(create(2, 2), create(2, 2), threshold=0)


def test_no_intermediates_survive(random_matrix):
    a, b = random_matrix(16), random_matrix(16)
    with track_allocations() as t:
        c = strassen_multiply(a, b, threshold=2)
    assert t.live == {c}
    assert t.created > 1
    assert t.created - t.disposed == 1


def test_intermediates_released_on_failure(random_matrix, monkeypatch):
    a, b = random_matrix(8), random_matrix(8)
    real = strassen_mod.multiply_direct
    calls = {"n": 0}

    def flaky(x, y):
        calls["n"] += 1
        if calls["n"] == 20:
            raise AllocationError(x.rows, x.cols)
        return real(x, y)

    monkeypatch.setattr(strassen_mod, "multiply_direct", flaky)
    with track_allocations() as t:
        with pytest.raises(AllocationError):
            strassen_multiply(a, b, threshold=2)
    assert t.live_count == 0
    assert t.created == t.disposed


def test_debug_logging(caplog):
    caplog.set_level(logging.DEBUG, logger="strassen.recursion")
    strassen_multiply(create(4, 4), create(4, 4), threshold=2)
    messages = [r.getMessage() for r in caplog.records]
    assert "[depth=0] split n=4 -> 2" in messages
    assert messages.count("[depth=1] base n=2") == 7
