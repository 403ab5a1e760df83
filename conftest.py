import numpy as np
import pytest

from strassen_lib.matrix import Matrix


@pytest.fixture
def rng():
    return np.random.default_rng(530)


@pytest.fixture
def random_matrix(rng):
    def make(n, low=-9, high=10):
        return Matrix.from_array(rng.integers(low, high, (n, n)))
    return make


def identity(n):
    m = Matrix(n, n)
    for i in range(n):
        m[i, i] = 1
    return m
