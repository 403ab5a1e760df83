import numpy as np

from .errors import ConfigError, ShapeMismatch
from .matrix import Matrix


def _check_same_shape(op: str, a: Matrix, b: Matrix):
    if a.shape != b.shape:
        raise ShapeMismatch(op, a.shape, b.shape, "operands must have identical shape")
    if a.dtype != b.dtype:
        raise ConfigError(f"{op}: operand dtypes differ ({a.dtype} vs {b.dtype})")


def add(a: Matrix, b: Matrix) -> Matrix:
    _check_same_shape("add", a, b)
    c = Matrix(a.rows, a.cols, a.dtype)
    np.add(a.data, b.data, out=c.data)
    return c


def subtract(a: Matrix, b: Matrix) -> Matrix:
    _check_same_shape("subtract", a, b)
    c = Matrix(a.rows, a.cols, a.dtype)
    np.subtract(a.data, b.data, out=c.data)
    return c
