from .errors import ShapeMismatch
from .matrix import Matrix


def multiply_direct(a: Matrix, b: Matrix) -> Matrix:
    """Textbook m×k · k×n product, c[i][j] = sum_k a[i][k] * b[k][j].

    Entries accumulate at the matrix dtype width and wrap on overflow
    (numpy reports it as a RuntimeWarning).
    """
    if a.cols != b.rows:
        raise ShapeMismatch("multiply_direct", a.shape, b.shape,
                            "left column count must equal right row count")
    A, B = a.data, b.data
    c = Matrix(a.rows, b.cols, a.dtype)
    C = c.data
    for i in range(a.rows):
        for j in range(b.cols):
            for k in range(a.cols):
                C[i, j] += A[i, k] * B[k, j]
    return c
