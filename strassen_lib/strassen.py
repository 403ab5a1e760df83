"""Strassen's divide-and-conquer product for power-of-two square matrices.

Each call splits both operands into quadrants, forms the seven products

    P1 = (A11 + A22)(B11 + B22)    P5 = (A11 + A12) B22
    P2 = (A21 + A22) B11           P6 = (A21 - A11)(B11 + B12)
    P3 = A11 (B12 - B22)           P7 = (A12 - A22)(B21 + B22)
    P4 = A22 (B21 - B11)

recursively, and recombines them as

    C11 = (P1 + P4) - P5 + P7      C12 = P3 + P5
    C21 = P2 + P4                  C22 = (P1 + P3) - P2 + P6

Every intermediate (quadrants, operand sums, products, result quadrants) is
registered on an ``ExitStack`` owned by the call that created it, so only
the assembled result leaves the frame, on success and on error alike.
"""
import logging
from contextlib import ExitStack

from .arithmetic import add, subtract
from .config import resolve_threshold
from .direct import multiply_direct
from .errors import ConfigError, InvalidSize, ShapeMismatch
from .matrix import Matrix

log = logging.getLogger("strassen.recursion")


def is_power_of_two(n: int) -> bool:
    return n >= 1 and (n & (n - 1)) == 0


def split_quadrants(m: Matrix):
    """Copy ``m`` into four new half-size matrices: (11, 12, 21, 22)."""
    if m.rows != m.cols or m.rows % 2:
        raise InvalidSize(f"Cannot split {m.rows}x{m.cols} matrix into equal quadrants")
    h = m.rows // 2
    src = m.data
    with ExitStack() as scope:
        quads = []
        for r0, c0 in ((0, 0), (0, h), (h, 0), (h, h)):
            q = scope.enter_context(Matrix(h, h, m.dtype))
            q.data[:, :] = src[r0:r0 + h, c0:c0 + h]
            quads.append(q)
        scope.pop_all()
    return tuple(quads)


def assemble_quadrants(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    h = c11.rows
    for q in (c12, c21, c22):
        if q.shape != c11.shape:
            raise ShapeMismatch("assemble_quadrants", c11.shape, q.shape)
    c = Matrix(2 * h, 2 * h, c11.dtype)
    C = c.data
    C[:h, :h] = c11.data;  C[:h, h:] = c12.data
    C[h:, :h] = c21.data;  C[h:, h:] = c22.data
    return c


def _check_operands(a: Matrix, b: Matrix):
    if a.rows != a.cols or b.rows != b.cols or a.shape != b.shape:
        raise ShapeMismatch("strassen_multiply", a.shape, b.shape,
                            "operands must be square with equal side length")
    if not is_power_of_two(a.rows):
        raise InvalidSize(f"strassen_multiply: side length {a.rows} is not a power of two")
    if a.dtype != b.dtype:
        raise ConfigError(f"strassen_multiply: operand dtypes differ ({a.dtype} vs {b.dtype})")


def strassen_multiply(a: Matrix, b: Matrix, threshold: int = None) -> Matrix:
    """Multiply two n×n matrices, n a power of two. Inputs are not modified."""
    threshold = resolve_threshold(threshold)
    return _strassen(a, b, threshold, 0)


def _strassen(a: Matrix, b: Matrix, threshold: int, depth: int) -> Matrix:
    _check_operands(a, b)
    n = a.rows
    if n <= threshold:
        log.debug(f"[depth={depth}] base n={n}")
        return multiply_direct(a, b)

    log.debug(f"[depth={depth}] split n={n} -> {n // 2}")

    with ExitStack() as scope:
        own = scope.enter_context

        a11, a12, a21, a22 = (own(q) for q in split_quadrants(a))
        b11, b12, b21, b22 = (own(q) for q in split_quadrants(b))

        def product(x, y):
            return own(_strassen(x, y, threshold, depth + 1))

        p1 = product(own(add(a11, a22)), own(add(b11, b22)))
        p2 = product(own(add(a21, a22)), b11)
        p3 = product(a11, own(subtract(b12, b22)))
        p4 = product(a22, own(subtract(b21, b11)))
        p5 = product(own(add(a11, a12)), b22)
        p6 = product(own(subtract(a21, a11)), own(add(b11, b12)))
        p7 = product(own(subtract(a12, a22)), own(add(b21, b22)))

        c11 = own(add(own(subtract(own(add(p1, p4)), p5)), p7))
        c12 = own(add(p3, p5))
        c21 = own(add(p2, p4))
        c22 = own(add(own(subtract(own(add(p1, p3)), p2)), p6))

        return assemble_quadrants(c11, c12, c21, c22)
