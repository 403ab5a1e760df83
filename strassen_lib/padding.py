import logging
from contextlib import ExitStack

from .config import resolve_threshold
from .errors import ConfigError, InvalidSize, ShapeMismatch
from .matrix import Matrix
from .strassen import strassen_multiply

log = logging.getLogger("strassen.padding")


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n, for n >= 1."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidSize(f"next_power_of_two expects an integer >= 1, got {n!r}")
    return 1 << (n - 1).bit_length()


def pad_to(m: Matrix, size: int) -> Matrix:
    """New size×size matrix holding ``m`` in its top-left corner, zeros elsewhere."""
    if size < m.rows or size < m.cols:
        raise InvalidSize(f"Cannot pad {m.rows}x{m.cols} matrix down to {size}x{size}")
    padded = Matrix(size, size, m.dtype)
    padded.data[:m.rows, :m.cols] = m.data
    return padded


def crop_to(m: Matrix, rows: int, cols: int) -> Matrix:
    if rows > m.rows or cols > m.cols:
        raise InvalidSize(f"Cannot crop {m.rows}x{m.cols} matrix to {rows}x{cols}")
    out = Matrix(rows, cols, m.dtype)
    out.data[:, :] = m.data[:rows, :cols]
    return out


def multiply(a: Matrix, b: Matrix, threshold: int = None) -> Matrix:
    """Product of two n×n matrices of any n >= 1 via Strassen.

    Operands are zero-padded to the next power of two before recursion and
    the answer is read back from the top-left n×n block.
    """
    if a.rows != a.cols or a.shape != b.shape:
        raise ShapeMismatch("multiply", a.shape, b.shape,
                            "operands must be square with equal side length")
    if a.dtype != b.dtype:
        raise ConfigError(f"multiply: operand dtypes differ ({a.dtype} vs {b.dtype})")
    threshold = resolve_threshold(threshold)
    n = a.rows
    size = next_power_of_two(n)
    if size == n:
        log.debug("No padding needed (power-of-two)")
        return strassen_multiply(a, b, threshold)

    log.info(f"Padding from {n} to {size} (power-of-two)")
    with ExitStack() as scope:
        ap = scope.enter_context(pad_to(a, size))
        bp = scope.enter_context(pad_to(b, size))
        cp = scope.enter_context(strassen_multiply(ap, bp, threshold))
        return crop_to(cp, n, n)
