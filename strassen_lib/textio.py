"""Whitespace-separated integer stream: n, then A and B row-major."""
from contextlib import ExitStack

from .errors import InputFormatError, InvalidSize
from .matrix import Matrix

PROMPT_SIZE = "Enter the size of the square matrices: "
PROMPT_ELEMENTS = "Enter elements of matrix {}:\n"


def iter_tokens(stream):
    for line in stream:
        yield from line.split()


def _next_int(tokens, what: str) -> int:
    try:
        tok = next(tokens)
    except StopIteration:
        raise InputFormatError(f"Unexpected end of input while reading {what}") from None
    try:
        return int(tok)
    except ValueError:
        raise InputFormatError(f"Expected an integer for {what}, got {tok!r}") from None


def read_matrices(tokens, dtype=None, prompt=None):
    """Read n and two n×n matrices from an iterable of tokens.

    ``prompt``, if given, is called with the interactive prompt text before
    the size and before each matrix. Returns (n, A, B).
    """
    tokens = iter(tokens)
    if prompt:
        prompt(PROMPT_SIZE)
    n = _next_int(tokens, "matrix size")
    if n < 1:
        raise InvalidSize(f"Matrix size must be >= 1, got {n}")

    with ExitStack() as scope:
        mats = []
        for name in ("A", "B"):
            if prompt:
                prompt(PROMPT_ELEMENTS.format(name))
            rows = [[_next_int(tokens, f"{name}[{i}][{j}]") for j in range(n)]
                    for i in range(n)]
            mats.append(scope.enter_context(Matrix.from_rows(rows, dtype)))
        scope.pop_all()
    return n, mats[0], mats[1]


def parse_matrices(text: str, dtype=None):
    return read_matrices(text.split(), dtype)


def format_matrix(m: Matrix) -> str:
    return "\n".join(" ".join(str(v) for v in row) for row in m.to_rows())
