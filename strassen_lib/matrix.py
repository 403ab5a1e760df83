"""Dense integer matrix with explicit ownership.

Each ``Matrix`` owns one contiguous, C-ordered ``numpy.ndarray`` of shape
``(rows, cols)``. Storage is zero-filled on creation and released by
``dispose()``; afterwards every access raises ``DisposedMatrixError``.
Matrices are context managers, so intermediates can be scoped with ``with``
or ``contextlib.ExitStack`` and are released on every exit path.

``track_allocations()`` installs a tracker that records every matrix
created and disposed while it is active, which is how the recursion is
checked for leaks.
"""
from contextlib import contextmanager

import numpy as np

from .config import resolve_dtype
from .errors import AllocationError, DisposedMatrixError, InputFormatError, InvalidSize

_trackers = []


class AllocationTracker:
    def __init__(self):
        self.created = 0
        self.disposed = 0
        self.live = set()

    def _on_create(self, m):
        self.created += 1
        self.live.add(m)

    def _on_dispose(self, m):
        self.disposed += 1
        self.live.discard(m)

    @property
    def live_count(self) -> int:
        return len(self.live)


@contextmanager
def track_allocations():
    tracker = AllocationTracker()
    _trackers.append(tracker)
    try:
        yield tracker
    finally:
        _trackers.remove(tracker)


def _check_dim(name, value):
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidSize(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidSize(f"{name} must be >= 1, got {value}")
    return int(value)


class Matrix:
    __slots__ = ("rows", "cols", "_data")

    def __init__(self, rows: int, cols: int, dtype=None):
        self.rows = _check_dim("rows", rows)
        self.cols = _check_dim("cols", cols)
        dt = resolve_dtype(dtype)
        try:
            self._data = np.zeros((self.rows, self.cols), dtype=dt)
        except MemoryError as e:
            raise AllocationError(self.rows, self.cols, dt) from e
        for t in _trackers:
            t._on_create(self)

    # ---------- construction ----------
    @classmethod
    def create(cls, rows: int, cols: int, dtype=None) -> "Matrix":
        return cls(rows, cols, dtype)

    @classmethod
    def from_rows(cls, rows, dtype=None) -> "Matrix":
        """Build a matrix from a nested sequence of integers (row-major)."""
        if rows is None or len(rows) == 0:
            raise InvalidSize("Input matrices cannot be empty.")
        if not hasattr(rows[0], "__len__"):
            raise InputFormatError("Matrix rows must be sequences of integers")
        width = len(rows[0])
        if width == 0:
            raise InvalidSize("Input matrices cannot have empty rows.")
        for i, row in enumerate(rows):
            if not hasattr(row, "__len__") or len(row) != width:
                raise InputFormatError(f"Row {i} does not have {width} entries")
        try:
            arr = np.asarray(rows)
        except ValueError:
            raise InputFormatError("Matrix rows must be flat sequences of integers of equal length") from None
        if arr.ndim != 2 or arr.dtype.kind not in "iu":
            raise InputFormatError(f"Matrix entries must be integers, got {arr.dtype}")
        return cls.from_array(arr, dtype)

    @classmethod
    def from_array(cls, arr: np.ndarray, dtype=None) -> "Matrix":
        arr = np.asarray(arr)
        if arr.ndim != 2:
            raise InvalidSize(f"Expected a 2-D array, got ndim={arr.ndim}")
        m = cls(arr.shape[0], arr.shape[1], dtype)
        m._data[:, :] = arr
        return m

    # ---------- access ----------
    @property
    def data(self) -> np.ndarray:
        if self._data is None:
            raise DisposedMatrixError(f"{self.rows}x{self.cols} matrix used after dispose()")
        return self._data

    @property
    def shape(self):
        return (self.rows, self.cols)

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def disposed(self) -> bool:
        return self._data is None

    def __getitem__(self, idx):
        return self.data[idx]

    def __setitem__(self, idx, value):
        self.data[idx] = value

    def to_rows(self):
        return [[int(v) for v in row] for row in self.data]

    def to_array(self) -> np.ndarray:
        return self.data.copy()

    # ---------- lifetime ----------
    def dispose(self):
        if self._data is None:
            return
        self._data = None
        for t in _trackers:
            t._on_dispose(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False

    def __repr__(self):
        if self._data is None:
            return f"Matrix({self.rows}x{self.cols}, disposed)"
        return f"Matrix({self.rows}x{self.cols}, {self._data.dtype}, {self.to_rows()!r})"


def create(rows: int, cols: int, dtype=None) -> Matrix:
    return Matrix.create(rows, cols, dtype)


def dispose(m: Matrix):
    m.dispose()
