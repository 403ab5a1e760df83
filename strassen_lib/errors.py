class StrassenError(Exception):
    """Base class for every failure raised by strassen_lib."""


class AllocationError(StrassenError, MemoryError):
    def __init__(self, rows, cols, dtype=None):
        self.rows, self.cols, self.dtype = rows, cols, dtype
        super().__init__(f"Memory allocation failed for {rows}x{cols} matrix ({dtype})")


class ShapeMismatch(StrassenError, ValueError):
    def __init__(self, operation: str, left_shape, right_shape, detail: str = ""):
        self.operation = operation
        self.left_shape = tuple(left_shape)
        self.right_shape = tuple(right_shape)
        msg = (f"{operation}: incompatible shapes "
               f"{_fmt(self.left_shape)} and {_fmt(self.right_shape)}")
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class InvalidSize(StrassenError, ValueError):
    pass


class DisposedMatrixError(StrassenError, RuntimeError):
    pass


class InputFormatError(StrassenError, ValueError):
    pass


class ConfigError(StrassenError, ValueError):
    pass


def _fmt(shape):
    return "x".join(str(d) for d in shape)
