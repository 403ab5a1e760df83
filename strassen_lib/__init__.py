from .arithmetic import add, subtract
from .direct import multiply_direct
from .errors import (AllocationError, ConfigError, DisposedMatrixError, InputFormatError,
                     InvalidSize, ShapeMismatch, StrassenError)
from .matrix import Matrix, create, dispose, track_allocations
from .padding import crop_to, multiply, next_power_of_two, pad_to
from .strassen import assemble_quadrants, is_power_of_two, split_quadrants, strassen_multiply

__all__ = [
    "Matrix", "create", "dispose", "track_allocations",
    "add", "subtract", "multiply_direct",
    "strassen_multiply", "split_quadrants", "assemble_quadrants", "is_power_of_two",
    "next_power_of_two", "pad_to", "crop_to", "multiply",
    "StrassenError", "AllocationError", "ShapeMismatch", "InvalidSize",
    "DisposedMatrixError", "InputFormatError", "ConfigError",
]
