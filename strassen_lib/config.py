import os

import numpy as np

from .errors import ConfigError, InvalidSize


def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


# ------- Tunables -------
STRASSEN_THRESHOLD = _env_int("STRASSEN_THRESHOLD", "2")          # base-case side length
DEFAULT_DTYPE      = os.getenv("MM_DTYPE", "int32").lower()        # int32/int64, wraps on overflow
LOG_LEVEL          = os.getenv("LOG_LEVEL", "WARNING").upper()
# runtime grows ~7x per doubling of n; 256 fits one Functions invocation at threshold 2
MAX_DIM            = _env_int("MAX_DIM", "256")                   # HTTP surface guard

_DTYPES = {"int32": np.int32, "int64": np.int64}


def resolve_dtype(name=None):
    """Map a dtype name ("int32"/"int64") or numpy dtype to the entry type."""
    if name is None:
        name = DEFAULT_DTYPE
    if isinstance(name, str):
        try:
            return np.dtype(_DTYPES[name.lower()])
        except KeyError:
            raise ConfigError(f"Unsupported MM_DTYPE {name!r}; expected one of {sorted(_DTYPES)}") from None
    dt = np.dtype(name)
    if dt not in [np.dtype(t) for t in _DTYPES.values()]:
        raise ConfigError(f"Unsupported dtype {dt}; expected one of {sorted(_DTYPES)}")
    return dt


def resolve_threshold(threshold=None) -> int:
    if threshold is None:
        threshold = STRASSEN_THRESHOLD
    threshold = int(threshold)
    if threshold < 1:
        raise InvalidSize(f"Strassen threshold must be >= 1, got {threshold}")
    return threshold


def settings() -> dict:
    return {
        "threshold": STRASSEN_THRESHOLD,
        "dtype": DEFAULT_DTYPE,
        "log_level": LOG_LEVEL,
        "max_dim": MAX_DIM,
    }
