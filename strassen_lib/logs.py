import json
import logging
import time
import uuid

from .config import LOG_LEVEL

LOGGER_NAME = "strassen"


def _logger(name: str = LOGGER_NAME, level: str = None) -> logging.Logger:
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        lg.addHandler(h)
        lg.setLevel(level or LOG_LEVEL)
    return lg


def new_run_id() -> str:
    return f"run_{uuid.uuid4().hex[:8]}"


# ---------- structured run logging ----------
def jlog(rec: dict, logger: logging.Logger = None) -> str:
    """Emit one JSON line describing a multiplication run and return it."""
    base = {
        "ts": time.time(),
        "run_id": rec.get("run_id") or new_run_id(),
        "op": rec.get("op", "multiply"),
    }
    base.update(rec)
    base.setdefault("success", True)

    line = json.dumps(base, ensure_ascii=False)
    (logger or _logger()).info(line)
    return line
