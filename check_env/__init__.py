import json, sys
import azure.functions as func
import numpy as np

from strassen_lib import config
from strassen_lib.matrix import Matrix
from strassen_lib.padding import multiply

# 2x2 product with a known answer, run through the configured threshold
_PROBE_A = [[1, 2], [3, 4]]
_PROBE_B = [[5, 6], [7, 8]]
_PROBE_C = [[19, 22], [43, 50]]


def _self_test() -> bool:
    with Matrix.from_rows(_PROBE_A) as a, Matrix.from_rows(_PROBE_B) as b:
        with multiply(a, b) as c:
            return c.to_rows() == _PROBE_C


def main(req: func.HttpRequest) -> func.HttpResponse:
    try:
        payload = {
            "ok": _self_test(),
            "python": sys.version,
            "numpy_version": np.__version__,
            "dtype": str(config.resolve_dtype()),
            "settings": config.settings(),
        }
        return func.HttpResponse(json.dumps(payload), mimetype="application/json")
    except Exception as e:
        return func.HttpResponse(
            json.dumps({"ok": False, "error": repr(e)}),
            status_code=500,
            mimetype="application/json",
        )
