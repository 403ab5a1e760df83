import json
import time

import azure.functions as func

from strassen_lib import config
from strassen_lib.errors import AllocationError, InvalidSize, StrassenError
from strassen_lib.logs import _logger, jlog, new_run_id
from strassen_lib.matrix import Matrix
from strassen_lib.padding import multiply, next_power_of_two

JSON_CT = "application/json"


def _error(status: int, kind: str, message: str) -> func.HttpResponse:
    return func.HttpResponse(json.dumps({"error": kind, "message": message}),
                             status_code=status, mimetype=JSON_CT)


def _load(req_body: dict, key: str) -> Matrix:
    rows = req_body.get(key)
    if not isinstance(rows, list) or not rows:
        raise InvalidSize(f"'{key}' must be a non-empty list of rows")
    if len(rows) > config.MAX_DIM:
        raise InvalidSize(f"'{key}' has {len(rows)} rows; MAX_DIM is {config.MAX_DIM}")
    return Matrix.from_rows(rows)


def main(req: func.HttpRequest) -> func.HttpResponse:
    logger = _logger("multiply_http", "INFO")
    run_id = new_run_id()
    try:
        req_body = req.get_json()
    except ValueError:
        return _error(400, "InputFormatError", "Request body must be JSON")
    if not isinstance(req_body, dict):
        return _error(400, "InputFormatError", "Request body must be a JSON object")

    try:
        with _load(req_body, "matrix_a") as a, _load(req_body, "matrix_b") as b:
            t0 = time.time()
            c = multiply(a, b)
            t1 = time.time()
        with c:
            result = c.to_rows()
            n = c.rows
            dtype = str(c.dtype)
    except StrassenError as e:
        jlog({"run_id": run_id, "op": "http_multiply", "success": False,
              "error": type(e).__name__, "message": str(e)}, logger)
        status = 503 if isinstance(e, AllocationError) else 400
        return _error(status, type(e).__name__, str(e))
    except Exception as e:
        logger.exception("multiply failed")
        return func.HttpResponse(f"Error: {str(e)}", status_code=500)

    padded = next_power_of_two(n)
    jlog({
        "run_id": run_id,
        "op": "http_multiply",
        "n": n,
        "padded": padded,
        "threshold": config.STRASSEN_THRESHOLD,
        "dtype": dtype,
        "compute_sec": round(t1 - t0, 6),
    }, logger)
    return func.HttpResponse(json.dumps({"result": result, "n": n, "padded": padded, "run_id": run_id}),
                             status_code=200, mimetype=JSON_CT)
