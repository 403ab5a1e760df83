import sys
import time

from . import config
from .errors import StrassenError
from .logs import _logger, jlog, new_run_id
from .padding import multiply, next_power_of_two
from .textio import format_matrix, iter_tokens, read_matrices


def _prompt(stream):
    def say(text):
        stream.write(text)
        stream.flush()
    return say


def main(stdin=None, stdout=None, stderr=None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    logger = _logger()

    interactive = hasattr(stdin, "isatty") and stdin.isatty()
    run_id = new_run_id()
    try:
        n, a, b = read_matrices(iter_tokens(stdin), prompt=_prompt(stderr) if interactive else None)
        with a, b:
            t0 = time.time()
            c = multiply(a, b)
            t1 = time.time()
        with c:
            if interactive:
                stderr.write("Resultant matrix:\n")
            stdout.write(format_matrix(c) + "\n")
            stdout.flush()
            jlog({
                "run_id": run_id,
                "op": "cli_multiply",
                "n": n,
                "padded": next_power_of_two(n),
                "threshold": config.STRASSEN_THRESHOLD,
                "dtype": str(c.dtype),
                "compute_sec": round(t1 - t0, 6),
            }, logger)
    except StrassenError as e:
        jlog({"run_id": run_id, "op": "cli_multiply", "success": False,
              "error": type(e).__name__, "message": str(e)}, logger)
        stderr.write(f"error: {e}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
