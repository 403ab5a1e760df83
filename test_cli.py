import io
import subprocess
import sys

import pytest

from strassen_lib.cli import main
from strassen_lib.errors import InputFormatError, InvalidSize
from strassen_lib.textio import format_matrix, parse_matrices, read_matrices


def run(text):
    out, err = io.StringIO(), io.StringIO()
    code = main(stdin=io.StringIO(text), stdout=out, stderr=err)
    return code, out.getvalue(), err.getvalue()


def test_two_by_two():
    code, out, err = run("2\n1 2\n3 4\n5 6\n7 8\n")
    assert code == 0
    assert out == "19 22\n43 50\n"
    assert err == ""


def test_padded_identity():
    text = "3\n" + "1 0 0 0 1 0 0 0 1\n" * 2
    code, out, _ = run(text)
    assert code == 0
    assert out.splitlines() == ["1 0 0", "0 1 0", "0 0 1"]


def test_single_entry():
    assert run("1 -3 7") == (0, "-21\n", "")


@pytest.mark.parametrize("text, fragment", [
    ("", "end of input"),
    ("0", "must be >= 1"),
    ("2\n1 2 3 4\n5 6", "end of input"),
    ("2\n1 2 x 4 5 6 7 8", "'x'"),
])
def test_errors_exit_non_zero(text, fragment):
    code, out, err = run(text)
    assert code == 1
    assert out == ""
    assert err.startswith("error: ")
    assert fragment in err


def test_parse_matrices():
    n, a, b = parse_matrices("2  1 2 3 4  5 6 7 8")
    assert n == 2
    assert a.to_rows() == [[1, 2], [3, 4]]
    assert b.to_rows() == [[5, 6], [7, 8]]


def test_parse_errors():
    with pytest.raises(InvalidSize):
        parse_matrices("-1")
    with pytest.raises(InputFormatError):
        parse_matrices("2 1 2 3")


def test_prompts():
    prompts = []
    read_matrices("1 2 3".split(), prompt=prompts.append)
    assert prompts == [
        "Enter the size of the square matrices: ",
        "Enter elements of matrix A:\n",
        "Enter elements of matrix B:\n",
    ]


def test_format_matrix():
    _, a, _ = parse_matrices("2 1 -2 30 4 0 0 0 0")
    assert format_matrix(a) == "1 -2\n30 4"


def test_module_entry_point():
    proc = subprocess.run([sys.executable, "-m", "strassen_lib"], input="2 1 2 3 4 5 6 7 8",
                          capture_output=True, text=True, check=False)
    assert proc.returncode == 0
    assert proc.stdout == "19 22\n43 50\n"
