import io

import pytest

from matbench.bench import main, run_suite
from matbench.matrix import ElementType, SquareMatrix, Vector


@pytest.mark.parametrize("dtype", list(ElementType))
def test_long_output_has_header_and_four_steps(dtype):
    out = io.StringIO()
    run_suite(3, dtype, out, False, False)
    text = out.getvalue()
    assert text.startswith(f"\n=== Замір швидкості для типу {dtype.value} ===\n\n")
    for step in ("1. ", "2. ", "3. ", "4. "):
        assert f"\n{step}" in text
    assert "розміром 3 на 3" in text


def test_long_output_prints_matrices():
    out = io.StringIO()
    run_suite(2, ElementType.INT, out, False, True)
    text = out.getvalue()
    square = SquareMatrix(2, ElementType.INT)
    square.fill()
    vector = Vector(2, ElementType.INT)
    vector.fill()
    assert square.format() + "\n" in text
    assert vector.format() + "\n" in text
    assert (square @ vector).format() + "\n" in text
    assert (vector @ square).format() + "\n" in text


def test_short_output_is_one_line_of_numbers():
    out = io.StringIO()
    timings = run_suite(5, ElementType.FLOAT, out, True, True)
    text = out.getvalue()
    assert text.endswith("\n")
    assert text.count("\n") == 1
    fields = text.split()
    assert fields[0] == "5"
    assert [float(f) for f in fields[1:]] == pytest.approx(
        [
            timings.create_matrix,
            timings.create_vector,
            timings.matrix_vector,
            timings.vector_matrix,
        ],
        abs=1e-6,
    )


def test_short_output_double_keeps_trailing_space():
    out = io.StringIO()
    run_suite(2, ElementType.DOUBLE, out, True, False)
    assert out.getvalue().endswith(" \n")


def test_timings_are_non_negative_and_labelled():
    timings = run_suite(4, ElementType.INT, io.StringIO(), False, False)
    assert timings.size == 4
    assert timings.dtype is ElementType.INT
    assert min(
        timings.create_matrix,
        timings.create_vector,
        timings.matrix_vector,
        timings.vector_matrix,
    ) >= 0


def test_main_default_runs_three_sizes_for_each_type(capsys):
    assert main([]) == 0
    text = capsys.readouterr().out
    assert text.count("=== Замір швидкості для типу") == 9
    for size in (4, 8, 16):
        assert f"розміром {size} на {size}" in text


def test_main_short_mode_with_sizes(capsys):
    assert main(["2", "3", "--short", "--no-print"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 6
    assert [line.split()[0] for line in lines] == ["2"] * 3 + ["3"] * 3