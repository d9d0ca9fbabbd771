import io

import pytest

from toyprograms.calculator import calculate, run


def test_division_truncates_toward_zero():
    assert calculate(4, -7, 2) == -3
    assert calculate(4, 7, -2) == -3


def test_addition_commutes():
    assert calculate(1, 12, -5) == calculate(1, -5, 12)


def test_subtraction_antisymmetric():
    assert calculate(2, 9, 4) == -calculate(2, 4, 9)


def test_multiply_then_divide_round_trip():
    assert calculate(4, calculate(3, 6, 4), 4) == 6


def test_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        calculate(4, 1, 0)


def test_invalid_choice_raises():
    with pytest.raises(ValueError):
        calculate(7, 1, 2)


def test_run_quit():
    out = io.StringIO()
    run(["5"], out)
    assert out.getvalue().endswith("Exiting the program.\n")
    assert out.getvalue().startswith("Please make a selection: \n")


def test_run_addition_and_line_clearing():
    out = io.StringIO()
    run(["1", "2 3 extra", "5"], out)
    text = out.getvalue()
    assert "Total: 5 \n" in text
    assert text.endswith("Exiting the program.\n")


def test_run_reports_division_by_zero():
    out = io.StringIO()
    run(["4 8 0", "5"], out)
    assert "Error: Divsion by zero!\n" in out.getvalue()


def test_run_reports_invalid_selection():
    out = io.StringIO()
    run(["9", "1", "2", "5"], out)
    assert "Invalid selection. \n" in out.getvalue()


def test_run_total_matches_calculate():
    out = io.StringIO()
    run(["3 -4 6", "5"], out)
    assert f"Total: {calculate(3, -4, 6)} \n" in out.getvalue()


def test_run_stops_at_end_of_input():
    out = io.StringIO()
    run(["1", "2"], out)
    assert "Total" not in out.getvalue()
    assert "Exiting" not in out.getvalue()


def test_run_rejects_non_numbers():
    with pytest.raises(ValueError):
        run(["abc"], io.StringIO())