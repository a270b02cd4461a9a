import pytest

from numcraft.calendar_days import day_of_year
from numcraft.cli import main
from numcraft.compare import remainder
from numcraft.divisors import collatz


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_remainder_matches_library(capsys):
    assert main(["remainder", "7.5", "2"]) == 0
    out = capsys.readouterr().out
    assert out.strip().endswith(f"{remainder(7.5, 2.0):f}")


def test_remainder_zero_divisor_fails(capsys):
    assert main(["remainder", "1", "0"]) == 1
    assert "error" in capsys.readouterr().err


def test_max4_prints_largest_argument(capsys):
    assert main(["max4", "1.5", "-2", "9.25", "3"]) == 0
    assert float(_lines(capsys)[0]) == 9.25


def test_max4_with_negative_numbers(capsys):
    assert main(["max4", "-4", "-1.5", "-3", "-2"]) == 0
    assert float(_lines(capsys)[0]) == -1.5


def test_median_prints_middle_value(capsys):
    assert main(["median", "9", "2", "5"]) == 0
    assert _lines(capsys) == ["5"]


def test_day_of_year_first_of_january(capsys):
    assert main(["day-of-year", "1", "1", "2021"]) == 0
    lines = _lines(capsys)
    assert lines[0] == "1"
    assert lines[1] == "leap year: no"


def test_day_of_year_matches_library_in_leap_year(capsys):
    assert main(["day-of-year", "15", "3", "2024"]) == 0
    lines = _lines(capsys)
    assert int(lines[0]) == day_of_year(15, 3, 2024)
    assert lines[1] == "leap year: yes"


def test_day_of_year_invalid_month(capsys):
    assert main(["day-of-year", "1", "13", "2020"]) == 1
    assert "invalid month" in capsys.readouterr().err


@pytest.mark.parametrize("start", [1, 6, 27])
def test_collatz_output_matches_sequence(capsys, start):
    assert main(["collatz", str(start)]) == 0
    lines = _lines(capsys)
    values = [int(token) for token in lines[0].split()]
    assert values == collatz(start)
    assert values[0] == start
    assert values[-1] == 1
    assert lines[1] == f"{len(values)} elements"


def test_collatz_rejects_zero(capsys):
    assert main(["collatz", "0"]) == 1
    assert "positive" in capsys.readouterr().err


def test_missing_command_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2