# tests/test_cli.py

import pytest

from caljalali.cli import main


def test_day_command(capsys):
    assert main(["day", "2025-03-21"]) == 0
    out = capsys.readouterr().out
    assert "1404-01-01" in out
    assert "1 Farvardin 1404" in out
    assert "Nowruz" in out


def test_bare_date_shorthand(capsys):
    assert main(["2024-03-20", "--attr", "names"]) == 0
    out = capsys.readouterr().out
    assert "1403-01-01" in out
    assert "weekday_name = Wednesday" in out


def test_to_gregorian(capsys):
    assert main(["to-gregorian", "1400", "1", "1"]) == 0
    assert capsys.readouterr().out.strip() == "2021-03-21"


def test_to_gregorian_esfand_30_of_approx_leap_year(capsys):
    assert main(["to-gregorian", "1404", "12", "30"]) == 0
    assert capsys.readouterr().out.strip() == "2026-03-21"


def test_to_gregorian_invalid():
    with pytest.raises(SystemExit):
        main(["to-gregorian", "1405", "12", "30"])


def test_month_command(capsys):
    assert main(["month", "1404", "1"]) == 0
    out = capsys.readouterr().out
    assert "Farvardin 1404" in out
    assert "Islamic Republic Day" in out


def test_day_command_rejects_impossible_date():
    with pytest.raises(SystemExit):
        main(["day", "2025-02-30"])
