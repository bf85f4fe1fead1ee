from pathlib import Path

import pytest
from typer.testing import CliRunner

from splitwise_csv import load_entries_json, read_expenses
from splitwise_csv.cli import OutputFormat, app, cmd_read, cmd_validate, format_summary

runner = CliRunner()


# ---- Handlers ----------------------------------------------------------------


def test_cmd_read_prints_json(testdata: Path, capsys: pytest.CaptureFixture[str]):
    code = cmd_read(str(testdata / "ok_standard.csv"))

    out = capsys.readouterr().out
    assert code == 0
    assert load_entries_json(out) == read_expenses(testdata / "ok_standard.csv")


def test_cmd_read_prints_summary(testdata: Path, capsys: pytest.CaptureFixture[str]):
    code = cmd_read(str(testdata / "ok_standard.csv"), output_format=OutputFormat.summary)

    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert lines[0] == "2023-05-01T18:30:00Z\t42\t60.00 EUR\tDinner\t7:100.0/50.0 8:0.0/50.0"
    assert len(lines) == 3


def test_format_summary_handles_no_entries():
    assert format_summary([]) == []


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("err_missing_header", 'Error: missing "users__0__paid_share" header'),
        ("err_wrong_number_of_fields", "Error: record on line 4: wrong number of fields"),
        ("err_total_owed_share", "Error: total owed share is not 100 (81.250000): error on row 5"),
    ],
)
def test_cmd_read_reports_parse_errors(
    testdata: Path, capsys: pytest.CaptureFixture[str], name: str, message: str
):
    code = cmd_read(str(testdata / f"{name}.csv"))

    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert message in captured.err


def test_cmd_validate_reports_missing_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    missing = tmp_path / "missing.csv"

    code = cmd_validate(str(missing))

    assert code == 1
    assert f"Error: File not found: {missing}" in capsys.readouterr().err


def test_cmd_validate_counts_entries(testdata: Path, capsys: pytest.CaptureFixture[str]):
    code = cmd_validate(str(testdata / "ok_scrambled.csv"))

    assert code == 0
    assert capsys.readouterr().out.strip() == "OK: 3 entries"


# ---- Typer app ---------------------------------------------------------------


def test_app_read_command(testdata: Path):
    result = runner.invoke(
        app, ["read", "--csv-path", str(testdata / "ok_standard.csv"), "--format", "summary"]
    )

    assert result.exit_code == 0
    assert "Groceries" in result.stdout


def test_app_validate_command_fails_on_bad_file(testdata: Path):
    result = runner.invoke(
        app, ["validate", "--csv-path", str(testdata / "err_wrong_field_type.csv")]
    )

    assert result.exit_code == 1


def test_app_without_subcommand_exits_with_error():
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "No subcommand provided" in result.stdout


def test_cmd_read_reports_out_of_range_number(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
):
    path = tmp_path / "huge.csv"
    path.write_text(
        "group_id,date,cost,currency,category_id,description,details\n"
        "g,2024-01-01,1e999999999,USD,c,Coffee,\n",
        encoding="utf-8",
    )

    code = cmd_read(str(path))

    assert code == 1
    assert 'Error: could not parse "1e999999999"' in capsys.readouterr().err


def test_app_read_command_json_format_option(testdata: Path):
    result = runner.invoke(
        app, ["read", "--csv-path", str(testdata / "ok_standard.csv"), "--format", "json"]
    )

    assert result.exit_code == 0
    assert load_entries_json(result.stdout) == read_expenses(testdata / "ok_standard.csv")
