"""CLI tests."""

import json

import pytest

from manse.run import main


def run_cli(capsys, *args):
    code = main(list(args))
    captured = capsys.readouterr()
    return code, captured


class TestMain:
    def test_solar_birth(self, capsys):
        code, captured = run_cli(capsys, "--birth-date", "1971-11-17", "--birth-time", "04:00")
        assert code == 0
        data = json.loads(captured.out)
        assert data["fullSaju"] == "신해 기해 병오 경인"
        assert isinstance(data["lunarDate"], str)

    def test_output_keeps_hangul(self, capsys):
        _, captured = run_cli(capsys, "--birth-date", "1971-11-17", "--birth-time", "04:00")
        assert "신해" in captured.out

    def test_lunar_birth(self, capsys):
        code, captured = run_cli(capsys, "--birth-date", "2024-01-01", "--birth-time", "12:00", "--lunar")
        assert code == 0
        data = json.loads(captured.out)
        assert data["solarDate"] == "2024-02-10"
        assert data["lunarDate"] == "2024-01-01"

    @pytest.mark.parametrize("flag", [["--no-lmt"], ["--dst", "off"]])
    def test_correction_flags(self, capsys, flag):
        code, captured = run_cli(capsys, "--birth-date", "1988-09-18", "--birth-time", "20:00", *flag)
        assert code == 0
        assert json.loads(captured.out)["time"] == {"gan": "무", "ji": "술"}

    def test_longitude(self, capsys):
        _, captured = run_cli(capsys, "--birth-date", "1990-03-01", "--birth-time", "12:00",
                              "--longitude", "129.0")
        assert json.loads(captured.out)["corrections"]["effectiveTime"] == "1990-03-01T11:36"

    def test_count_balance(self, capsys):
        _, captured = run_cli(capsys, "--birth-date", "1971-11-17", "--birth-time", "04:00",
                              "--balance", "count")
        assert sum(json.loads(captured.out)["ohHaengBalance"].values()) == 8

    def test_day_boundary(self, capsys):
        _, captured = run_cli(capsys, "--birth-date", "2000-01-01", "--birth-time", "23:30",
                              "--no-lmt", "--day-boundary", "same")
        assert json.loads(captured.out)["time"] == {"gan": "임", "ji": "자"}

    def test_beyond_lunar_table(self, capsys):
        code, captured = run_cli(capsys, "--birth-date", "2099-06-01", "--birth-time", "12:00")
        assert code == 0
        assert json.loads(captured.out)["lunarDate"] is None


class TestErrors:
    def test_invalid_date(self, capsys):
        code, captured = run_cli(capsys, "--birth-date", "2023-02-29", "--birth-time", "12:00")
        assert code == 1
        assert captured.err.startswith("error:")
        assert captured.out == ""

    def test_leap_month_without_lunar(self, capsys):
        code, captured = run_cli(capsys, "--birth-date", "1971-11-17", "--birth-time", "04:00",
                                 "--leap-month")
        assert code == 1
        assert "lunar" in captured.err

    def test_unsupported_year(self, capsys):
        code, captured = run_cli(capsys, "--birth-date", "1850-01-01", "--birth-time", "12:00")
        assert code == 1
        assert "1850" in captured.err

    def test_longitude_conflicts_with_no_lmt(self):
        with pytest.raises(SystemExit):
            main(["--birth-date", "1971-11-17", "--birth-time", "04:00",
                  "--longitude", "127.0", "--no-lmt"])
