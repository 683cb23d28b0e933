from __future__ import annotations

from typer.testing import CliRunner

from croon.cli import app

runner = CliRunner()


class TestCli:
    def test_prints_table(self) -> None:
        result = runner.invoke(app, ["*/15 0 1,15 * 1-5 /usr/bin/find"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "minute        0 15 30 45",
            "hour          0",
            "day of month  1 15",
            "month         1 2 3 4 5 6 7 8 9 10 11 12",
            "day of week   1 2 3 4 5",
            "command       /usr/bin/find",
        ]

    def test_next_after(self) -> None:
        result = runner.invoke(app, ["0 9 * * * backup", "--next", "--after", "2026-10-19T10:07"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[-1] == "next          2026-10-20T09:00:00"

    def test_next_none(self) -> None:
        result = runner.invoke(
            app, ["0 9 * * WED backup", "--next", "--after", "2026-10-19T10:07"]
        )
        assert result.exit_code == 0
        assert result.stdout.splitlines()[-1] == "next          none"

    def test_parse_error_exits_nonzero(self) -> None:
        result = runner.invoke(app, ["* * * * *"])
        assert result.exit_code == 1
        assert "missing command" in result.output

    def test_range_error_exits_nonzero(self) -> None:
        result = runner.invoke(app, ["30/30-150 * * * * echo"])
        assert result.exit_code == 1
        assert "exceeds maximum" in result.output

    def test_bad_expression_reported_before_bad_after(self) -> None:
        result = runner.invoke(app, ["* * * * *", "--next", "--after", "tomorrow"])
        assert result.exit_code == 1
        assert "missing command" in result.output

    def test_after_ignored_without_next(self) -> None:
        result = runner.invoke(app, ["* * * * * echo", "--after", "tomorrow"])
        assert result.exit_code == 0
        assert "next" not in result.stdout

    def test_bad_after(self) -> None:
        result = runner.invoke(app, ["* * * * * echo", "--next", "--after", "tomorrow"])
        assert result.exit_code != 0
