"""Tests for the commacalc command line."""

from __future__ import annotations

import json
import logging

from typer.testing import CliRunner

from commacalc.cli import app


class TestEvaluate:
    def test_prints_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["2+3*4"])
        assert result.exit_code == 0
        assert result.output.strip() == "14"

    def test_prints_float_result(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1,1+2*3,5"])
        assert result.exit_code == 0
        assert float(result.output.strip()) == 8.1

    def test_right_associative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1-2-3"])
        assert result.output.strip() == "2"

    def test_division_by_zero_prints_infinity(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1/0"])
        assert result.exit_code == 0
        assert result.output.strip() == "Infinity"

    def test_small_result_uses_short_exponent(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1/10000000"])
        assert result.exit_code == 0
        assert result.output.strip() == "1e-7"


class TestDiagnostics:
    def test_missing_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [])
        assert result.exit_code == 1
        assert "No input specified!" in result.output

    def test_caret_under_error_position(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["(2+3"])
        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines[0] == "(2+3"
        assert lines[1] == "   ^"
        assert "Imbalanced brackets at position 3 detected!" in result.output

    def test_caret_for_unexpected_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1 * * 2"])
        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines[0] == "1 * * 2"
        assert lines[1] == "    ^"

    def test_no_caret_without_position(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["1+"])
        assert result.exit_code == 1
        assert result.output.splitlines()[0] == "1+"
        assert "^" not in result.output
        assert "Expected <number> found <(empty)>." in result.output

    def test_leading_minus_is_parsed_not_an_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["-1"])
        assert result.exit_code == 1
        lines = result.output.splitlines()
        assert lines[0] == "-1"
        assert lines[1] == "^"
        assert "Expected <number> found <operator '-' at position 0>." in result.output

    def test_leading_minus_before_group(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["-(2)"])
        assert result.exit_code == 1
        assert result.output.splitlines()[0] == "-(2)"
        assert "No such option" not in result.output

    def test_leading_minus_after_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--no-caret", "-1"])
        assert result.exit_code == 1
        assert result.output.splitlines()[0] == "-1"
        assert "^" not in result.output

    def test_no_caret_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--no-caret", "(2+3"])
        assert result.exit_code == 1
        assert "^" not in result.output

    def test_caret_disabled_by_environment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["(2+3"], env={"COMMACALC_CARET": "0"})
        assert result.exit_code == 1
        assert "^" not in result.output

    def test_flag_overrides_environment(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--caret", "(2+3"], env={"COMMACALC_CARET": "0"})
        assert "   ^" in result.output.splitlines()


class TestInspection:
    def test_ast_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--ast", "23+17"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "type": "add",
            "left": {"type": "number", "value": 23.0},
            "right": {"type": "number", "value": 17.0},
        }

    def test_tokens_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--tokens", "132 + 2,5"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "number '132' at position 0",
            "operator '+' at position 4",
            "number '2,5' at position 6",
        ]

    def test_ast_reports_syntax_errors(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--ast", "(1"])
        assert result.exit_code == 1
        assert "Imbalanced brackets at position 1 detected!" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "commacalc version" in result.output

    def test_verbose_still_prints_result(self, cli_runner: CliRunner) -> None:
        package_logger = logging.getLogger("commacalc")
        try:
            result = cli_runner.invoke(app, ["-v", "1+1"])
            assert result.exit_code == 0
            assert "2" in result.output.splitlines()
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(logging.NOTSET)
