# tests/integration_tests/test_cli.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Integration tests for the command line front end

"""Integration tests for run_formula.main.

Results are printed on stdout; exit codes distinguish parse errors (2),
runtime and entropy errors (1) and malformed set arguments (3).
"""

import pytest
import run_formula
from run_formula import main, parse_set_argument, SetArgumentError
from utils.expr_generator import EntropyError
from utils.logger import LogLevel, set_log_level


class TestCommandLine:
    """Test cases for subcommands and their output."""

    def teardown_method(self):
        set_log_level(LogLevel.WARNING)

    def _run(self, capsys, argv):
        code = main(argv)
        return code, capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv, expected",
        [
            (["eval", "1011||="], "true"),
            (["eval", "AB&"], "false"),
            (["nnf", "AB>"], "A!B|"),
            (["cnf", "AB&C|"], "AC|BC|&"),
            (["simplify", "AA!&B|"], "B"),
            (["minimize", "AB&!"], "A!B!|"),
            (["minimize", "AB|C&"], "AB|C&"),
            (["sat", "AA!&"], "false"),
            (["sat", "AB^"], "true"),
            (["set", "AB^", "0,1,2", "0,3,4"], "[1, 2, 3, 4]"),
            (["set", "AB&", "0,1,2", ""], "[]"),
            (["adder", "27", "15"], "42"),
            (["multiplier", "6", "7"], "42"),
            (["powerset", "1", "2"], "[[], [1], [2], [1, 2]]"),
        ],
    )
    def test_results(self, capsys, argv, expected):
        code, out = self._run(capsys, argv)

        assert code == 0
        assert out.strip() == expected

    def test_table(self, capsys):
        code, out = self._run(capsys, ["table", "AB&", "--workers", "2"])

        assert code == 0
        assert out.splitlines() == [
            "| A | B | = |",
            "|---|---|---|",
            "| 0 | 0 | 0 |",
            "| 0 | 1 | 0 |",
            "| 1 | 0 | 0 |",
            "| 1 | 1 | 1 |",
        ]

    def test_colored_table(self, capsys):
        code, out = self._run(capsys, ["table", "-c", "A"])

        assert code == 0
        assert "\x1b[32m1\x1b[0m" in out

    def test_gray(self, capsys):
        code, out = self._run(capsys, ["gray", "2", "8"])

        assert code == 0
        assert out.splitlines() == ["2 => 3 (11)", "8 => 12 (1100)"]

    def test_random_formula_printed_first(self, capsys):
        code, out = self._run(capsys, ["eval", "-r", "--max-vars", "3", "--depth", "3"])
        lines = out.splitlines()

        assert code == 0
        assert len(lines) == 2
        assert lines[1] in ("true", "false")

    def test_set_with_random_formula(self, capsys, monkeypatch):
        monkeypatch.setattr(run_formula, "random_rpn_expr", lambda max_vars, depth: "AB|")

        code, out = self._run(capsys, ["set", "-r", "0,1", "2"])

        assert code == 0
        assert out.splitlines() == ["AB|", "[0, 1, 2]"]

    def test_set_with_random_single_variable(self, capsys):
        code, out = self._run(capsys, ["set", "-r", "--max-vars", "1", "--depth", "2", "0,1,2"])
        lines = out.splitlines()

        assert code == 0
        assert set(lines[0]) <= set("A!&|^>=")
        assert lines[1] in ("[]", "[0, 1, 2]")

    def test_clustered_flags(self, capsys, tmp_path, monkeypatch):
        targets = []
        monkeypatch.setattr(run_formula, "create_graph", lambda node, target: targets.append(target))

        code, _ = self._run(capsys, ["minimize", "AB|!", "-dc"])

        assert code == 0
        assert targets == ["minimize_in", "minimize_out"]


class TestExitCodes:
    """Test cases for error reporting."""

    def teardown_method(self):
        set_log_level(LogLevel.WARNING)

    @pytest.mark.parametrize("formula", ["1&", "1x|", "00&1", ""])
    def test_parse_error(self, formula):
        assert main(["eval", formula]) == 2

    def test_parse_error_in_set_formula(self):
        assert main(["set", "A&", "1"]) == 2

    @pytest.mark.parametrize("sets", [["1,x"], ["1", "2"], ["1;2"]])
    def test_bad_set_arguments(self, sets):
        assert main(["set", "A", *sets]) == 3

    def test_entropy_failure(self, monkeypatch):
        def failing(*args, **kwargs):
            raise EntropyError("no entropy")

        monkeypatch.setattr(run_formula, "random_rpn_expr", failing)
        assert main(["eval", "-r"]) == 1

    def test_out_of_range_operand(self):
        assert main(["adder", "-1", "1"]) == 1

    def test_formula_and_random_are_exclusive(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["eval", "AB&", "-r"])
        assert exc_info.value.code == 2

    def test_missing_formula(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["nnf"])
        assert exc_info.value.code == 2

    def test_set_without_formula(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["set"])
        assert exc_info.value.code == 2


class TestSetArguments:
    """Test cases for parsing set arguments."""

    @pytest.mark.parametrize(
        "text, expected", [("0,1,2", [0, 1, 2]), ("", []), ("7", [7]), (" 3 , 4 ", [3, 4]), ("-2,5", [-2, 5])]
    )
    def test_parse(self, text, expected):
        assert parse_set_argument(text) == expected

    def test_invalid(self):
        with pytest.raises(SetArgumentError):
            parse_set_argument("a,b")

    def test_invalid_keeps_cause(self):
        with pytest.raises(SetArgumentError) as exc_info:
            parse_set_argument("1,x")
        assert isinstance(exc_info.value.__cause__, ValueError)
