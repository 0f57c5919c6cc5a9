"""Tests for the command-line front end."""

from __future__ import annotations

import pytest

from rpncalc import __version__
from rpncalc.cli import cli, main, parse_args, parse_operands
from rpncalc.exceptions import UsageError
from rpncalc import exit_codes


class TestSuccess:
    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["2", "3", "+"], "2 + 3 = 5"),
            (["2", "3", "-"], "2 - 3 = -1"),
            (["-4", "3", "x"], "-4 x 3 = -12"),
            (["9", "-2", "/"], "9 / -2 = -4"),
            (["2", "10", "^"], "2^10 = 1024"),
            (["0", "0", "^"], "0^0 = 1"),
            (["5", "!"], "fact(5) = 120"),
            (["0", "!"], "fact(0) = 1"),
            (["-5", "-3", "-"], "-5 - -3 = -2"),
        ],
    )
    def test_prints_result(self, run_cli, argv, expected):
        code, out, err = run_cli(*argv)
        assert code == exit_codes.SUCCESS
        assert out == expected + "\n"
        assert err == ""


class TestHelpAndVersion:
    @pytest.mark.parametrize("flag", ["-h", "--help"])
    def test_help(self, capsys, flag):
        with pytest.raises(SystemExit) as exc_info:
            main([flag])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "A B OP" in out
        assert "N !" in out
        assert "factorial" in out

    @pytest.mark.parametrize("flag", ["-V", "--version"])
    def test_version(self, capsys, flag):
        with pytest.raises(SystemExit) as exc_info:
            main([flag])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestUsageErrors:
    @pytest.mark.parametrize(
        "argv,message",
        [
            ([], "invalid number of arguments"),
            (["1"], "invalid number of arguments"),
            (["1", "2", "3", "+"], "invalid number of arguments"),
            (["1", "2", "3"], "unknown operation"),
            (["a", "2", "+"], "invalid integer: a"),
            (["1", "b", "+"], "invalid integer: b"),
            (["2147483648", "1", "+"], "invalid integer: 2147483648"),
            (["1", "2", "++"], "operation must be a single character"),
            (["1", "2", ""], "operation must be a single character"),
            (["5", "+"], "unary form requires '!': N !"),
            (["5", "!!"], "operation must be a single character"),
            (["5", "0", "!"], "'!' must be used in unary form: N !"),
            (["--foo", "1", "2", "+"], "unknown option: --foo"),
            (["-5x", "!"], "invalid integer: -5x"),
            (["9" * 5000, "1", "+"], "invalid integer: " + "9" * 5000),
            (["-" + "1" * 11, "!"], "invalid integer: -" + "1" * 11),
            (["2", "-v", "3", "+"], "invalid number of arguments"),
            (["2", "-v", "-3", "+"], "invalid number of arguments"),
            (["2", "3", "-v", "+"], "invalid number of arguments"),
        ],
    )
    def test_usage_error(self, run_cli, argv, message):
        code, out, err = run_cli(*argv)
        assert code == exit_codes.USAGE_ERROR
        assert out == ""
        assert err.startswith(f"Error: {message}\n")
        assert "usage:" in err


class TestRuntimeErrors:
    @pytest.mark.parametrize(
        "argv,message",
        [
            (["5", "0", "/"], "division by zero"),
            (["-2147483648", "-1", "/"], "overflow"),
            (["2147483647", "1", "+"], "overflow"),
            (["-2147483648", "1", "-"], "overflow"),
            (["65536", "65536", "x"], "overflow"),
            (["2", "31", "^"], "overflow"),
            (["13", "!"], "overflow"),
            (["-1", "!"], "factorial requires n >= 0"),
            (["2", "-1", "^"], "power requires exp >= 0"),
        ],
    )
    def test_runtime_error(self, run_cli, argv, message):
        code, out, err = run_cli(*argv)
        assert code == exit_codes.RUNTIME_ERROR
        assert out == ""
        assert err == f"Error: {message}\n"


class TestParsing:
    def test_negative_operand_is_not_an_option(self):
        _, calc = parse_args(["-7", "!"])
        assert calc.a == -7
        assert calc.op == "!"

    def test_minus_operator(self):
        _, calc = parse_args(["-1", "-2", "-"])
        assert (calc.a, calc.b, calc.op) == (-1, -2, "-")

    def test_verbose_flag(self):
        args, _ = parse_args(["-v", "1", "2", "+"])
        assert args.verbose is True

    def test_parse_operands_unary(self):
        calc = parse_operands(["4", "!"])
        assert (calc.a, calc.b, calc.op, calc.result) == (4, 0, "!", 0)

    def test_parse_operands_wrong_arity(self):
        with pytest.raises(UsageError):
            parse_operands(["1", "2", "3", "4"])


class TestEntryPoint:
    def test_cli_exits_with_main_code(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.argv", ["rpncalc", "5", "0", "/"])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        assert exc_info.value.code == exit_codes.RUNTIME_ERROR
        assert capsys.readouterr().err == "Error: division by zero\n"

    def test_cli_handles_keyboard_interrupt(self, monkeypatch):
        from rpncalc import cli as cli_module

        def interrupted(argv=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli_module, "main", interrupted)
        with pytest.raises(SystemExit) as exc_info:
            cli_module.cli()
        assert exc_info.value.code == exit_codes.KEYBOARD_INTERRUPT
