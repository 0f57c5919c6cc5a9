"""Command-line front end for rpncalc.

This module is the error boundary of the package: it turns
:class:`~rpncalc.exceptions.UsageError` and
:class:`~rpncalc.exceptions.MathError` into messages on stderr and the
exit codes defined in :mod:`rpncalc.exit_codes`.

Invocation forms::

    rpncalc A B OP      binary operation, OP in + - x / ^
    rpncalc N !         factorial
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from typing import NoReturn

from rpncalc import __version__, exit_codes
from rpncalc.core import FACTORIAL, Calculation, calculate, check, format_result
from rpncalc.exceptions import MathError, UsageError
from rpncalc.validators import parse_int

logger = logging.getLogger(__name__)

PROG = "rpncalc"
_NEGATIVE_INT_RE = re.compile(r"-[0-9]+")

OPERATIONS_HELP = """\
operations:
  +  addition
  -  subtraction
  x  multiplication
  /  division
  ^  power
  !  factorial
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on malformed input."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        usage="%(prog)s [options] A B OP\n       %(prog)s [options] N !",
        description="Integer calculator taking its operator last (RPN style).",
        epilog=OPERATIONS_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log each pipeline stage to stderr",
    )
    parser.add_argument(
        "operands",
        nargs="*",
        metavar="ARG",
        help="two operands and an operator, or one operand and '!'",
    )
    return parser


def _is_negative_number_token(token: str) -> bool:
    return len(token) > 1 and token[0] == "-" and "0" <= token[1] <= "9"


def _is_leftover_operand(token: str) -> bool:
    # Operands split by an option come back from argparse as extras
    if token == "-" or not token.startswith("-"):
        return True
    return _NEGATIVE_INT_RE.fullmatch(token) is not None


def _parse_operator(token: str) -> str:
    if len(token) != 1:
        raise UsageError("operation must be a single character")
    return token


def parse_operands(operands: list[str]) -> Calculation:
    """
    Build a calculation from the positional arguments.

    Args:
        operands: ``[A, B, OP]`` or ``[N, "!"]``

    Returns:
        An unchecked :class:`Calculation`

    Raises:
        UsageError: On wrong arity, bad integers or a misplaced operator
    """
    if len(operands) == 2:
        calc = Calculation(a=parse_int(operands[0]))
        calc.op = _parse_operator(operands[1])
        if calc.op != FACTORIAL:
            raise UsageError("unary form requires '!': N !")
        return calc

    if len(operands) == 3:
        calc = Calculation(a=parse_int(operands[0]), b=parse_int(operands[1]))
        calc.op = _parse_operator(operands[2])
        if calc.op == FACTORIAL:
            raise UsageError("'!' must be used in unary form: N !")
        return calc

    raise UsageError("invalid number of arguments")


def parse_args(
    argv: list[str] | None, parser: argparse.ArgumentParser | None = None
) -> tuple[argparse.Namespace, Calculation]:
    """
    Parse the full argument vector.

    ``-h`` and ``-V`` print and raise ``SystemExit(0)`` as argparse does.

    Raises:
        UsageError: For unknown options, operands split by an option
            or malformed operands
    """
    if parser is None:
        parser = _build_parser()

    args, extras = parser.parse_known_args(argv)
    for token in extras:
        if _is_leftover_operand(token):
            raise UsageError("invalid number of arguments")
        if _is_negative_number_token(token):
            raise UsageError("invalid integer", token)
        raise UsageError("unknown option", token)

    return args, parse_operands(args.operands)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _print_error(message: object) -> None:
    print(f"Error: {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run rpncalc.

    Parameters
    ----------
    argv:
        Explicit argument list. When ``None``, ``sys.argv[1:]`` is used.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    SystemExit
        With code 0 after ``-h``/``--help`` or ``-V``/``--version``, as
        raised by argparse once the text is printed.
    """
    parser = _build_parser()

    try:
        args, calc = parse_args(argv, parser)
        _configure_logging(args.verbose)
        logger.debug("parsed %r", calc)

        check(calc)
        calculate(calc)
    except UsageError as exc:
        _print_error(exc)
        parser.print_help(sys.stderr)
        return exit_codes.USAGE_ERROR
    except MathError as exc:
        _print_error(exc)
        return exit_codes.RUNTIME_ERROR

    print(format_result(calc))
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point."""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
