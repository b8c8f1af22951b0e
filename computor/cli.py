"""Command line interface: ``computor "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"``."""

import argparse
import sys

from computor import settings as settings_store
from computor.engine import MODES, solve_polynomial_equation
from computor.errors import ComputorError, UnsupportedDegreeError
from computor.formatter import format_unsupported
from computor.logging_config import get_logger, setup_logging

_logger = get_logger("cli")

USAGE = 'Usage: computor "5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0"'


def _decimals(text: str) -> int:
    """``--decimals`` value, held to the same bounds as the settings file."""
    try:
        value = int(text)
        settings_store.validate_settings(dict(settings_store.DEFAULT_SETTINGS, max_decimals=value))
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="computor",
        description="Reduce and solve a polynomial equation of degree 2 or less.",
    )
    parser.add_argument("equation", nargs="*", help="the equation, quoted as one argument")
    parser.add_argument("--mode", choices=MODES, help="exact (default) or numerical arithmetic")
    parser.add_argument("--steps", action="store_true", help="print the step-by-step trail")
    parser.add_argument("--plot", metavar="PATH", help="save a graph of P(X) to PATH")
    parser.add_argument("--decimals", type=_decimals, metavar="N", help="digits shown for approximations")
    parser.add_argument("--settings", metavar="PATH", help="settings file to use")
    parser.add_argument("--history", action="store_true", help="print previously solved equations")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug information")
    return parser


def _print_steps(result: dict) -> None:
    for step in result["steps"]:
        print(f"Step {step['step_number']}: {step['description']}")
        print(f"    {step['expression']}")
    for check in result["verification_steps"]:
        print(f"Check: {check['expression']}")


def _plot(equation: str, path: str) -> None:
    from computor.engine import compute
    from computor.graph import build_figure, save_figure

    polynomial, solution_set = compute(equation)
    save_figure(build_figure(polynomial, solution_set), path)
    print(f"Graph saved to {path}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = settings_store.load_settings(args.settings)
    setup_logging("DEBUG" if args.verbose else config["log_level"])

    if args.history:
        for record in settings_store.get_history(args.settings):
            print(f"[{record['timestamp']}] {record['equation']}")
        return 0

    if len(args.equation) != 1:
        print("Wrong numbers of arguments")
        print(USAGE)
        return 2

    equation = args.equation[0]
    mode = args.mode or config["mode"]
    decimals = args.decimals if args.decimals is not None else config["max_decimals"]

    try:
        result = solve_polynomial_equation(equation, mode=mode, max_decimals=decimals)
    except UnsupportedDegreeError as e:
        print(format_unsupported(e))
        return 1
    except ComputorError as e:
        _logger.debug("rejected %r", equation, exc_info=True)
        print(f"Error ({e.kind}): {e}")
        return 1

    if args.steps or config["show_steps"]:
        _print_steps(result)
    print(result["final_answer"])

    if args.plot:
        _plot(equation, args.plot)
    if config["save_history"]:
        settings_store.add_history(equation, result["final_answer"], args.settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
