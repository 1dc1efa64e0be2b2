#!/usr/bin/env python3
# run_formula.py
# This file is part of Boole - An RPN Boolean Formula Toolkit
#
# Command-line interface for formula evaluation, rewriting and minimization

import sys
import argparse
from typing import Callable, Dict, List, Optional

from rpn import ParseError, Tree, parse
from core import eval_set, evaluate, find_model, SetEvaluationError
from rewrite import simplify, to_cnf, to_nnf
from minimizer import minimize
from exercises import adder, gray_code, multiplier, powerset
from utils.dot_graph import create_graph
from utils.expr_generator import (
    DEFAULT_DEPTH,
    MAX_RANDOM_VARIABLES,
    EntropyError,
    random_rpn_expr,
)
from utils.logger import configure_logging, get_logger
from utils.table_printer import DEFAULT_WORKERS, print_truth_table


EXIT_OK = 0
EXIT_RUNTIME_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_SET_ARGUMENT_ERROR = 3

REWRITES: Dict[str, Callable[[Tree], Tree]] = {
    "nnf": to_nnf,
    "cnf": to_cnf,
    "simplify": simplify,
    "minimize": minimize,
}


class SetArgumentError(ValueError):
    """Raised for a set argument that is not a comma-separated integer list."""

    pass


def parse_set_argument(text: str) -> List[int]:
    """Parse ``"0,1,2"`` into ``[0, 1, 2]``; the empty string is the empty set.

    Raises:
        SetArgumentError: An item is not an integer
    """
    items = [item.strip() for item in text.split(",")] if text.strip() else []
    try:
        return [int(item) for item in items]
    except ValueError as e:
        raise SetArgumentError(
            f"Invalid set '{text}': expected comma-separated integers"
        ) from e


def resolve_formula(args: argparse.Namespace) -> str:
    """Return the formula given on the command line or a random one.

    Raises:
        EntropyError: Random generation failed
    """
    if getattr(args, "random", False):
        formula = random_rpn_expr(args.max_vars, args.depth)
        print(formula)
        return formula
    return args.formula


def render_dot(args: argparse.Namespace, tree: Tree, suffix: str) -> None:
    if getattr(args, "dot", False):
        create_graph(tree.root, f"{args.command}_{suffix}")


def run_formula_command(args: argparse.Namespace) -> int:
    """Execute one of the formula subcommands and print its result."""
    logger = get_logger()

    formula = resolve_formula(args)
    tree = parse(formula)
    logger.formula_loaded(formula, tree.var_list)
    render_dot(args, tree, "in")

    if args.command == "eval":
        print("true" if evaluate(tree) else "false")

    elif args.command == "table":
        print_truth_table(formula, color=args.color, workers=args.workers)

    elif args.command == "sat":
        model = find_model(tree)
        if model is not None:
            assignment = " ".join(f"{name}={int(value)}" for name, value in model.items())
            logger.info(f"Satisfied by: {assignment or '(no variables)'}")
        print("true" if model is not None else "false")

    elif args.command == "set":
        sets = [parse_set_argument(text) for text in args.sets]
        print(eval_set(tree, sets))

    else:
        result = REWRITES[args.command](tree)
        render_dot(args, result, "out")
        print(result)

    return EXIT_OK


def run_exercise_command(args: argparse.Namespace) -> int:
    """Execute one of the numeric exercise subcommands."""
    if args.command == "adder":
        print(adder(args.a, args.b))
    elif args.command == "multiplier":
        print(multiplier(args.a, args.b))
    elif args.command == "gray":
        for n in args.numbers:
            print(f"{n} => {gray_code(n)} ({gray_code(n):b})")
    elif args.command == "powerset":
        print(powerset(args.items))
    return EXIT_OK


def add_random_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the options shaping the formula generated by -r."""
    parser.add_argument(
        "--max-vars",
        type=int,
        default=MAX_RANDOM_VARIABLES,
        help=f"Variables available to -r (default: {MAX_RANDOM_VARIABLES})",
    )
    parser.add_argument(
        "--depth",
        type=int,
        default=DEFAULT_DEPTH,
        help=f"Maximum nesting depth for -r (default: {DEFAULT_DEPTH})",
    )


def split_set_operands(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Split the positionals of the set command into ``formula`` and ``sets``.

    With -r every positional is a set; otherwise the first one is the formula.
    Exits with a usage error (code 2) when neither is given.
    """
    operands = list(args.operands)
    if args.random:
        args.formula, args.sets = None, operands
    elif operands:
        args.formula, args.sets = operands[0], operands[1:]
    else:
        parser.error("set: a formula or -r is required")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Boole RPN Boolean Formula Toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_formula.py eval "1011||="
  python run_formula.py table "AB&C|" -c
  python run_formula.py minimize "AB|!" -dc
  python run_formula.py nnf -r --debug
  python run_formula.py set "AB^" 0,1,2 0,3,4
  python run_formula.py set -r --max-vars 1 0,1,2

Formula alphabet:
  0 1      constants
  A..Z     variables
  !        negation (postfix)
  & | ^    and, or, xor
  > =      implication, equivalence
        """,
    )

    logging_options = argparse.ArgumentParser(add_help=False)
    logging_options.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    logging_options.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    formula_options = argparse.ArgumentParser(add_help=False)
    source = formula_options.add_mutually_exclusive_group(required=True)
    source.add_argument("formula", nargs="?", help="Formula in reverse Polish notation")
    source.add_argument(
        "-r", "--random", action="store_true", help="Use a randomly generated formula"
    )
    add_random_arguments(formula_options)
    formula_options.add_argument(
        "-d", "--dot", action="store_true", help="Write <command>_in/_out .dot and .svg files"
    )
    formula_options.add_argument(
        "-c", "--color", action="store_true", help="Colorize truth tables"
    )
    formula_options.add_argument(
        "--workers",
        type=int,
        default=DEFAULT_WORKERS,
        help=f"Threads used to print truth tables (default: {DEFAULT_WORKERS})",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    formula_help = {
        "eval": "Evaluate with every variable false",
        "table": "Print the truth table",
        "nnf": "Rewrite into negation normal form",
        "cnf": "Rewrite into conjunctive normal form by distribution",
        "simplify": "Simplify algebraically",
        "minimize": "Minimize into a minimum conjunctive normal form",
        "sat": "Test satisfiability",
    }
    for name, text in formula_help.items():
        commands.add_parser(name, help=text, parents=[logging_options, formula_options])

    set_command = commands.add_parser(
        "set", help="Evaluate over sets of integers", parents=[logging_options]
    )
    # A random formula leaves every positional to the sets, so the
    # formula/sets split happens after parsing (split_set_operands)
    set_command.add_argument(
        "operands",
        nargs="*",
        metavar="OPERAND",
        help="Formula (unless -r) followed by one comma-separated integer list per variable",
    )
    set_command.add_argument(
        "-r", "--random", action="store_true", help="Use a randomly generated formula"
    )
    add_random_arguments(set_command)
    set_command.add_argument(
        "-d", "--dot", action="store_true", help="Write set_in .dot and .svg files"
    )

    adder_command = commands.add_parser(
        "adder", help="Add two unsigned 32-bit integers", parents=[logging_options]
    )
    multiplier_command = commands.add_parser(
        "multiplier", help="Multiply two unsigned 32-bit integers", parents=[logging_options]
    )
    for command in (adder_command, multiplier_command):
        command.add_argument("a", type=int)
        command.add_argument("b", type=int)

    gray_command = commands.add_parser(
        "gray", help="Print Gray codes", parents=[logging_options]
    )
    gray_command.add_argument("numbers", type=int, nargs="+")

    powerset_command = commands.add_parser(
        "powerset", help="Print the power set of integers", parents=[logging_options]
    )
    powerset_command.add_argument("items", type=int, nargs="*")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the formula toolkit.

    Args:
        argv: Command line arguments (default: ``sys.argv[1:]``)

    Returns:
        Exit code (0 success, 1 runtime error, 2 parse error, 3 bad set argument)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    if args.command == "set":
        split_set_operands(parser, args)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.command in ("adder", "multiplier", "gray", "powerset"):
            return run_exercise_command(args)
        return run_formula_command(args)

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return EXIT_PARSE_ERROR

    except (SetArgumentError, SetEvaluationError) as e:
        logger.error(f"Set argument error: {e}")
        return EXIT_SET_ARGUMENT_ERROR

    except EntropyError as e:
        logger.error(f"Random formula error: {e}")
        return EXIT_RUNTIME_ERROR

    except (RuntimeError, ValueError) as e:
        logger.error(f"Error: {e}")
        return EXIT_RUNTIME_ERROR

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
