#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Command-line interface for truth table generation with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from expression import Notation, compile_formula, normalize
from expression.exceptions import EngineError, TooManyVariables
from evaluation import TruthTable, build_truth_table, evaluate
from utils.config import DEFAULT_MAX_VARIABLES, EngineConfig
from utils.export import format_table, to_clipboard_text, to_csv, write_csv
from utils.logger import configure_logging, get_logger

OUTPUT_FORMATS = ("table", "tsv", "csv")


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def validate_formula(formula: str, notation: Notation) -> bool:
    """Check that a formula normalizes, compiles and evaluates.

    Evaluates a single all-false row, which is enough to expose arity errors
    since they do not depend on variable values.

    Args:
        formula: Formula text
        notation: Notation of the text

    Returns:
        True if formula is well-formed, False otherwise
    """
    logger = get_logger()
    try:
        compiled = compile_formula(formula, notation)
        if not compiled.variables:
            logger.debug("Validation failed: no variables")
            return False
        evaluate(compiled.postfix, {name: False for name in compiled.variables})
        return True
    except EngineError as e:
        logger.debug(f"Validation failed: {e}")
        return False


def resolve_config(args: argparse.Namespace) -> EngineConfig:
    """Build the engine configuration from parsed arguments."""
    if args.max_variables == 0:
        return EngineConfig(max_variables=None, notation=args.notation)
    return EngineConfig(max_variables=args.max_variables, notation=args.notation)


def render_table(table: TruthTable, output_format: str) -> str:
    """Render a table in one of OUTPUT_FORMATS."""
    if output_format == "tsv":
        return to_clipboard_text(table)
    if output_format == "csv":
        return to_csv(table)
    return format_table(table)


def print_summary(table: TruthTable) -> None:
    """Log variables, row count and classification of a finished table."""
    logger = get_logger()
    logger.info(f"Canonical form: {table.canonical}")
    logger.info(f"Postfix: {table.postfix}")
    logger.info(f"Variables: {', '.join(table.variables)} ({len(table)} rows)")
    logger.info(f"Classification: {table.classification}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth table generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py -e "p ∧ (q ∨ ¬r)"
  python run_truth_table.py -e "p AND (q OR NOT r)" -n words
  python run_truth_table.py -e "p => q" -n words --format csv -o table.csv
  python run_truth_table.py -f formula.txt --validate-only
  python run_truth_table.py -e "p ∧ ¬q" --convert-to words

Operator precedence (highest first):
  ¬ NOT, ∧ AND, ∨ OR, → IMPLIES, ↔ IFF
  Operators of equal precedence group left to right.
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expression", help="Formula text")
    source.add_argument(
        "-f", "--formula-file", type=Path, help="Path to a file holding the formula"
    )

    parser.add_argument(
        "-n",
        "--notation",
        type=Notation.coerce,
        default=Notation.SYMBOLIC,
        help="Notation of the formula: symbolic or words (default: symbolic)",
    )

    parser.add_argument(
        "--convert-to",
        type=Notation.coerce,
        help="Print the formula converted to this notation and exit",
    )

    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="table",
        dest="output_format",
        help="Output format for the table (default: table)",
    )

    parser.add_argument(
        "-o", "--output", type=Path, help="Also write the table as CSV to this path"
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Refuse formulas with more variables (default: {DEFAULT_MAX_VARIABLES}, 0 = no limit)",
    )

    parser.add_argument(
        "--validate-only", action="store_true", help="Only check the formula is well-formed"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth table generator.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.max_variables < 0:
            parser.error("--max-variables must not be negative")

        formula = (
            args.expression
            if args.expression is not None
            else read_formula_file(args.formula_file)
        )
        logger.info(f"Formula loaded: {formula}")

        if args.convert_to is not None:
            print(normalize(formula, args.notation, args.convert_to))
            return 0

        if args.validate_only:
            if validate_formula(formula, args.notation):
                logger.info("Formula is well-formed")
                return 0
            logger.error("Formula is malformed")
            return 1

        table = build_truth_table(formula, config=resolve_config(args))
        print_summary(table)
        print(render_table(table, args.output_format), end="")

        if args.output is not None:
            path = write_csv(table, args.output)
            logger.info(f"CSV written to {path}")

        return 0

    except TooManyVariables as e:
        logger.error(f"Formula too large: {e}")
        return 2

    except EngineError as e:
        logger.error(f"Formula error: {e}")
        return 1

    except (FileNotFoundError, ValueError, OSError) as e:
        logger.error(f"File error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return 5


if __name__ == "__main__":
    sys.exit(main())
