"""
Howard CLI.

Commands:
    howard name <name>...       — Show generated claim names
    howard bench                — Run the claim performance suite

Global options:
    --log-level LEVEL           — Logging level (default: HOWARD_LOG_LEVEL or WARNING)
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from .bench import BenchmarkError, BenchmarkResult, run_benchmarks
from ..naming import name_for_guard, name_for_predicate


LOG_LEVEL_ENV_VAR = "HOWARD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_name_row(name: str, claim_name: str) -> str:
    """Format a single name transformation."""
    return f"{name} -> {claim_name}"


def format_duration(seconds: float) -> str:
    """Format a duration with a readable unit."""
    if seconds >= 1:
        return f"{seconds:.3f} s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f} ms"
    return f"{seconds * 1e6:.1f} us"


def format_benchmark_table(results: list[BenchmarkResult]) -> str:
    """Format benchmark results as a plain-text table."""
    width = max((len(r.name) for r in results), default=4)

    lines = [
        f"{'case':<{width}} | {'mean':>12} | {'min':>12} | {'max':>12} | {'checks/s':>14}",
        "-" * (width + 64),
    ]
    for result in results:
        lines.append(
            f"{result.name:<{width}} | "
            f"{format_duration(result.mean):>12} | "
            f"{format_duration(result.min):>12} | "
            f"{format_duration(result.max):>12} | "
            f"{result.ops_per_sec:>14,.0f}"
        )
    return "\n".join(lines)


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_name(args: argparse.Namespace) -> int:
    """Show the claim name generated for each function name."""
    transform = name_for_guard if args.guard else name_for_predicate

    for name in args.names:
        print(format_name_row(name, transform(name)))

    return 0


def cmd_bench(args: argparse.Namespace) -> int:
    """Run the claim performance suite."""
    try:
        results = run_benchmarks(sample_size=args.samples, rounds=args.rounds)
    except (BenchmarkError, ValueError) as e:
        print("ERROR: Benchmark failed")
        print(f"Reason: {e}")
        return 1

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return 0

    print("Howard — Claim Performance")
    print("=" * 50)
    print(f"Samples: {results[0].samples}  Rounds: {results[0].rounds}")
    print()
    print(format_benchmark_table(results))

    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="howard",
        description="Howard — composable claims over predicates and type guards",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Name command
    name_parser = subparsers.add_parser(
        "name",
        help="Show generated claim names",
    )
    name_parser.add_argument(
        "names",
        nargs="+",
        help="Function names to transform (e.g. isUser hasCart)",
    )
    name_parser.add_argument(
        "--guard",
        action="store_true",
        help="Use type guard naming (isUser -> aUser)",
    )
    name_parser.set_defaults(func=cmd_name)

    # Bench command
    bench_parser = subparsers.add_parser(
        "bench",
        help="Run the claim performance suite",
    )
    bench_parser.add_argument(
        "--samples",
        type=int,
        default=None,
        help="Number of samples per case",
    )
    bench_parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Timed rounds per case",
    )
    bench_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    bench_parser.set_defaults(func=cmd_bench)

    return parser


def configure_logging(level_name: str) -> None:
    name = level_name.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level_name}")
    level = getattr(logging, name)

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(levelname)s %(name)s: %(message)s",
        )
    root_logger.setLevel(level)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"ERROR: {e}")
        return 1

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
