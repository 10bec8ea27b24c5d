"""
domlineage CLI: read-only demo interface.

Commands:
    domlineage run            Evaluate the sample conditions, print a summary
    domlineage verdicts       One row per condition
    domlineage explain <n>    Witness explanation for condition n (1-based)

The CLI evaluates the bundled sample page only. It has no options that
change thresholds or conditions, and it never hides a failing verdict.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from ..designator import DesignatedObject
from ..errors import ConditionFailure, EvaluationError
from ..logging import get_logger
from ..verdict import Verdict
from .samples import SampleRun, run_samples

logger = get_logger("domlineage.cli")


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_status_badge(result: bool) -> str:
    return "[PASS]" if result else "[FAIL]"


def format_verdict_row(index: int, verdict: Verdict) -> str:
    badge = format_status_badge(verdict.get_result())
    return f"{badge} | #{index} | {verdict.condition_name} | witness: {len(verdict.witness)}"


def format_witness_leaf(leaf: DesignatedObject) -> str:
    lines = [f"  • object: {leaf.get_object()!r}"]
    designator = leaf.get_designator()
    if designator.is_trivial():
        lines.append("    path: (the object itself)")
    else:
        lines.append(f"    path: {designator}")
        lines.append(f"    steps: {len(designator)}")
    return "\n".join(lines)


def format_explanation(index: int, verdict: Verdict) -> str:
    lines = [
        f"Condition #{index}: {verdict.condition_name}",
        "=" * 50,
        f"Verdict: {format_status_badge(verdict.get_result())}",
        "",
        "WITNESS:",
    ]
    if not verdict.witness:
        lines.append("  (empty: no literal or input contributed to this verdict)")
    for leaf in verdict.get_witness():
        lines.append(format_witness_leaf(leaf))
    return "\n".join(lines)


def _evaluate() -> Optional[SampleRun]:
    try:
        return run_samples()
    except ConditionFailure as e:
        print("ERROR: Evaluation failed")
        for name, error in e.failures:
            print(f"  • {name}: {error.reason}")
    except EvaluationError as e:
        print("ERROR: Evaluation failed")
        print(f"Reason: {e}")
    return None


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_run(args: argparse.Namespace) -> int:
    """Evaluate the sample conditions and print a summary."""
    print("domlineage: sample page check")
    print("=" * 50)
    logger.info("Evaluating sample conditions")

    run = _evaluate()
    if run is None:
        return 1

    result = run.result
    verdicts = result.get_verdicts()
    failed = result.get_failed_verdicts()
    print(f"Conditions evaluated: {len(verdicts)}")
    print(f"Passed:               {len(verdicts) - len(failed)}")
    print(f"Failed:               {len(failed)}")
    print(f"Overall:              {format_status_badge(result.get_result())}")
    print()

    if failed:
        print("FAILURES:")
        for verdict in failed:
            print(verdict.explain())
        print()

    print("Run 'domlineage explain <n>' for a condition's full witness.")
    return 0


def cmd_verdicts(args: argparse.Namespace) -> int:
    """Show one row per condition."""
    run = _evaluate()
    if run is None:
        return 1

    for index, verdict in enumerate(run.result.get_verdicts(), start=1):
        print(format_verdict_row(index, verdict))
    return 0


def cmd_explain(args: argparse.Namespace) -> int:
    """Show the witness of one condition."""
    run = _evaluate()
    if run is None:
        return 1

    verdicts = run.result.get_verdicts()
    if not 1 <= args.index <= len(verdicts):
        print(f"Condition not found: #{args.index}")
        print()
        print("Available conditions:")
        for index, verdict in enumerate(verdicts, start=1):
            print(f"  #{index}: {verdict.condition_name}")
        return 1

    print(format_explanation(args.index, verdicts[args.index - 1]))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="domlineage",
        description="domlineage: explainable test oracles for web pages",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    run_parser = subparsers.add_parser(
        "run",
        help="Evaluate the sample conditions",
    )
    run_parser.set_defaults(func=cmd_run)

    verdicts_parser = subparsers.add_parser(
        "verdicts",
        help="Show one row per condition",
    )
    verdicts_parser.set_defaults(func=cmd_verdicts)

    explain_parser = subparsers.add_parser(
        "explain",
        help="Show the witness of a condition",
    )
    explain_parser.add_argument(
        "index",
        type=int,
        help="Condition number (as listed by 'verdicts')",
    )
    explain_parser.set_defaults(func=cmd_explain)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
