"""
branchseed: CLI Module

Command-line interface for generating, exporting and auditing sample branch
data.

Usage:
    python -m branchseed generate branch-001 --now 2024-01-01
    python -m branchseed export branch-001 --table credit-officers -o co.csv
    python -m branchseed stats --samples 10000
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import date
from typing import Any, Optional

from .exceptions import BranchSeedError
from .export import TABLES, export_table
from .generator import (
    MISSED_REPORT_COUNT_RANGE,
    REPORT_COUNT_RANGE,
    ROSTER_SIZE_RANGE,
    BranchDataGenerator,
)
from .pools import SamplePools, default_pools, load_pools

# Accepted band for the share of active officers across many branches
ACTIVE_SHARE_BAND = (0.75, 0.85)


def parse_date(value: str) -> date:
    """argparse type for YYYY-MM-DD dates."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid date '{value}' (expected YYYY-MM-DD)"
        ) from None


def positive_int(value: str) -> int:
    """argparse type for counts of at least 1."""
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        raise argparse.ArgumentTypeError(
            f"invalid count '{value}' (expected an integer of at least 1)"
        )
    return number


def _resolve_pools(path: Optional[str]) -> SamplePools:
    if path:
        return load_pools(path)
    return default_pools()


# =============================================================================
# Stats
# =============================================================================

def collect_stats(
    samples: int,
    prefix: str = "branch-",
    pools: Optional[SamplePools] = None,
    now: Optional[date] = None,
) -> dict[str, Any]:
    """
    Generate `samples` bundles and gather distribution statistics.

    Args:
        samples: Number of branch ids to generate ({prefix}0 .. {prefix}N-1)
        prefix: Branch id prefix
        pools: Sample pools (defaults to the packaged pools)
        now: Fixed generation date

    Returns:
        Dict with min/max counts and officer status totals
    """
    generator = BranchDataGenerator(pools=pools, now=now)
    active_status = generator.pools.active_status

    results: dict[str, Any] = {
        "samples": samples,
        "officers": {"min": None, "max": None},
        "reports": {"min": None, "max": None},
        "missed_reports": {"min": None, "max": None},
        "officer_total": 0,
        "active_total": 0,
        "duplicate_rosters": 0,
    }

    for i in range(samples):
        bundle = generator.generate(f"{prefix}{i}")
        counts = {
            "officers": len(bundle.credit_officers),
            "reports": len(bundle.reports),
            "missed_reports": len(bundle.missed_reports),
        }
        for key, count in counts.items():
            band = results[key]
            band["min"] = count if band["min"] is None else min(band["min"], count)
            band["max"] = count if band["max"] is None else max(band["max"], count)

        names = [o.name for o in bundle.credit_officers]
        if len(set(names)) != len(names):
            results["duplicate_rosters"] += 1

        results["officer_total"] += counts["officers"]
        results["active_total"] += bundle.count_officers(active_status)

    return results


def verify_stats(results: dict[str, Any]) -> list[str]:
    """Return a list of verification failures (empty when all checks pass)."""
    errors: list[str] = []
    if results["samples"] <= 0:
        return ["No samples generated"]

    expected = {
        "officers": ROSTER_SIZE_RANGE,
        "reports": REPORT_COUNT_RANGE,
        "missed_reports": MISSED_REPORT_COUNT_RANGE,
    }
    for key, (low, high) in expected.items():
        band = results[key]
        if band["min"] < low or band["max"] > high:
            errors.append(
                f"{key} count range {band['min']}-{band['max']} outside {low}-{high}"
            )

    if results["duplicate_rosters"]:
        errors.append(f"{results['duplicate_rosters']} rosters contain duplicate names")

    share = results["active_total"] / results["officer_total"]
    low, high = ACTIVE_SHARE_BAND
    if not low <= share <= high:
        errors.append(f"Active share {share:.3f} outside {low:.2f}-{high:.2f}")

    return errors


def print_stats(results: dict[str, Any], errors: list[str]) -> None:
    """Print the distribution report."""
    print("=" * 60)
    print("SAMPLE BRANCH DATA DISTRIBUTION REPORT")
    print("=" * 60)
    print()
    print(f"  Branches generated: {results['samples']}")
    print()

    print(f"{'Table':<20} {'Min':>8} {'Max':>8}")
    print("-" * 60)
    for key in ("officers", "reports", "missed_reports"):
        band = results[key]
        print(f"{key:<20} {band['min']!s:>8} {band['max']!s:>8}")
    print("-" * 60)
    print()

    if results["officer_total"]:
        share = results["active_total"] / results["officer_total"]
        print("STATUS DISTRIBUTION")
        print("-" * 60)
        print(f"  Officers:        {results['officer_total']}")
        print(f"  Active share:    {share * 100:5.1f}%")
        print()

    print("VERIFICATION")
    print("-" * 60)
    if errors:
        for error in errors:
            print(f"  [FAIL] {error}")
    else:
        print("  [PASS] All counts within bounds")
        print("  [PASS] Rosters have unique names")
        print("  [PASS] Active share within expected band")
    print()
    print("=" * 60)


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args: argparse.Namespace) -> int:
    """Print one bundle as JSON."""
    generator = BranchDataGenerator(pools=_resolve_pools(args.pools), now=args.now)
    bundle = generator.generate(args.branch_id)
    print(bundle.to_json(indent=args.indent))
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    """Export one bundle table as CSV."""
    generator = BranchDataGenerator(pools=_resolve_pools(args.pools), now=args.now)
    csv_text = export_table(generator.generate(args.branch_id), args.table)

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(csv_text)
        print(f"Wrote {args.table} to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(csv_text)
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Generate many bundles and verify their distribution."""
    results = collect_stats(
        samples=args.samples,
        prefix=args.prefix,
        pools=_resolve_pools(args.pools),
        now=args.now,
    )
    errors = verify_stats(results)
    print_stats(results, errors)
    return 1 if errors else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Deterministic sample branch data for the loan dashboard",
        prog="branchseed",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    # Options shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--pools",
        default=os.getenv("BS_POOLS_FILE"),
        help="Path to a sample pool YAML file (default: packaged pools)",
    )
    common.add_argument(
        "--now",
        type=parse_date,
        default=None,
        help="Generation date YYYY-MM-DD (default: today)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    gen_parser = subparsers.add_parser(
        "generate", parents=[common], help="Print a branch bundle as JSON",
    )
    gen_parser.add_argument("branch_id", help="Branch identifier (seed)")
    gen_parser.add_argument("--indent", type=int, default=2, help="JSON indent")
    gen_parser.set_defaults(func=cmd_generate)

    export_parser = subparsers.add_parser(
        "export", parents=[common], help="Export a bundle table as CSV",
    )
    export_parser.add_argument("branch_id", help="Branch identifier (seed)")
    export_parser.add_argument(
        "--table", "-t",
        choices=sorted(TABLES),
        required=True,
        help="Table to export",
    )
    export_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    export_parser.set_defaults(func=cmd_export)

    stats_parser = subparsers.add_parser(
        "stats", parents=[common], help="Verify distributions over many branches",
    )
    stats_parser.add_argument("--samples", type=positive_int, default=1000, help="Branches to generate")
    stats_parser.add_argument("--prefix", default="branch-", help="Branch id prefix")
    stats_parser.set_defaults(func=cmd_stats)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except BranchSeedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
