"""Command-line entry point for the ResolveAssemblyReference search-path analysis."""

import argparse
import logging
from pathlib import Path

from rar_analyzer.run_analysis import run_analysis


def main() -> int:
    """Parse arguments and run the analysis."""
    ap = argparse.ArgumentParser(
        description=(
            "Report which ResolveAssemblyReference search paths a build actually "
            "used, and fill in missing Private metadata on dependencies."
        ),
    )
    ap.add_argument(
        "tree",
        type=Path,
        help="Serialized build tree (YAML or JSON)",
    )
    ap.add_argument(
        "--out",
        type=Path,
        help="Write the annotated build tree to this YAML file",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON summary of search-path usage to this file",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Analyze and print the summary without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_analysis(args)


if __name__ == "__main__":
    raise SystemExit(main())
