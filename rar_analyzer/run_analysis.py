"""Orchestration logic for analyzing a serialized build tree."""

import argparse

from rar_analyzer.analyze_build import analyze_build, iter_invocations
from rar_analyzer.dump_build_tree import dump_build_tree
from rar_analyzer.load_build_tree import load_build_tree
from rar_analyzer.load_config import load_config
from rar_analyzer.search_path_report import SearchPathReport


def run_analysis(args: argparse.Namespace) -> int:
    """Execute the full analysis pipeline."""
    if not args.tree.exists():
        msg = f"Build tree not found: {args.tree}"
        raise SystemExit(msg)

    config = load_config(args.config)
    root = load_build_tree(args.tree)
    analyzer = analyze_build(root, config)

    print(
        f"Analyzed {analyzer.invocation_count} invocation(s): "
        f"{len(analyzer.used_locations)} used, "
        f"{len(analyzer.unused_locations)} unused search-path location(s)"
    )
    for location in sorted(analyzer.unused_locations):
        print(f"  unused: {location}")

    if args.dry_run:
        return 0

    if args.out:
        dump_build_tree(root, args.out, sort_keys=config["output"]["sort_keys"])
        print(f"Wrote annotated tree to: {args.out}")

    if args.report:
        report = SearchPathReport(analyzer)
        for invocation in iter_invocations(root, config["task_names"]):
            report.add_invocation(invocation)
        report.generate_report(str(args.report))
        print(f"Wrote summary report to: {args.report}")

    return 0
