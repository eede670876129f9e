"""Run the ResolveAssemblyReference analysis over a whole build tree."""

import logging
from collections.abc import Iterator
from typing import Any

from rar_analyzer.node_kind import NodeKind
from rar_analyzer.resolve_assembly_reference_analyzer import (
    UNUSED_REPORT_TITLE,
    USED_REPORT_TITLE,
    ResolveAssemblyReferenceAnalyzer,
)
from rar_analyzer.tree_node import TreeNode

logger = logging.getLogger(__name__)


def iter_invocations(root: TreeNode, task_names: list[str]) -> Iterator[TreeNode]:
    """Yield the matching task nodes in build (pre-order) order."""
    names = set(task_names)
    for node in root.iter_descendants():
        if node.kind is NodeKind.TASK and node.name in names:
            yield node


def analyze_build(
    root: TreeNode, config: dict[str, Any]
) -> ResolveAssemblyReferenceAnalyzer:
    """Analyze every RAR invocation under root, then append the final report."""
    report_cfg = config.get("report", {})
    analyzer = ResolveAssemblyReferenceAnalyzer(
        used_title=report_cfg.get("used_title", USED_REPORT_TITLE),
        unused_title=report_cfg.get("unused_title", UNUSED_REPORT_TITLE),
    )

    # Materialized first: analysis adds folders under each invocation.
    for invocation in list(iter_invocations(root, config.get("task_names", []))):
        analyzer.analyze_invocation(invocation)

    analyzer.append_final_report(root)

    logger.info(
        "Analyzed %s invocation(s) in %.3fs of task time",
        analyzer.invocation_count,
        analyzer.total_duration.total_seconds(),
    )
    return analyzer
