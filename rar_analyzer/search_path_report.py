"""Logic for generating a JSON summary of search-path usage."""

import json
import time
from pathlib import Path
from typing import Any

from rar_analyzer.node_kind import NodeKind
from rar_analyzer.resolve_assembly_reference_analyzer import (
    UNUSED_LOCATIONS_FOLDER,
    USED_LOCATIONS_FOLDER,
    ResolveAssemblyReferenceAnalyzer,
)
from rar_analyzer.tree_node import TreeNode


def _folder_lines(invocation: TreeNode, folder_name: str) -> list[str]:
    for child in invocation.children_of_kind(NodeKind.FOLDER):
        if child.name == folder_name:
            return [i.text for i in child.children_of_kind(NodeKind.ITEM)]
    return []


class SearchPathReport:
    """Collects per-invocation search-path usage and the build-wide totals."""

    def __init__(self, analyzer: ResolveAssemblyReferenceAnalyzer) -> None:
        """Initialize the report for an analyzer that has seen the whole build."""
        self.analyzer = analyzer
        self.invocations: list[dict[str, Any]] = []
        self.start_time = time.time()

    def add_invocation(self, invocation: TreeNode) -> None:
        """Record the used/unused locations attached to an analyzed invocation."""
        self.invocations.append(
            {
                "name": invocation.name,
                "duration": invocation.duration.total_seconds(),
                "used": _folder_lines(invocation, USED_LOCATIONS_FOLDER),
                "unused": _folder_lines(invocation, UNUSED_LOCATIONS_FOLDER),
            }
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the report as a JSON-serializable mapping."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "invocation_count": self.analyzer.invocation_count,
                "total_task_duration": self.analyzer.total_duration.total_seconds(),
            },
            "invocations": self.invocations,
            "used_locations": sorted(self.analyzer.used_locations),
            "unused_locations": sorted(self.analyzer.unused_locations),
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
