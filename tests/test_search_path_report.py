"""Tests for the SearchPathReport logic."""

import json
from datetime import timedelta
from pathlib import Path

from rar_analyzer.node_kind import NodeKind
from rar_analyzer.resolve_assembly_reference_analyzer import (
    ResolveAssemblyReferenceAnalyzer,
)
from rar_analyzer.search_path_report import SearchPathReport
from rar_analyzer.tree_node import TreeNode


def _invocation() -> TreeNode:
    task = TreeNode(
        NodeKind.TASK, name="ResolveAssemblyReference", duration=timedelta(seconds=2)
    )
    parameters = task.add_child(TreeNode(NodeKind.FOLDER, name="Parameters"))
    sp = parameters.add_child(TreeNode(NodeKind.PARAMETER, name="SearchPaths"))
    for path in ("{HintPathFromItem}", "C:\\libs", "C:\\extra"):
        sp.add_child(TreeNode(NodeKind.ITEM, text=path))
    results = task.add_child(TreeNode(NodeKind.FOLDER, name="Results"))
    ref = results.add_child(TreeNode(NodeKind.PARAMETER, name="A"))
    found = 'Reference found at search path location "C:\\libs".'
    ref.add_child(TreeNode(NodeKind.ITEM, text=found))
    return task


def test_search_path_report_generation(tmp_path: Path) -> None:
    """Verify that the summary report is generated correctly."""
    analyzer = ResolveAssemblyReferenceAnalyzer()
    task = _invocation()
    analyzer.analyze_invocation(task)

    report = SearchPathReport(analyzer)
    report.add_invocation(task)

    output_file = tmp_path / "report.json"
    report.generate_report(str(output_file))

    assert output_file.exists()
    content = json.loads(output_file.read_text(encoding="utf-8"))

    assert content["meta"]["invocation_count"] == 1
    assert content["meta"]["total_task_duration"] == 2  # noqa: PLR2004
    assert content["used_locations"] == ["C:\\libs"]
    assert content["unused_locations"] == ["C:\\extra", "{HintPathFromItem}"]

    invocation = content["invocations"][0]
    assert invocation["name"] == "ResolveAssemblyReference"
    assert invocation["used"] == ["C:\\libs"]
    assert invocation["unused"] == ["{HintPathFromItem}", "C:\\extra"]


def test_report_for_unanalyzed_invocation() -> None:
    """Verify that an invocation without folders reports empty lists."""
    report = SearchPathReport(ResolveAssemblyReferenceAnalyzer())
    report.add_invocation(TreeNode(NodeKind.TASK, name="ResolveAssemblyReference"))
    data = report.to_dict()
    assert data["invocations"][0]["used"] == []
    assert data["invocations"][0]["unused"] == []
    assert data["used_locations"] == []
