"""Logic for serializing an analyzed build tree."""

from pathlib import Path
from typing import Any

import yaml

from rar_analyzer.tree_node import TreeNode


def tree_to_dict(node: TreeNode) -> dict[str, Any]:
    """Convert a TreeNode to a plain mapping, omitting empty fields."""
    data: dict[str, Any] = {"kind": node.kind.value}
    if node.name:
        data["name"] = node.name
    if node.text:
        data["text"] = node.text
    if node.value:
        data["value"] = node.value
    if node.duration:
        data["duration"] = node.duration.total_seconds()
    if node.children:
        data["children"] = [tree_to_dict(c) for c in node.children]
    return data


def dump_build_tree(node: TreeNode, path: Path, *, sort_keys: bool = False) -> None:
    """Write the tree to path as YAML."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(tree_to_dict(node), sort_keys=sort_keys, allow_unicode=True),
        encoding="utf-8",
    )
