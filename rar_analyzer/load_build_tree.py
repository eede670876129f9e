"""Logic for loading a serialized build tree (YAML or JSON)."""

from datetime import timedelta
from pathlib import Path
from typing import Any

import yaml

from rar_analyzer.node_kind import NodeKind
from rar_analyzer.tree_node import TreeNode


def _field(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def build_tree_from_dict(data: Any, path: str = "$") -> TreeNode:
    """Build a TreeNode (and its subtree) from a parsed mapping.

    ``path`` locates the node inside the document for error messages.
    """
    if not isinstance(data, dict):
        msg = f"{path}: expected a mapping, got {type(data).__name__}"
        raise ValueError(msg)

    raw_kind = data.get("kind")
    try:
        kind = NodeKind(raw_kind)
    except ValueError:
        msg = f"{path}: unknown node kind {raw_kind!r}"
        raise ValueError(msg) from None

    node = TreeNode(
        kind,
        name=_field(data, "name"),
        text=_field(data, "text"),
        value=_field(data, "value"),
        duration=timedelta(seconds=float(data.get("duration", 0) or 0)),
    )
    for i, child in enumerate(data.get("children") or []):
        node.add_child(build_tree_from_dict(child, f"{path}.children[{i}]"))
    return node


def load_build_tree(path: Path) -> TreeNode:
    """Load a build tree from a YAML or JSON file."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    return build_tree_from_dict(doc or {"kind": NodeKind.BUILD.value})
