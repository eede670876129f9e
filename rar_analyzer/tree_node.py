"""Generic diagnostic tree node for structured build logs."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import timedelta

from rar_analyzer.node_kind import TEXT_KINDS, NodeKind


@dataclass
class TreeNode:
    """A node of the build tree.

    Every node carries a kind tag; the remaining fields are only meaningful
    for some kinds (text for items and messages, value for metadata,
    duration for tasks).
    """

    kind: NodeKind
    name: str = ""
    text: str = ""
    value: str = ""
    duration: timedelta = field(default_factory=timedelta)
    children: list["TreeNode"] = field(default_factory=list)

    def __str__(self) -> str:
        """Render the node the way diagnostic matching expects."""
        if self.kind in TEXT_KINDS:
            return self.text
        if self.kind is NodeKind.METADATA:
            return f"{self.name}={self.value}"
        return self.name

    def add_child(self, child: "TreeNode") -> "TreeNode":
        """Append a child and return it."""
        self.children.append(child)
        return child

    def children_of_kind(self, kind: NodeKind) -> list["TreeNode"]:
        """Return the direct children with the given kind, in order."""
        return [c for c in self.children if c.kind is kind]

    def iter_descendants(self) -> Iterator["TreeNode"]:
        """Yield all descendants in depth-first pre-order (self excluded)."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_first_descendant(
        self,
        kind: NodeKind | None,
        predicate: Callable[["TreeNode"], bool],
    ) -> "TreeNode | None":
        """Return the first descendant of kind matching predicate, or None.

        A kind of None matches nodes of any kind.
        """
        for node in self.iter_descendants():
            if (kind is None or node.kind is kind) and predicate(node):
                return node
        return None

    def find_named(self, name: str, kind: NodeKind | None = None) -> "TreeNode | None":
        """Return the first descendant with the given name."""
        return self.find_first_descendant(kind, lambda n: n.name == name)

    def get_or_create_named_child(self, kind: NodeKind, name: str) -> "TreeNode":
        """Return the direct child with this kind and name, creating it if absent."""
        for child in self.children:
            if child.kind is kind and child.name == name:
                return child
        return self.add_child(TreeNode(kind, name=name))

    def sort_children(self) -> None:
        """Stable sort of the direct children by their rendering."""
        self.children.sort(key=str)
