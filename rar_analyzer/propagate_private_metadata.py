"""Copy Private metadata from source assemblies onto dependency records."""

import logging

from rar_analyzer.node_kind import NodeKind
from rar_analyzer.rar_messages import PRIVATE_METADATA, REQUIRED_BY, extract_quoted
from rar_analyzer.tree_node import TreeNode

logger = logging.getLogger(__name__)

ASSEMBLIES_PARAMETER = "Assemblies"


def index_source_items(assemblies: TreeNode) -> dict[str, TreeNode]:
    """Map source item text (case-insensitive) to the first item carrying it."""
    index: dict[str, TreeNode] = {}
    for item in assemblies.children_of_kind(NodeKind.ITEM):
        index.setdefault(item.text.casefold(), item)
    return index


def propagate_private_metadata(
    parameters: TreeNode, required_by: list[TreeNode]
) -> int:
    """Attach the Private metadata of each source item to its "Required by" line.

    Returns the number of metadata nodes copied.
    """
    assemblies = parameters.find_named(ASSEMBLIES_PARAMETER)
    if assemblies is None:
        return 0

    source_items = index_source_items(assemblies)
    copied = 0
    for line in required_by:
        reference_name = extract_quoted(line.text, REQUIRED_BY)
        if reference_name is None:
            continue
        source_item = source_items.get(reference_name.casefold())
        if source_item is None:
            continue
        for metadata in source_item.children_of_kind(NodeKind.METADATA):
            if metadata.name == PRIVATE_METADATA:
                line.add_child(
                    TreeNode(
                        NodeKind.METADATA, name=metadata.name, value=metadata.value
                    )
                )
                copied += 1

    if copied:
        logger.debug("Copied %s Private metadata value(s)", copied)
    return copied
