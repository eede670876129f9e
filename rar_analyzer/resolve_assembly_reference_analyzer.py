"""Search-path usage analysis for ResolveAssemblyReference task invocations."""

import logging
from datetime import timedelta

from rar_analyzer.node_kind import NodeKind
from rar_analyzer.propagate_private_metadata import propagate_private_metadata
from rar_analyzer.rar_messages import (
    NOT_COPY_LOCAL_BECAUSE_PRIVATE_METADATA,
    REFERENCE_FOUND_AT,
    REQUIRED_BY,
    RESOLVED_FILE_PATH_IS,
    extract_quoted,
    is_dependency_record,
)
from rar_analyzer.tree_node import TreeNode

logger = logging.getLogger(__name__)

RESULTS_FOLDER = "Results"
PARAMETERS_FOLDER = "Parameters"
SEARCH_PATHS = "SearchPaths"
USED_LOCATIONS_FOLDER = "Used locations"
UNUSED_LOCATIONS_FOLDER = "Unused locations"
USED_REPORT_TITLE = "Used search-path locations"
UNUSED_REPORT_TITLE = "Unused search-path locations"


def add_line(container: TreeNode, text: str) -> None:
    """Append an item with text unless the container already lists it."""
    for item in container.children_of_kind(NodeKind.ITEM):
        if item.text == text:
            return
    container.add_child(TreeNode(NodeKind.ITEM, text=text))


def _first_quoted_value(reference: TreeNode, prefix: str) -> str | None:
    line = reference.find_first_descendant(
        NodeKind.ITEM, lambda i: str(i).startswith(prefix)
    )
    if line is None:
        return None
    return extract_quoted(str(line), prefix)


class ResolveAssemblyReferenceAnalyzer:
    """Accumulates search-path usage across the RAR invocations of one build.

    Create one instance per build, call analyze_invocation for every
    invocation in build order, then append_final_report once.
    """

    def __init__(
        self,
        used_title: str = USED_REPORT_TITLE,
        unused_title: str = UNUSED_REPORT_TITLE,
    ) -> None:
        """Initialize empty build-wide state."""
        self.used_title = used_title
        self.unused_title = unused_title
        self.total_duration = timedelta()
        self.invocation_count = 0
        self.used_locations: set[str] = set()
        self.unused_locations: set[str] = set()
        self.current_used_locations: set[str] = set()

    def analyze_invocation(self, invocation: TreeNode) -> None:
        """Analyze one task invocation, annotating it in place."""
        self.current_used_locations.clear()

        results = invocation.find_named(RESULTS_FOLDER, NodeKind.FOLDER)
        parameters = invocation.find_named(PARAMETERS_FOLDER, NodeKind.FOLDER)

        self.total_duration += invocation.duration
        self.invocation_count += 1

        search_paths: list[str] | None = None
        if parameters is not None:
            search_paths_node = parameters.find_named(SEARCH_PATHS)
            if search_paths_node is not None:
                search_paths = [str(c) for c in search_paths_node.children]

        if results is not None:
            results.sort_children()
            for reference in results.children_of_kind(NodeKind.PARAMETER):
                self._analyze_reference(reference, parameters)

        if search_paths is not None:
            self.reconcile_search_paths(invocation, search_paths)

    def _analyze_reference(
        self, reference: TreeNode, parameters: TreeNode | None
    ) -> None:
        resolved_path = _first_quoted_value(reference, RESOLVED_FILE_PATH_IS)
        location = _first_quoted_value(reference, REFERENCE_FOUND_AT)

        # A reference passed by file path "is found" at its own resolved path.
        if location is not None and location != resolved_path:
            self.used_locations.add(location)
            self.current_used_locations.add(location)
            # Used anywhere means never unused, even if not declared here.
            self.unused_locations.discard(location)

        if not is_dependency_record(reference.name):
            return

        required_by: list[TreeNode] = []
        not_copy_local = False
        for message in reference.children_of_kind(NodeKind.ITEM):
            if message.text.startswith(REQUIRED_BY):
                required_by.append(message)
            elif message.text == NOT_COPY_LOCAL_BECAUSE_PRIVATE_METADATA:
                not_copy_local = True

        if not_copy_local and parameters is not None:
            propagate_private_metadata(parameters, required_by)

    def reconcile_search_paths(
        self, invocation: TreeNode, search_paths: list[str]
    ) -> None:
        """Classify each declared search path as used or unused by this invocation."""
        for search_path in search_paths:
            if search_path in self.current_used_locations:
                used = invocation.get_or_create_named_child(
                    NodeKind.FOLDER, USED_LOCATIONS_FOLDER
                )
                add_line(used, search_path)
                self.unused_locations.discard(search_path)
            else:
                unused = invocation.get_or_create_named_child(
                    NodeKind.FOLDER, UNUSED_LOCATIONS_FOLDER
                )
                add_line(unused, search_path)
                if search_path in self.used_locations:
                    self.unused_locations.discard(search_path)
                else:
                    self.unused_locations.add(search_path)

        logger.debug(
            "%s: %s search path(s), %s used",
            invocation.name,
            len(search_paths),
            len(self.current_used_locations),
        )

    def append_final_report(self, root: TreeNode) -> None:
        """Append the build-wide used/unused search-path summaries to root."""
        if self.used_locations:
            used = root.get_or_create_named_child(NodeKind.FOLDER, self.used_title)
            for location in sorted(self.used_locations):
                add_line(used, location)

        if self.unused_locations:
            unused = root.get_or_create_named_child(NodeKind.FOLDER, self.unused_title)
            for location in sorted(self.unused_locations):
                add_line(unused, location)
