"""Node kinds of a structured build log tree."""

from enum import Enum


class NodeKind(Enum):
    """Tag identifying what a TreeNode represents."""

    BUILD = "build"
    PROJECT = "project"
    TARGET = "target"
    TASK = "task"
    FOLDER = "folder"
    PARAMETER = "parameter"
    ITEM = "item"
    METADATA = "metadata"
    MESSAGE = "message"


TEXT_KINDS = frozenset({NodeKind.ITEM, NodeKind.MESSAGE})
