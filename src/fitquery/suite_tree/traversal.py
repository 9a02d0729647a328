"""Enums controlling how a suite tree is walked."""

from enum import Enum


class TraversalOrder(str, Enum):
    """Order in which a node is visited relative to its children.

    Values:
        PRE: Visit a node before its children
        POST: Visit a node after all of its children
    """

    PRE = "pre"
    POST = "post"


class FindAction(str, Enum):
    """Decision returned by a find() visitor for the node it was just given.

    Values:
        CONTINUE: Descend into the node's children as usual
        PRUNE: Skip the node's descendants and carry on with its next sibling
        STOP: End the whole walk at this node
    """

    CONTINUE = "continue"
    PRUNE = "prune"
    STOP = "stop"
