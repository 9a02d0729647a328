"""Suite tree representation of a FitNesse wiki.

This module provides classes for building a tree of tests, suites and static pages
from a FitNesse wiki directory and for querying the classification, tags and skip
status of each page.
"""

from .ancestor import Ancestor
from .suite_node import ROOT_NODE_NAME, SuiteNode
from .suite_tree import SuiteTree
from .traversal import FindAction, TraversalOrder

__all__ = [
    "Ancestor",
    "FindAction",
    "ROOT_NODE_NAME",
    "SuiteNode",
    "SuiteTree",
    "TraversalOrder",
]
