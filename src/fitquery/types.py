from enum import Enum
from os import PathLike
from typing import Sequence, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Accepted forms of a node path for lookups in a suite tree
NodePathType = Union[str, PathLike[str], Sequence[str]]


class NodeType(Enum):
    """Enumeration of page types in a FitNesse suite tree.

    The type is derived from the marker elements of a page's properties file. A page
    that carries more than one marker is classified by the first match in the order
    TEST, SUITE, STATIC.

    Attributes:
        TEST: Page marked as a Test
        SUITE: Page marked as a Suite
        STATIC: Page marked as a Static page
        UNCLASSIFIED: Page without any type marker (or without a properties file)
    """

    TEST = "test"
    SUITE = "suite"
    STATIC = "static"
    UNCLASSIFIED = "unclassified"
