"""Interface shared by suite nodes and the suite tree that owns them."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class Ancestor(ABC):
    """Anything a suite node can have as its parent.

    Inherited properties are computed by walking up the parent chain. Every node is
    an ancestor of its children, and the suite tree itself is the parent of the root
    node, where it ends the walk with fixed answers: no tags and not skipped.
    """

    @property
    @abstractmethod
    def folder(self) -> Path:
        """Folder that child nodes are located in."""

    @abstractmethod
    def effective_tags(self) -> List[str]:
        """Tags that apply here, including inherited ones, sorted."""

    @abstractmethod
    def is_effectively_skipped(self) -> bool:
        """Whether this ancestor or any ancestor above it is marked as skipped."""
