"""Suite tree representation of a FitNesse wiki with configurable exclusions.

This module provides the main SuiteTree class, which scans a FitNesse wiki folder
into a tree of SuiteNode objects and offers whole-tree traversal, lookup by name and
a summary report.
"""

import sys
from os import PathLike
from pathlib import Path, PurePath
from typing import Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from anytree import NodeMixin

from fitquery.exceptions import InvalidNodePathError
from fitquery.exclusion_rules.base_rules import BaseExclusionRules
from fitquery.exclusion_rules.glob_rules import STANDARD_EXCLUSIONS, GlobExclusionRules
from fitquery.suite_tree.ancestor import Ancestor
from fitquery.suite_tree.suite_node import ROOT_NODE_NAME, FindVisitor, SuiteNode, Visitor
from fitquery.suite_tree.traversal import FindAction, TraversalOrder
from fitquery.types import NodePathType, NodeType, PathType

_TYPE_MARKERS = {
    NodeType.TEST: "T",
    NodeType.SUITE: "S",
    NodeType.STATIC: "X",
    NodeType.UNCLASSIFIED: "?",
}


class SuiteTree(NodeMixin, Ancestor):  # type: ignore
    """A tree of the tests, suites and static pages of a FitNesse wiki.

    The whole folder hierarchy below root_path is scanned when the tree is created.
    Every folder that is not excluded becomes a SuiteNode; the folder root_path itself
    is represented by root_node. The tree is also the anytree parent of root_node and
    its only child. Inherited queries end there: it carries no tags and is never skipped.

    Exclusions are given either as glob patterns, matched against each folder's path
    relative to root_path, or as any BaseExclusionRules object. By default the reserved
    top-level folders of a FitNesse wiki (files, FitNesse, FrontPage, ...) are excluded.

    Attributes:
        root_path (Path): The root folder of the wiki.
        exclusion_patterns (Tuple[str, ...]): The glob patterns in use, or an empty tuple
            if a rules object was given.
        exclusion_rules (BaseExclusionRules): The rules consulted for each folder.
        root_node (SuiteNode): The node representing root_path.

    Example:
        >>> tree = SuiteTree("FitNesseRoot")  # doctest: +SKIP
        >>> tree.print_summary()  # doctest: +SKIP
        +?.
        +S  SuiteOne  [*nightly]
        -T    TestLogin  [nightly,*slow]
        >>> [node.full_name("/") for node in tree.runnable_nodes()]  # doctest: +SKIP
        ['SuiteOne']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_patterns: Optional[Union[Sequence[str], BaseExclusionRules]] = None,
    ) -> None:
        """Initialize a SuiteTree and scan the wiki.

        Args:
            root_path: Path to the wiki root folder. Can be any path-like object.
            exclusion_patterns: Glob patterns of folders to leave out of the tree, or a
                BaseExclusionRules object. Defaults to STANDARD_EXCLUSIONS.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            ExclusionPatternError: If an exclusion pattern cannot be compiled.
            OSError: If any folder of the wiki cannot be listed.
        """
        self.root_path = Path(root_path).absolute()

        if isinstance(exclusion_patterns, BaseExclusionRules):
            self.exclusion_patterns: Tuple[str, ...] = ()
            self.exclusion_rules: BaseExclusionRules = exclusion_patterns
        else:
            patterns = STANDARD_EXCLUSIONS if exclusion_patterns is None else exclusion_patterns
            glob_rules = GlobExclusionRules(patterns)
            self.exclusion_patterns = glob_rules.patterns
            self.exclusion_rules = glob_rules

        self._check_root_path()
        self.root_node = SuiteNode(self, self, ROOT_NODE_NAME)

    def _check_root_path(self) -> None:
        if not self.root_path.exists():
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not self.root_path.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

    def refresh(self) -> None:
        """Rescan the wiki to reflect the current state of the filesystem.

        The previous root node is detached from the tree, so previously returned nodes
        should no longer be queried.
        """
        self._check_root_path()
        self.root_node.parent = None
        self.root_node = SuiteNode(self, self, ROOT_NODE_NAME)

    @property
    def folder(self) -> Path:
        return self.root_path

    def effective_tags(self) -> List[str]:
        return []

    def is_effectively_skipped(self) -> bool:
        return False

    def iter_nodes(self, order: TraversalOrder = TraversalOrder.PRE) -> Iterator[SuiteNode]:
        return self.root_node.iter_nodes(order)

    def __iter__(self) -> Iterator[SuiteNode]:
        return self.root_node.iter_nodes(TraversalOrder.PRE)

    def traverse(self, visit: Visitor, order: TraversalOrder = TraversalOrder.PRE) -> None:
        self.root_node.traverse(visit, order)

    def find(self, visit: FindVisitor) -> Optional[SuiteNode]:
        return self.root_node.find(visit)

    def get_node_count(self) -> int:
        """Get the number of nodes in the tree, not counting the root node."""
        return sum(1 for node in self if not node.is_root_node)

    def runnable_nodes(self) -> List[SuiteNode]:
        """Get all runnable nodes in pre-order.

        Branches below a skipped node are pruned without being inspected.
        """
        runnable: List[SuiteNode] = []

        def visit(node: SuiteNode) -> FindAction:
            if node.is_explicitly_skipped():
                return FindAction.PRUNE
            if node.is_runnable():
                runnable.append(node)
            return FindAction.CONTINUE

        self.find(visit)
        return runnable

    @staticmethod
    def _split_node_path(node_path: NodePathType, separator: str) -> Tuple[str, ...]:
        if isinstance(node_path, str):
            segments: Sequence[str] = node_path.split(separator)
        elif isinstance(node_path, PathLike):
            pure_path = PurePath(node_path)
            segments = pure_path.parts[1:] if pure_path.anchor else pure_path.parts
        elif isinstance(node_path, (list, tuple)):
            if not all(isinstance(segment, str) for segment in node_path):
                raise InvalidNodePathError(node_path)
            segments = node_path
        else:
            raise InvalidNodePathError(node_path)
        return tuple(segment for segment in segments if segment)

    def find_by_path(self, node_path: NodePathType, separator: str = "/") -> Optional[SuiteNode]:
        """Find the node with the given fully qualified name.

        Args:
            node_path: The names of the nodes leading to the wanted node, given as a list
                or tuple of names, a separator-delimited string, or a path-like object.
            separator: The separator used when node_path is a string.

        Returns:
            The matching node, or None if there is none. The root node is never returned.

        Raises:
            InvalidNodePathError: If node_path is of an unsupported type.

        Example:
            >>> tree.find_by_path("SuiteOne/TestLogin")  # doctest: +SKIP
            SuiteNode('SuiteOne/TestLogin')
            >>> tree.find_by_path(["SuiteOne", "TestLogin"])  # doctest: +SKIP
            SuiteNode('SuiteOne/TestLogin')
            >>> tree.find_by_path("SuiteOne.TestLogin", separator=".")  # doctest: +SKIP
            SuiteNode('SuiteOne/TestLogin')
        """
        target = self._split_node_path(node_path, separator)
        if not target:
            return None

        def visit(node: SuiteNode) -> FindAction:
            segments = node.path_segments
            if segments != target[: len(segments)]:
                return FindAction.PRUNE
            if segments == target:
                return FindAction.STOP
            return FindAction.CONTINUE

        return self.find(visit)

    def stream_summary(self) -> Iterator[str]:
        """Generate a summary of the tree one line at a time.

        Each node is described on one line, in pre-order: '-' if it is effectively
        skipped or '+' otherwise, its type marker (T test, S suite, X static, ? none),
        its name indented by depth, and its effective tags if it has any. Tags set
        explicitly on the node are marked with '*'.

        Yields:
            One line per node, without a trailing newline.
        """
        for node in self:
            line = "-" if node.is_effectively_skipped() else "+"
            line += _TYPE_MARKERS[node.node_type]
            line += node.indented_name("  ")

            tags = node.effective_tags()
            if tags:
                explicit = set(node.explicit_tags)
                tags = [f"*{tag}" if tag in explicit else tag for tag in tags]
                line += f"  [{','.join(tags)}]"
            yield line

    def print_summary(self, file: Optional[TextIO] = None) -> None:
        """Print the summary of the tree.

        Args:
            file: Stream to write to. Defaults to standard output.
        """
        out = sys.stdout if file is None else file
        for line in self.stream_summary():
            print(line, file=out)

    def __repr__(self) -> str:
        return f"SuiteTree({str(self.root_path)!r})"
