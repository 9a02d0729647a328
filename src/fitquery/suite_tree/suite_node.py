"""Node representation for tests, suites and static pages in the suite tree."""

import logging
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING, Callable, FrozenSet, Iterator, List, Optional, Pattern, Set, Tuple, Union

from anytree import NodeMixin, PostOrderIter, PreOrderIter

from fitquery.properties.properties_file import (
    PRUNE_FLAG,
    STATIC_FLAG,
    SUITE_FLAG,
    TEST_FLAG,
    PropertiesFile,
    load_properties,
    parse_tag_list,
    properties_path,
    save_properties,
    validate_tag,
)
from fitquery.suite_tree.ancestor import Ancestor
from fitquery.suite_tree.file_identifier import FileIdentifier
from fitquery.suite_tree.traversal import FindAction, TraversalOrder
from fitquery.types import NodeType

if TYPE_CHECKING:
    from fitquery.suite_tree.suite_tree import SuiteTree

logger = logging.getLogger(__name__)

# Name of the node standing for the wiki root folder itself; never a valid page name
ROOT_NODE_NAME = "."

Visitor = Callable[["SuiteNode"], None]
FindVisitor = Callable[["SuiteNode"], Optional[FindAction]]


class SuiteNode(NodeMixin, Ancestor):  # type: ignore
    """A test, suite or static page in a FitNesse suite tree.

    A node corresponds to one folder of the wiki. Its type, skip marker and tags come
    from the folder's properties.xml file; the content of the page is ignored. Child
    nodes are created for every subfolder that is not excluded by the tree's exclusion
    rules, so constructing the root node scans the whole wiki.

    Extends anytree.NodeMixin, which provides the parent/children links and the node
    chain in ``path``. The anytree parent of the root node is the SuiteTree itself.

    Attributes:
        tree (SuiteTree): The tree this node is part of.
        parent (Ancestor): The parent node, or the tree itself for the root node.
        name (str): The folder name of the node (not the fully qualified name).
        folder (Path): The folder of the node.
        properties (Optional[PropertiesFile]): The parsed properties file, or None if it
            is missing or could not be parsed.
        children (tuple[SuiteNode]): The child nodes (inherited from anytree.NodeMixin).

    Example:
        >>> tree = SuiteTree("FitNesseRoot")  # doctest: +SKIP
        >>> node = tree.find_by_path("SuiteOne/TestLogin")  # doctest: +SKIP
        >>> node.is_runnable()  # doctest: +SKIP
        True
        >>> node.effective_tags()  # doctest: +SKIP
        ['nightly', 'smoke']
    """

    def __init__(
        self,
        tree: "SuiteTree",
        parent: Ancestor,
        name: str,
        branch: FrozenSet[FileIdentifier] = frozenset(),
    ) -> None:
        """Initialize a SuiteNode, attach it to its parent and build all of its descendants.

        Args:
            tree: The tree this node is part of.
            parent: The parent node, or the tree itself for the root node.
            name: The folder name of the node, or ROOT_NODE_NAME for the root node.
            branch: Identifiers of the folders of all ancestor nodes.

        Raises:
            OSError: If a folder of the subtree cannot be listed.
        """
        self.tree = tree
        self.name = str(name)
        self._folder = parent.folder if parent is tree else parent.folder / self.name

        self.properties: Optional[PropertiesFile] = load_properties(self._folder)
        self._explicit_tags: Set[str] = (
            parse_tag_list(self.properties.tag_list_text()) if self.properties is not None else set()
        )

        self.parent = parent
        self._scan_children(branch | {FileIdentifier.of(self._folder)})

    def _scan_children(self, branch: FrozenSet[FileIdentifier]) -> None:
        for entry in sorted(os.listdir(self._folder)):
            child_folder = self._folder / entry
            if not child_folder.is_dir():
                continue

            relative_path = child_folder.relative_to(self.tree.root_path).as_posix()
            if self.tree.exclusion_rules.exclude(relative_path):
                logger.debug("Excluding %s", relative_path)
                continue

            # A folder already on this branch means a symlink loop
            if FileIdentifier.of(child_folder) in branch:
                logger.debug("Not descending into %s: directory loop", relative_path)
                continue

            # Attaches itself to this node
            SuiteNode(self.tree, self, entry, branch)

    @property
    def folder(self) -> Path:
        return self._folder

    @property
    def is_root_node(self) -> bool:
        return self.parent is self.tree

    @property
    def path_segments(self) -> Tuple[str, ...]:
        """Names of the nodes from just below the root node down to this node."""
        # path starts with the tree and the root node
        return tuple(node.name for node in self.path[2:])

    @property
    def depth(self) -> int:
        """Number of levels below the root node; the root node is at depth 0."""
        return super().depth - 1

    @property
    def explicit_tags(self) -> List[str]:
        """Tags set directly on this node, sorted."""
        return sorted(self._explicit_tags)

    @property
    def node_type(self) -> NodeType:
        if self.is_test():
            return NodeType.TEST
        if self.is_suite():
            return NodeType.SUITE
        if self.is_static():
            return NodeType.STATIC
        return NodeType.UNCLASSIFIED

    def _has_flag(self, name: str) -> bool:
        return self.properties is not None and self.properties.has_flag(name)

    def is_test(self) -> bool:
        return self._has_flag(TEST_FLAG)

    def is_suite(self) -> bool:
        return self._has_flag(SUITE_FLAG)

    def is_static(self) -> bool:
        return self._has_flag(STATIC_FLAG)

    def is_explicitly_skipped(self) -> bool:
        """Check whether the Prune marker is set on this node itself."""
        return self._has_flag(PRUNE_FLAG)

    def is_effectively_skipped(self) -> bool:
        """Check whether the Prune marker is set on this node or any of its ancestors."""
        return self.is_explicitly_skipped() or self.parent.is_effectively_skipped()

    def is_runnable(self) -> bool:
        """Check whether this node is a test or suite that is neither static nor skipped."""
        return not self.is_static() and not self.is_effectively_skipped() and (self.is_test() or self.is_suite())

    def effective_tags(self) -> List[str]:
        """Get the tags set on this node or any of its ancestors.

        Returns:
            The union of this node's explicit tags and its parent's effective tags, in
            sorted order.
        """
        return sorted(self._explicit_tags.union(self.parent.effective_tags()))

    def has_tag(self, tag: Union[str, Pattern[str]], explicit_only: bool = False) -> bool:
        """Determine whether a tag applies to this node.

        Args:
            tag: The tag to look for. A string must match a whole tag, ignoring case. A
                compiled regular expression is searched for in each tag and its own
                flags, including case sensitivity, are respected.
            explicit_only: Look only at the tags set directly on this node instead of
                the effective tags.

        Returns:
            True if any tag in the chosen set matches.

        Raises:
            TypeError: If tag is neither a string nor a compiled regular expression.

        Example:
            >>> node.effective_tags()  # doctest: +SKIP
            ['Nightly', 'smoke']
            >>> node.has_tag("nightly")  # doctest: +SKIP
            True
            >>> node.has_tag(re.compile("^Smoke$"))  # doctest: +SKIP
            False
        """
        tags = self._explicit_tags if explicit_only else self.effective_tags()
        if isinstance(tag, re.Pattern):
            return any(tag.search(t) for t in tags)
        if isinstance(tag, str):
            wanted = tag.casefold()
            return any(t.casefold() == wanted for t in tags)
        raise TypeError(f"Tag must be a string or a compiled regular expression, got {type(tag)}")

    def add_tag(self, tag: str) -> None:
        """Set a new explicit tag on this node and write it to the properties file.

        The tag is added in memory first and stays there even if the file cannot be
        written. Write failures are logged, not raised. A node without a properties file
        gets a new one; an existing file that could not be parsed is never overwritten.

        Args:
            tag: The tag to add. Surrounding whitespace is removed.

        Raises:
            ValueError: If the tag is empty, contains a comma, or contains a character
                that cannot be stored in XML. Nothing is changed in that case.
        """
        tag = validate_tag(tag)

        self._explicit_tags.add(tag)

        if self.properties is None:
            if properties_path(self._folder).exists():
                logger.error("Not writing tag %r to %s: existing properties file could not be parsed", tag, self)
                return
            self.properties = PropertiesFile.new()

        self.properties.set_tag_list(self._explicit_tags)
        save_properties(self._folder, self.properties)

    def iter_nodes(self, order: TraversalOrder = TraversalOrder.PRE) -> Iterator["SuiteNode"]:
        """Iterate over this node and all of its descendants, depth first.

        Args:
            order: PRE yields each node before its children, POST after them.
        """
        if TraversalOrder(order) is TraversalOrder.POST:
            return PostOrderIter(self)
        return PreOrderIter(self)

    def __iter__(self) -> Iterator["SuiteNode"]:
        return self.iter_nodes(TraversalOrder.PRE)

    def traverse(self, visit: Visitor, order: TraversalOrder = TraversalOrder.PRE) -> None:
        """Call visit for this node and every descendant, each exactly once."""
        for node in self.iter_nodes(order):
            visit(node)

    def find(self, visit: FindVisitor) -> Optional["SuiteNode"]:
        """Walk this node and its descendants, letting the visitor cut branches off.

        Nodes are visited depth first, each before its children. The visitor's return
        value decides how the walk continues: PRUNE skips the descendants of the node
        just visited, STOP ends the walk, and CONTINUE (or None) descends as usual.

        Args:
            visit: Callable receiving each node and returning a FindAction or None.

        Returns:
            The node at which the visitor returned STOP, or None if the walk completed.

        Example:
            >>> # Collect tests, ignoring everything below a skipped node
            >>> tests = []
            >>> def visit(node):
            ...     if node.is_explicitly_skipped():
            ...         return FindAction.PRUNE
            ...     if node.is_test():
            ...         tests.append(node)
            >>> root_node.find(visit)  # doctest: +SKIP
        """
        result = visit(self)
        action = FindAction.CONTINUE if result is None else FindAction(result)
        if action is FindAction.STOP:
            return self
        if action is FindAction.PRUNE:
            return None
        for child in self.children:
            found = child.find(visit)
            if found is not None:
                return found
        return None

    def full_name(self, separator: str = os.sep) -> str:
        """Get the fully qualified name of this node.

        Args:
            separator: String placed between the names of the nodes. Defaults to the
                platform path separator.

        Returns:
            The names of the nodes from just below the root node down to this one. The
            root node's full name is the empty string.
        """
        return separator.join(self.path_segments)

    def indented_name(self, indent_unit: str = " ") -> str:
        """Get the name of the node, indented by one unit per level of depth.

        Example:
            >>> node.full_name("/")  # doctest: +SKIP
            'SuiteOne/SuiteTwo/TestLogin'
            >>> node.indented_name("-")  # doctest: +SKIP
            '---TestLogin'
        """
        return indent_unit * self.depth + self.name

    def _sort_key(self) -> Tuple[int, str]:
        return (self.depth, self.name)

    def compare(self, other: "SuiteNode") -> int:
        """Compare by depth, then by name.

        Returns:
            A negative number, zero or a positive number if this node sorts before, with,
            or after the other node.
        """
        mine, theirs = self._sort_key(), other._sort_key()
        return (mine > theirs) - (mine < theirs)

    def __lt__(self, other: "SuiteNode") -> bool:
        return self.compare(other) < 0

    def __str__(self) -> str:
        return self.full_name()

    def __repr__(self) -> str:
        return f"SuiteNode({self.full_name('/')!r})"
