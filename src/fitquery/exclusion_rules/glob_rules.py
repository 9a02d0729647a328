"""Exclusion rules using glob patterns anchored at the suite tree root."""

from typing import List, Optional, Sequence, Tuple

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from fitquery.exceptions import ExclusionPatternError

from .base_rules import BaseExclusionRules

# Reserved top-level folders of a FitNesse wiki that hold no tests
STANDARD_EXCLUSIONS: Tuple[str, ...] = (
    "files",
    "FitNesse",
    "FrontPage",
    "HelpMenu",
    "ErrorLogs",
    "Recent Changes",
)


class GlobExclusionRules(BaseExclusionRules):
    """Exclusion rules built from glob patterns matched against root-relative paths.

    Each pattern is matched against the whole path of a directory relative to the root
    of the suite tree, so a plain name such as ``files`` only excludes the top-level
    ``files`` folder and not a ``files`` folder nested inside a suite. Patterns are
    compiled with the pathspec library after anchoring them at the root, which gives
    the following semantics:

    - ``*`` and ``?`` match within a single path segment
    - ``[abc]`` character classes match a single character
    - ``**`` matches across any number of segments
    - a pattern matching a directory also matches everything below it

    Unlike .gitignore files, there are no comments or negations: a leading ``#`` or
    ``!`` is a literal character of the folder name.

    Attributes:
        patterns (Tuple[str, ...]): The patterns in the order they were added.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GlobExclusionRules(["files", "Suite*/Scratch"])
        >>> rules.exclude("files")
        True
        >>> rules.exclude("files/images")
        True
        >>> rules.exclude("SuiteOne/Scratch")
        True
        >>> rules.exclude("SuiteOne/Deep/Scratch")
        False
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None):
        """Initialize GlobExclusionRules with the given patterns.

        Args:
            patterns: Glob patterns to exclude. Defaults to no patterns.

        Raises:
            ExclusionPatternError: If any pattern cannot be compiled.
            TypeError: If any pattern is not a string.
        """
        self._patterns: List[str] = []
        self.spec = PathSpec([])

        if patterns is not None:
            if isinstance(patterns, str):
                patterns = [patterns]
            for pattern in patterns:
                self.add_rule(pattern)

    @property
    def patterns(self) -> Tuple[str, ...]:
        return tuple(self._patterns)

    def exclude(self, path: str) -> bool:
        """Check if a root-relative directory path matches any of the patterns.

        Every path handed to the rules names a directory, so the path is also tried with
        a trailing slash. This lets directory-only patterns such as ``"Scratch/"`` match.

        Args:
            path: Directory path relative to the tree root, with forward slashes.

        Returns:
            bool: True if any pattern matches the path.

        Example:
            >>> GlobExclusionRules(["Scratch/"]).exclude("Scratch")
            True
        """
        if self.spec.match_file(path):
            return True
        return not path.endswith("/") and self.spec.match_file(path + "/")

    def add_rule(self, rule: str) -> None:
        """Add a single glob pattern.

        Args:
            rule: The pattern to add, e.g. ``"files"`` or ``"*/Scratch*"``.

        Raises:
            ExclusionPatternError: If the pattern cannot be compiled.
            TypeError: If the pattern is not a string.

        Example:
            >>> rules = GlobExclusionRules()
            >>> rules.exclude("ErrorLogs")
            False
            >>> rules.add_rule("ErrorLogs")
            >>> rules.exclude("ErrorLogs")
            True
        """
        if not isinstance(rule, str):
            raise TypeError(f"Exclusion pattern must be a string, got {type(rule)}")
        if not rule.strip():
            raise ExclusionPatternError(rule, "pattern is empty")

        # Anchor at the tree root so the pattern is matched against the full relative path
        anchored = rule if rule.startswith("/") else "/" + rule
        try:
            new_pattern = GitWildMatchPattern(anchored)
        except ValueError as e:
            raise ExclusionPatternError(rule, str(e)) from e

        # Ensure patterns is a list that supports append
        if not hasattr(self.spec.patterns, "append"):
            self.spec.patterns = list(self.spec.patterns)

        self.spec.patterns.append(new_pattern)
        self._patterns.append(rule)
