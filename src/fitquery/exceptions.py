from typing import Any


class ExclusionPatternError(ValueError):
    """
    Exception raised when an exclusion pattern cannot be compiled.

    Exclusion patterns are applied while the suite tree is being built, so an invalid
    pattern fails the whole tree construction instead of producing a partially
    filtered tree.

    Attributes:
        pattern (str): The pattern that failed to compile.

    Example:
        >>> error = ExclusionPatternError("Recent\\\\")
        >>> error.pattern
        'Recent\\\\'
    """

    def __init__(self, pattern: str, reason: str = "") -> None:
        """
        Initialize the exception with the offending pattern.

        Args:
            pattern (str): The pattern that failed to compile.
            reason (str, optional): Additional detail from the pattern compiler.
        """
        self.pattern = pattern
        message = f"Invalid exclusion pattern: {pattern!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidNodePathError(TypeError):
    """
    Exception raised when a node lookup is given an unsupported path value.

    Node paths may be given as a sequence of segment strings, a separator-delimited
    string, or a path-like object. Anything else is rejected before the tree is
    searched.

    Attributes:
        node_path (Any): The rejected value.

    Example:
        >>> error = InvalidNodePathError(42)
        >>> str(error)
        'Node path must be a sequence of strings, a string, or a path-like object. Was int.'
    """

    def __init__(self, node_path: Any) -> None:
        """
        Initialize the exception with the rejected value.

        Args:
            node_path (Any): The value that could not be interpreted as a node path.
        """
        self.node_path = node_path
        super().__init__(
            "Node path must be a sequence of strings, a string, or a path-like object. "
            f"Was {type(node_path).__name__}."
        )
