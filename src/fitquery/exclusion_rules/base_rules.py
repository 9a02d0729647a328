from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for directory exclusion rules.

    A suite tree consults its exclusion rules once for every directory it finds while
    scanning the wiki. A directory that is excluded never becomes a node, and none of
    its descendants are scanned.

    Example:
        >>> from fitquery.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules(["files", "ErrorLogs"])
        >>> rules.exclude("files")
        True
        >>> rules.exclude("SuiteOne/files")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given directory should be excluded from the tree.

        Args:
            path (str): The directory path relative to the root of the suite tree,
                using forward slashes as separators.

        Returns:
            bool: True if the directory should be excluded, False if it should be included.
        """
        pass
