"""Exclusion rules for filtering directories out of a suite tree."""

from .base_rules import BaseExclusionRules
from .glob_rules import STANDARD_EXCLUSIONS, GlobExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GlobExclusionRules",
    "STANDARD_EXCLUSIONS",
]
