"""Structural queries over FitNesse suite trees.

This package builds an in-memory tree of tests, suites and static pages from a
FitNesse wiki directory and answers questions about it (classification, tags,
skip status) without running any test content.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fitquery")
except PackageNotFoundError:
    __version__ = "unknown"
