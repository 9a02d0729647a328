"""Access to the properties.xml file stored in every FitNesse page folder.

Only a handful of elements of the file are interpreted: the presence-only markers
that classify a page and the comma-separated tag list. Everything else in the
document is carried through untouched when the file is rewritten.

A properties file is advisory. Reading never raises: a missing, unreadable or
malformed file is reported as absent. Writing never raises either: failures are
logged and reported through the return value.
"""

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Optional, Set

from fitquery.types import PathType

logger = logging.getLogger(__name__)

PROPERTIES_FILENAME = "properties.xml"

ROOT_ELEMENT = "properties"
TEST_FLAG = "Test"
SUITE_FLAG = "Suite"
STATIC_FLAG = "Static"
PRUNE_FLAG = "Prune"
TAGS_ELEMENT = "Suites"

TAG_SEPARATOR = ","

# Characters outside the XML 1.0 Char production, including lone surrogates
_INVALID_XML_CHARS = re.compile("[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")


def parse_tag_list(text: Optional[str]) -> Set[str]:
    """Split the text of a tag list element into a set of tags.

    Args:
        text: Comma-separated tags, or None.

    Returns:
        The set of tags with surrounding whitespace removed. Empty pieces are dropped.

    Example:
        >>> sorted(parse_tag_list(" smoke, nightly ,,smoke"))
        ['nightly', 'smoke']
        >>> parse_tag_list(None)
        set()
    """
    if not text:
        return set()
    tags = (tag.strip() for tag in text.split(TAG_SEPARATOR))
    return {tag for tag in tags if tag}


def validate_tag(tag: str) -> str:
    """Check that a tag can be stored in a tag list element and read back unchanged.

    Args:
        tag: The tag to check. Surrounding whitespace is removed.

    Returns:
        The stripped tag.

    Raises:
        ValueError: If the tag is empty, contains a comma, or contains a character
            that XML 1.0 does not allow.

    Example:
        >>> validate_tag(" smoke ")
        'smoke'
        >>> validate_tag("a,b")
        Traceback (most recent call last):
            ...
        ValueError: Invalid tag: 'a,b'
    """
    stripped = tag.strip()
    if not stripped or TAG_SEPARATOR in stripped or _INVALID_XML_CHARS.search(stripped):
        raise ValueError(f"Invalid tag: {tag!r}")
    return stripped


class PropertiesFile:
    """Parsed content of a page's properties.xml file.

    Attributes:
        document (ET.ElementTree): The full parsed XML document.

    Example:
        >>> record = PropertiesFile.new()
        >>> record.has_flag("Test")
        False
        >>> record.set_tag_list(["smoke", "nightly"])
        >>> record.tag_list_text()
        'nightly, smoke'
    """

    def __init__(self, document: ET.ElementTree) -> None:
        self.document = document

    @classmethod
    def new(cls) -> "PropertiesFile":
        """Create an empty record with just the root element."""
        return cls(ET.ElementTree(ET.Element(ROOT_ELEMENT)))

    @property
    def root(self) -> ET.Element:
        return self.document.getroot()

    def has_flag(self, name: str) -> bool:
        """Check whether a marker element exists directly under the root element.

        The content of the marker element is ignored.
        """
        return self.root.find(name) is not None

    def tag_list_text(self) -> Optional[str]:
        """Get the raw text of the tag list element.

        Returns:
            The comma-separated tag text, an empty string if the element is empty, or
            None if the element is missing.
        """
        element = self.root.find(TAGS_ELEMENT)
        if element is None:
            return None
        return element.text or ""

    def set_tag_list(self, tags: Iterable[str]) -> None:
        """Replace the content of the tag list element, creating the element if needed.

        Tags are written in sorted order. No other element is modified.
        """
        element = self.root.find(TAGS_ELEMENT)
        if element is None:
            element = ET.SubElement(self.root, TAGS_ELEMENT)
        element.text = f"{TAG_SEPARATOR} ".join(sorted(tags))


def properties_path(folder: PathType) -> Path:
    return Path(folder) / PROPERTIES_FILENAME


def load_properties(folder: PathType) -> Optional[PropertiesFile]:
    """Read and parse the properties file of a page folder.

    Args:
        folder: The page folder.

    Returns:
        The parsed record, or None if the file is missing, unreadable, not well-formed
        XML, or has a root element other than <properties>.
    """
    path = properties_path(folder)
    try:
        with open(path, "rb") as f:
            document = ET.parse(f)
    except FileNotFoundError:
        logger.debug("No properties file in %s", folder)
        return None
    except (OSError, ET.ParseError) as e:
        logger.warning("Ignoring unreadable properties file %s: %s", path, e)
        return None

    if document.getroot().tag != ROOT_ELEMENT:
        logger.warning("Ignoring properties file %s with root element <%s>", path, document.getroot().tag)
        return None
    return PropertiesFile(document)


def save_properties(folder: PathType, record: PropertiesFile) -> bool:
    """Write a record to the properties file of a page folder, replacing the whole file.

    Args:
        folder: The page folder.
        record: The record to serialize.

    Returns:
        True if the file was written, False if writing failed. Failures are logged.
    """
    path = properties_path(folder)
    try:
        with open(path, "wb") as f:
            record.document.write(f, encoding="utf-8", xml_declaration=True)
    except OSError as e:
        logger.error("Failed to write properties file %s: %s", path, e)
        return False
    return True
