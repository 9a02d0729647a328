"""Reading and writing of FitNesse page properties files."""

from .properties_file import (
    PROPERTIES_FILENAME,
    PropertiesFile,
    load_properties,
    parse_tag_list,
    save_properties,
    validate_tag,
)

__all__ = [
    "PROPERTIES_FILENAME",
    "PropertiesFile",
    "load_properties",
    "parse_tag_list",
    "save_properties",
    "validate_tag",
]
