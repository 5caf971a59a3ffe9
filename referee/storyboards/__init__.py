"""Storyboard parsing and identifier extraction."""

from .builder import build_resource_group
from .constants import CONTROLLER_TAGS, STORYBOARD_FILE_TYPE, ControllerKind
from .document import DocumentParseError, StoryboardDocument, parse_document
from .extractors import (
    extract_cell_identifiers,
    extract_collection_cells,
    extract_controllers,
    extract_resources,
    extract_segues,
    extract_table_cells,
)

__all__ = [
    "CONTROLLER_TAGS",
    "ControllerKind",
    "DocumentParseError",
    "STORYBOARD_FILE_TYPE",
    "StoryboardDocument",
    "build_resource_group",
    "extract_cell_identifiers",
    "extract_collection_cells",
    "extract_controllers",
    "extract_resources",
    "extract_segues",
    "extract_table_cells",
    "parse_document",
]
