"""Identifier extraction from parsed storyboards."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, TypeVar

from ..models import ControllerDescriptor, ControllerScan, StoryboardExtraction
from .constants import (
    COLLECTION_CELL_TAG,
    CONTROLLER_TAGS,
    CUSTOM_CLASS_ATTR,
    REUSE_IDENTIFIER_ATTR,
    SEGUE_IDENTIFIER_ATTR,
    SEGUE_TAG,
    STORYBOARD_IDENTIFIER_ATTR,
    TABLE_CELL_TAG,
    default_class_for_tag,
)
from .document import StoryboardDocument

_T = TypeVar("_T")


def _unique(items: Iterable[_T]) -> Tuple[_T, ...]:
    """Drop repeats while keeping the first occurrence of each item."""
    seen = set()
    ordered: List[_T] = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        ordered.append(item)
    return tuple(ordered)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def extract_cell_identifiers(document: StoryboardDocument, element_tag: str) -> Tuple[str, ...]:
    """Return the trimmed reuse identifiers of every ``element_tag`` cell."""
    identifiers = []
    for element in document.find({element_tag}):
        value = document.attribute(element, REUSE_IDENTIFIER_ATTR)
        if value is None:
            continue
        value = value.strip()
        if value:
            identifiers.append(value)
    return _unique(identifiers)


def extract_table_cells(document: StoryboardDocument) -> Tuple[str, ...]:
    return extract_cell_identifiers(document, TABLE_CELL_TAG)


def extract_collection_cells(document: StoryboardDocument) -> Tuple[str, ...]:
    return extract_cell_identifiers(document, COLLECTION_CELL_TAG)


def extract_controllers(document: StoryboardDocument) -> ControllerScan:
    """Collect controller descriptors in one pass over the controller elements.

    Every matched element contributes a descriptor; only those with a
    non-blank ``storyboardIdentifier`` are valid. Both lists are deduplicated
    by full descriptor equality, so the same identifier under two different
    classes yields two descriptors.

    ``total_count`` is the number of distinct descriptors, not of matched
    elements: two identical identified controllers count once, so
    ``total_count == len(valid)`` holds exactly when no controller lacks an
    identifier.
    """
    descriptors = []
    for element in document.find(CONTROLLER_TAGS):
        class_name = document.attribute(element, CUSTOM_CLASS_ATTR)
        if class_name is None:
            class_name = default_class_for_tag(document.tag_name(element))
        descriptors.append(
            ControllerDescriptor(
                identifier=document.attribute(element, STORYBOARD_IDENTIFIER_ATTR),
                class_name=class_name,
            )
        )

    distinct = _unique(descriptors)
    valid = tuple(descriptor for descriptor in distinct if descriptor.has_identifier)
    return ControllerScan(valid=valid, total_count=len(distinct))


def extract_segues(document: StoryboardDocument) -> Tuple[str, ...]:
    identifiers = (
        document.attribute(element, SEGUE_IDENTIFIER_ATTR)
        for element in document.find({SEGUE_TAG})
    )
    return _unique(value for value in identifiers if not _is_blank(value))


def extract_resources(document: StoryboardDocument) -> StoryboardExtraction:
    """Run every extractor over ``document``."""
    return StoryboardExtraction(
        table_cells=extract_table_cells(document),
        collection_cells=extract_collection_cells(document),
        controllers=extract_controllers(document),
        segues=extract_segues(document),
    )


__all__ = [
    "extract_cell_identifiers",
    "extract_collection_cells",
    "extract_controllers",
    "extract_resources",
    "extract_segues",
    "extract_table_cells",
]
