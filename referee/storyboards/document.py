"""Parsed storyboard documents and the element queries extractors rely on."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, List, Optional


class DocumentParseError(RuntimeError):
    """Raised when a storyboard cannot be read or is not well-formed XML."""

    def __init__(self, source: str, reason: str, path: Optional[Path] = None) -> None:
        super().__init__(f"Failed to parse storyboard '{source}': {reason}")
        self.source = source
        self.path = path
        self.reason = reason


class StoryboardDocument:
    """Read-only wrapper around one parsed storyboard."""

    def __init__(self, root: ET.Element, name: str) -> None:
        self._root = root
        self.name = name

    @classmethod
    def from_string(cls, markup: str, name: str) -> "StoryboardDocument":
        try:
            root = ET.fromstring(markup)
        except ET.ParseError as exc:
            raise DocumentParseError(name, str(exc)) from exc
        return cls(root, name)

    def find(self, tag_names: Iterable[str]) -> List[ET.Element]:
        """Return every element whose tag is in ``tag_names``, in document order."""
        wanted = frozenset(tag_names)
        return [element for element in self._root.iter() if self.tag_name(element) in wanted]

    @staticmethod
    def attribute(element: ET.Element, name: str) -> Optional[str]:
        return element.get(name)

    @staticmethod
    def tag_name(element: ET.Element) -> str:
        tag = element.tag
        if not isinstance(tag, str):
            return ""
        if tag.startswith("{"):
            return tag.split("}", 1)[1]
        return tag


def parse_document(path: Path) -> StoryboardDocument:
    """Parse the storyboard at ``path``."""
    try:
        with path.open("rb") as handle:
            tree = ET.parse(handle)
    except ET.ParseError as exc:
        raise DocumentParseError(str(path), str(exc), path) from exc
    except OSError as exc:
        raise DocumentParseError(str(path), exc.strerror or str(exc), path) from exc
    return StoryboardDocument(tree.getroot(), path.stem)


__all__ = ["DocumentParseError", "StoryboardDocument", "parse_document"]
