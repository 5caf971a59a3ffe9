"""Core data models shared across referee components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .config import RefereeConfig


@dataclass(frozen=True)
class FileEntry:
    """A project file with its declared file type."""

    path: str
    real_path: Path
    file_type: str


@dataclass
class ProjectManifest:
    """Ordered view of the project's files."""

    root: Path
    files: List[FileEntry]


@dataclass(frozen=True)
class ControllerDescriptor:
    """Navigation identifier and implementing class of one controller."""

    identifier: Optional[str]
    class_name: Optional[str]

    @property
    def has_identifier(self) -> bool:
        return bool(self.identifier and self.identifier.strip())

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"identifier": self.identifier, "class": self.class_name}


@dataclass(frozen=True)
class ControllerScan:
    """Identified controllers together with the count of all distinct controllers."""

    valid: Tuple[ControllerDescriptor, ...]
    total_count: int

    @property
    def missing_identifiers(self) -> bool:
        return len(self.valid) != self.total_count


@dataclass(frozen=True)
class StoryboardExtraction:
    """Raw extraction results for one storyboard document."""

    table_cells: Tuple[str, ...]
    collection_cells: Tuple[str, ...]
    controllers: ControllerScan
    segues: Tuple[str, ...]


@dataclass(frozen=True)
class ResourceGroup:
    """Identifiers extracted from one storyboard, handed to code generation."""

    storyboard: FileEntry
    table_cells: Tuple[str, ...]
    collection_cells: Tuple[str, ...]
    view_controllers: Tuple[ControllerDescriptor, ...]
    segues: Tuple[str, ...]
    config: Optional["RefereeConfig"] = field(default=None, compare=False, repr=False)

    @property
    def storyboard_name(self) -> str:
        return self.storyboard.real_path.stem

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.storyboard_name,
            "path": self.storyboard.path,
            "table_cells": list(self.table_cells),
            "collection_cells": list(self.collection_cells),
            "view_controllers": [controller.to_dict() for controller in self.view_controllers],
            "segues": list(self.segues),
        }


ScanResult = Tuple[ResourceGroup, ...]
