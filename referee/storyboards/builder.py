"""Assembles resource groups from storyboard extraction results."""

from __future__ import annotations

from typing import Optional

from ..config import RefereeConfig
from ..models import FileEntry, ResourceGroup, StoryboardExtraction


def build_resource_group(
    storyboard: FileEntry,
    extraction: StoryboardExtraction,
    config: Optional[RefereeConfig] = None,
) -> ResourceGroup:
    """Return the resource group for one storyboard; performs no validation."""
    return ResourceGroup(
        storyboard=storyboard,
        table_cells=extraction.table_cells,
        collection_cells=extraction.collection_cells,
        view_controllers=extraction.controllers.valid,
        segues=extraction.segues,
        config=config,
    )


__all__ = ["build_resource_group"]
