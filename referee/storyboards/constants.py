"""Storyboard markup vocabulary."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Optional

STORYBOARD_FILE_TYPE = "file.storyboard"

TABLE_CELL_TAG = "tableViewCell"
COLLECTION_CELL_TAG = "collectionViewCell"
SEGUE_TAG = "segue"

REUSE_IDENTIFIER_ATTR = "reuseIdentifier"
STORYBOARD_IDENTIFIER_ATTR = "storyboardIdentifier"
CUSTOM_CLASS_ATTR = "customClass"
SEGUE_IDENTIFIER_ATTR = "identifier"


class ControllerKind(Enum):
    """Controller elements recognised in storyboards, with their default classes."""

    VIEW_CONTROLLER = ("viewController", "UIViewController")
    TABLE_VIEW_CONTROLLER = ("tableViewController", "UITableViewController")
    NAVIGATION_CONTROLLER = ("navigationController", "UINavigationController")
    GLK_VIEW_CONTROLLER = ("glkViewController", "GLKViewController")
    PAGE_VIEW_CONTROLLER = ("pageViewController", "UIPageViewController")
    COLLECTION_VIEW_CONTROLLER = ("collectionViewController", "UICollectionViewController")
    SPLIT_VIEW_CONTROLLER = ("splitViewController", "UISplitViewController")
    AV_PLAYER_VIEW_CONTROLLER = ("avPlayerViewController", "AVPlayerViewController")
    TAB_BAR_CONTROLLER = ("tabBarController", "UITabBarController")

    def __init__(self, tag: str, default_class: str) -> None:
        self.tag = tag
        self.default_class = default_class

    @classmethod
    def from_tag(cls, tag: str) -> Optional["ControllerKind"]:
        return _KIND_BY_TAG.get(tag)


_KIND_BY_TAG: Dict[str, ControllerKind] = {kind.tag: kind for kind in ControllerKind}

CONTROLLER_TAGS: FrozenSet[str] = frozenset(_KIND_BY_TAG)


def default_class_for_tag(tag: str) -> Optional[str]:
    """Return the UIKit class a controller tag implies, or None for unknown tags."""
    kind = ControllerKind.from_tag(tag)
    return kind.default_class if kind is not None else None


__all__ = [
    "COLLECTION_CELL_TAG",
    "CONTROLLER_TAGS",
    "CUSTOM_CLASS_ATTR",
    "ControllerKind",
    "REUSE_IDENTIFIER_ATTR",
    "SEGUE_IDENTIFIER_ATTR",
    "SEGUE_TAG",
    "STORYBOARD_FILE_TYPE",
    "STORYBOARD_IDENTIFIER_ATTR",
    "TABLE_CELL_TAG",
    "default_class_for_tag",
]
