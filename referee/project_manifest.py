"""Project file discovery and manifest building."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .logging import get_logger
from .models import FileEntry, ProjectManifest

logger = get_logger("manifest")

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".build",
    ".swiftpm",
    "build",
    "DerivedData",
    "Pods",
    "Carthage",
    "node_modules",
    "xcuserdata",
}

_EXCLUDED_DIR_SUFFIXES = (".xcodeproj", ".xcworkspace", ".xcassets")

_EXCLUDED_FILES = {
    ".DS_Store",
    "Thumbs.db",
}

DEFAULT_FILE_TYPE = "file"

_FILE_TYPE_BY_SUFFIX = {
    ".storyboard": "file.storyboard",
    ".xib": "file.xib",
    ".swift": "sourcecode.swift",
    ".h": "sourcecode.c.h",
    ".m": "sourcecode.c.objc",
    ".mm": "sourcecode.cpp.objcpp",
    ".c": "sourcecode.c.c",
    ".cpp": "sourcecode.cpp.cpp",
    ".plist": "text.plist.xml",
    ".strings": "text.plist.strings",
    ".json": "text.json",
    ".xcconfig": "text.xcconfig",
    ".entitlements": "text.plist.entitlements",
    ".png": "image.png",
    ".jpg": "image.jpeg",
    ".jpeg": "image.jpeg",
    ".md": "net.daringfireball.markdown",
    ".txt": "text",
}


@dataclass
class IgnoreRule:
    """Represents an ignore rule parsed from .gitignore or .referee.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_ignore_rule(pattern: str, negate: bool = False) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _parse_gitignore(path: Path) -> List[IgnoreRule]:
    if not path.exists():
        return []

    rules: List[IgnoreRule] = []
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        negate = line.startswith("!")
        if negate:
            line = line[1:]
        rule = build_ignore_rule(line, negate=negate)
        if rule is not None:
            rules.append(rule)
    return rules


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


def _is_excluded_dir(name: str) -> bool:
    return name in _EXCLUDED_DIRS or name.endswith(_EXCLUDED_DIR_SUFFIXES)


def _iter_files(root: Path, rules: Sequence[IgnoreRule]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        kept_dirs = []
        for name in sorted(dirnames):
            if _is_excluded_dir(name):
                continue
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if _should_ignore(rel_path, True, rules):
                continue
            kept_dirs.append(name)
        # os.walk descends into whatever remains in dirnames, in this order.
        dirnames[:] = kept_dirs

        for filename in sorted(filenames):
            if filename in _EXCLUDED_FILES:
                continue
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if _should_ignore(rel_path, False, rules):
                continue
            yield current_dir / filename


def detect_file_type(path: Path) -> str:
    """Return the Xcode file type implied by ``path``'s suffix."""
    return _FILE_TYPE_BY_SUFFIX.get(path.suffix.lower(), DEFAULT_FILE_TYPE)


class ProjectManifestBuilder:
    """Walks a project directory to produce its file manifest."""

    def build(self, root: str | Path, exclude_paths: Sequence[str] = ()) -> ProjectManifest:
        """Return a manifest of the project's files with their declared types."""
        root_path = Path(root).expanduser().resolve()
        if root_path.suffix in {".xcodeproj", ".xcworkspace"}:
            root_path = root_path.parent
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")

        rules = _parse_gitignore(root_path / ".gitignore")
        for pattern in exclude_paths:
            rule = build_ignore_rule(pattern)
            if rule is not None:
                rules.append(rule)

        files = [
            FileEntry(
                path=path.relative_to(root_path).as_posix(),
                real_path=path,
                file_type=detect_file_type(path),
            )
            for path in _iter_files(root_path, rules)
        ]
        logger.debug("Indexed %d file(s) under %s", len(files), root_path)
        return ProjectManifest(root=root_path, files=files)


__all__ = ["DEFAULT_FILE_TYPE", "IgnoreRule", "ProjectManifestBuilder", "detect_file_type"]
