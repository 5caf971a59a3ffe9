"""Pipeline orchestration for storyboard scans."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import RefereeConfig, load_config
from .diagnostics import CollectingSink, Diagnostic, LoggingSink
from .logging import get_logger
from .models import ScanResult
from .project_manifest import ProjectManifestBuilder
from .scanner import ProjectScanner

logger = get_logger("orchestrator")


@dataclass
class ScanReport:
    """Result of a completed scan, ready for export."""

    project_root: Path
    groups: ScanResult
    diagnostics: List[Diagnostic] = field(default_factory=list)
    config: Optional[RefereeConfig] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "project_root": str(self.project_root),
            "storyboards": [group.to_dict() for group in self.groups],
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.diagnostics],
        }


class Orchestrator:
    """Coordinates configuration, manifest building and scanning."""

    def __init__(self, manifest_builder: ProjectManifestBuilder | None = None) -> None:
        self.manifest_builder = manifest_builder or ProjectManifestBuilder()

    def run_scan(
        self,
        path: str | Path,
        *,
        config_path: str | Path | None = None,
        error_on_missing_ids: bool | None = None,
    ) -> ScanReport:
        """Scan the project at ``path`` and return its storyboard inventory."""
        config = load_config(Path(config_path) if config_path is not None else Path(path))
        if error_on_missing_ids is not None:
            config.error_on_missing_storyboard_ids = error_on_missing_ids

        project_root = config.project_root if config.project is not None else Path(path)
        manifest = self.manifest_builder.build(project_root, config.exclude_paths)

        sink = CollectingSink(forward=LoggingSink())
        scanner = ProjectScanner(config, sink=sink)
        groups = scanner.scan(manifest)

        logger.info(
            "Scanned %d storyboard(s) in %s with %d warning(s)",
            len(groups),
            manifest.root,
            len(sink.warnings),
        )
        return ScanReport(
            project_root=manifest.root,
            groups=groups,
            diagnostics=list(sink.diagnostics),
            config=config,
        )


__all__ = ["Orchestrator", "ScanReport"]
