"""Scans a project's storyboards and validates their controller identifiers."""

from __future__ import annotations

from typing import List, Optional

from .config import RefereeConfig
from .diagnostics import (
    Diagnostic,
    DiagnosticsSink,
    LoggingSink,
    MissingIdentifierPolicy,
    Severity,
    missing_identifier_message,
)
from .logging import get_logger
from .models import FileEntry, ProjectManifest, ResourceGroup, ScanResult
from .storyboards import (
    STORYBOARD_FILE_TYPE,
    build_resource_group,
    extract_resources,
    parse_document,
)

logger = get_logger("scanner")


class ScanAbortedError(RuntimeError):
    """Raised when a fatal diagnostic stops the scan."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic


def find_storyboards(manifest: ProjectManifest) -> List[FileEntry]:
    """Return the manifest's storyboard entries in manifest order."""
    return [entry for entry in manifest.files if entry.file_type == STORYBOARD_FILE_TYPE]


class ProjectScanner:
    """Extracts a resource group from every storyboard in a project manifest."""

    def __init__(
        self,
        config: Optional[RefereeConfig] = None,
        sink: Optional[DiagnosticsSink] = None,
        policy: Optional[MissingIdentifierPolicy] = None,
    ) -> None:
        self.config = config
        self.sink: DiagnosticsSink = sink if sink is not None else LoggingSink()
        self.policy = policy if policy is not None else MissingIdentifierPolicy.from_config(config)

    def scan(self, manifest: ProjectManifest) -> ScanResult:
        """Return one resource group per storyboard.

        Raises ``DocumentParseError`` for an unreadable storyboard and
        ``ScanAbortedError`` when the policy turns a missing identifier into an
        error; no later storyboard is processed in either case.
        """
        storyboards = find_storyboards(manifest)
        logger.debug("Found %d storyboard(s) in %s", len(storyboards), manifest.root)

        groups: List[ResourceGroup] = []
        for storyboard in storyboards:
            document = parse_document(storyboard.real_path)
            extraction = extract_resources(document)
            group = build_resource_group(storyboard, extraction, self.config)
            logger.debug(
                "%s: %d table cell(s), %d collection cell(s), %d controller(s), %d segue(s)",
                group.storyboard_name,
                len(group.table_cells),
                len(group.collection_cells),
                len(group.view_controllers),
                len(group.segues),
            )

            if extraction.controllers.missing_identifiers:
                diagnostic = Diagnostic(
                    severity=self.policy.severity,
                    message=missing_identifier_message(group.storyboard_name),
                    storyboard=storyboard.path,
                )
                self.sink.emit(diagnostic)
                if diagnostic.severity is Severity.ERROR:
                    raise ScanAbortedError(diagnostic)

            groups.append(group)

        return tuple(groups)


__all__ = ["ProjectScanner", "ScanAbortedError", "find_storyboards"]
