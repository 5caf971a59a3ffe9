"""Exports scan reports as JSON or a Markdown summary."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List

from jinja2 import Environment, FileSystemLoader

from .config import OUTPUT_FORMATS
from .orchestrator import ScanReport


class InventoryRenderer:
    """Renders a scan report into one of the supported output formats."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories: List[str] = []
        if templates_dir is not None:
            directories.append(str(templates_dir))
        directories.append(str(Path(__file__).with_name("templates")))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(self, report: ScanReport, fmt: str = "json") -> str:
        if fmt == "json":
            return self.render_json(report)
        if fmt == "markdown":
            return self.render_markdown(report)
        raise ValueError(f"Unsupported output format: {fmt}")

    @staticmethod
    def render_json(report: ScanReport) -> str:
        return json.dumps(report.to_dict(), indent=2, sort_keys=True) + "\n"

    def render_markdown(self, report: ScanReport) -> str:
        template = self._env.get_template("inventory.md.j2")
        name = report.config.output.name if report.config is not None else "R"
        return template.render(
            project_name=report.project_root.name or "Project",
            accessor_name=name,
            groups=report.groups,
            diagnostics=report.diagnostics,
        )


__all__ = ["InventoryRenderer", "OUTPUT_FORMATS"]
