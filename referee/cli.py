"""CLI entrypoints for referee commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError
from .logging import configure_logging
from .orchestrator import Orchestrator
from .report import OUTPUT_FORMATS, InventoryRenderer
from .scanner import ScanAbortedError
from .storyboards import DocumentParseError


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="referee",
        description="Inventory storyboard identifiers for type-safe accessor generation.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write logs to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Scan a project's storyboards and print the identifier inventory.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)
    scan_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )
    scan_parser.add_argument(
        "--config",
        default=None,
        help="Path to a .referee.yml file (defaults to the one in the project root).",
    )
    scan_parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (defaults to the configured format, then json).",
    )
    scan_parser.add_argument(
        "--output",
        default=None,
        help="Write the inventory to this file instead of stdout.",
    )
    scan_parser.add_argument(
        "--error-on-missing-ids",
        action="store_true",
        default=None,
        help="Fail when a storyboard has view controllers without a storyboard ID.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP service exposing scans.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for referee commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=bool(args.verbose),
        log_file=Path(args.log_file) if args.log_file else None,
    )

    if args.command == "scan":
        orchestrator = Orchestrator()
        try:
            report = orchestrator.run_scan(
                args.path,
                config_path=args.config,
                error_on_missing_ids=args.error_on_missing_ids,
            )
        except (ScanAbortedError, DocumentParseError, ConfigError) as exc:
            parser.exit(1, f"referee scan failed: {exc}\n")
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")

        fmt = args.format
        if fmt is None:
            fmt = report.config.output.format if report.config is not None else "json"
        rendered = InventoryRenderer().render(report, fmt)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(rendered, encoding="utf-8")
            print(f"Inventory written to {_relativize(output_path)}")
        else:
            sys.stdout.write(rendered)
    elif args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
