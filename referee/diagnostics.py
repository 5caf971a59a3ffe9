"""Diagnostics raised while validating storyboards, and the sinks that receive them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Protocol

from .logging import get_logger, storyboard_extra

if TYPE_CHECKING:  # pragma: no cover - typing aid
    from .config import RefereeConfig


class Severity(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A data-quality finding about one storyboard."""

    severity: Severity
    message: str
    storyboard: str

    @property
    def is_fatal(self) -> bool:
        return self.severity is Severity.ERROR

    def to_dict(self) -> Dict[str, str]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "storyboard": self.storyboard,
        }


class MissingIdentifierPolicy(Enum):
    """How a storyboard with unidentified view controllers is treated."""

    WARN = "warn"
    FAIL = "fail"

    @classmethod
    def from_config(cls, config: Optional["RefereeConfig"]) -> "MissingIdentifierPolicy":
        if config is not None and config.error_on_missing_storyboard_ids:
            return cls.FAIL
        return cls.WARN

    @property
    def severity(self) -> Severity:
        return Severity.ERROR if self is MissingIdentifierPolicy.FAIL else Severity.WARNING


class DiagnosticsSink(Protocol):
    """Receives diagnostics as the scanner produces them."""

    def emit(self, diagnostic: Diagnostic) -> None:
        """Record or report ``diagnostic``."""


class LoggingSink:
    """Reports diagnostics through the referee logger."""

    def __init__(self) -> None:
        self._logger = get_logger("diagnostics")

    def emit(self, diagnostic: Diagnostic) -> None:
        if diagnostic.is_fatal:
            self._logger.error(diagnostic.message, extra=storyboard_extra(diagnostic.storyboard))
        else:
            self._logger.warning(diagnostic.message, extra=storyboard_extra(diagnostic.storyboard))


class CollectingSink:
    """Keeps every diagnostic in emission order, optionally forwarding it."""

    def __init__(self, forward: Optional[DiagnosticsSink] = None) -> None:
        self.diagnostics: List[Diagnostic] = []
        self._forward = forward

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        if self._forward is not None:
            self._forward.emit(diagnostic)

    @property
    def warnings(self) -> List[Diagnostic]:
        return [item for item in self.diagnostics if item.severity is Severity.WARNING]

    @property
    def errors(self) -> List[Diagnostic]:
        return [item for item in self.diagnostics if item.severity is Severity.ERROR]


def missing_identifier_message(storyboard_name: str) -> str:
    return f"Missing view controller ID(s) in '{storyboard_name}' storyboard!"


__all__ = [
    "CollectingSink",
    "Diagnostic",
    "DiagnosticsSink",
    "LoggingSink",
    "MissingIdentifierPolicy",
    "Severity",
    "missing_identifier_message",
]
