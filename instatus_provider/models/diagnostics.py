"""
Diagnostics reported back to the host for each lifecycle operation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class Severity(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """
    A single user-visible message.

    Attributes:
        severity: Whether the diagnostic fails the operation
        summary: Short title shown to the operator
        detail: Full explanation including any underlying cause
        error: The exception that produced the diagnostic, if any
    """

    severity: Severity
    summary: str
    detail: str = ""
    error: Optional[BaseException] = field(default=None, compare=False)


@dataclass
class Diagnostics:
    """Ordered collection of diagnostics."""

    items: List[Diagnostic] = field(default_factory=list)

    def append(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)

    def extend(self, other: "Diagnostics") -> None:
        self.items.extend(other.items)

    def add_error(
        self, summary: str, detail: str = "", error: Optional[BaseException] = None
    ) -> None:
        """Record an error diagnostic."""
        self.append(Diagnostic(Severity.ERROR, summary, detail, error))

    def add_warning(self, summary: str, detail: str = "") -> None:
        """Record a warning diagnostic."""
        self.append(Diagnostic(Severity.WARNING, summary, detail))

    def has_error(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.items)

    def errors(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.ERROR]

    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.WARNING]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


__all__ = ["Severity", "Diagnostic", "Diagnostics"]
