"""Data models for rule diagnostics and their fixes."""

from dataclasses import dataclass

from oxmigrate.models.directive import DirectiveKind
from oxmigrate.models.source import Span


@dataclass(frozen=True)
class Fix:
    """Replace the text at ``span`` with ``replacement``."""

    span: Span
    replacement: str

    def to_dict(self) -> dict:
        return {"span": self.span.to_dict(), "replacement": self.replacement}


@dataclass
class Diagnostic:
    """A directive reported by a rule."""

    rule: str
    kind: DirectiveKind
    span: Span
    message: str
    help: str
    line: int
    column: int
    severity: str = "warning"
    fix: Fix | None = None

    def to_dict(self) -> dict:
        result = {
            "rule": self.rule,
            "directive": self.kind.keyword,
            "severity": self.severity,
            "message": self.message,
            "help": self.help,
            "line": self.line,
            "column": self.column,
            "span": self.span.to_dict(),
        }
        if self.fix:
            result["fix"] = self.fix.to_dict()
        return result
