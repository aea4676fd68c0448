"""Data models for lint run results."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from oxmigrate.models.diagnostic import Diagnostic


@dataclass
class RunMetadata:
    """Metadata about the lint run."""

    project: str
    analyzed_at: datetime
    oxmigrate_version: str
    files_scanned: int
    duration_ms: int

    def to_dict(self) -> dict:
        return {
            "project": self.project,
            "analyzed_at": self.analyzed_at.isoformat(),
            "oxmigrate_version": self.oxmigrate_version,
            "files_scanned": self.files_scanned,
            "duration_ms": self.duration_ms,
        }


@dataclass
class FileReport:
    """Diagnostics found in a single source file."""

    file: Path
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fixes_applied: int = 0

    def to_dict(self) -> dict:
        return {
            "file": str(self.file),
            "fixes_applied": self.fixes_applied,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }


@dataclass
class RunSummary:
    """Summary of run results."""

    diagnostics: int
    files_with_diagnostics: int
    fixes_applied: int = 0
    by_directive: dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "diagnostics": self.diagnostics,
            "files_with_diagnostics": self.files_with_diagnostics,
            "fixes_applied": self.fixes_applied,
            "by_directive": self.by_directive,
        }


@dataclass
class RunResults:
    """Complete run results."""

    version: str = "1.0"
    metadata: RunMetadata | None = None
    summary: RunSummary | None = None
    files: list[FileReport] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for report in self.files for d in report.diagnostics]

    def to_dict(self) -> dict:
        result: dict = {"version": self.version}

        if self.metadata:
            result["metadata"] = self.metadata.to_dict()

        if self.summary:
            result["summary"] = self.summary.to_dict()

        result["files"] = [report.to_dict() for report in self.files]
        result["errors"] = self.errors

        return result
