"""Centralized file exclusion logic for oxmigrate.

Handles .gitignore, .eslintignore and .oxlintignore patterns, config
excludes and default patterns using the pathspec library for proper
gitignore-style matching.
"""

from dataclasses import dataclass, field
from pathlib import Path

import pathspec


@dataclass
class ExclusionConfig:
    """Configuration for file exclusion."""

    ignore_file_patterns: list[str] = field(default_factory=list)
    default_patterns: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)


# Patterns that are always excluded
DEFAULT_EXCLUDES = [
    "node_modules",
    ".git",
    ".oxmigrate",
    ".next",
    ".nuxt",
    ".turbo",
    ".yarn",
    "coverage",
]

# Ignore files read from the project root, in order
IGNORE_FILES = [".gitignore", ".eslintignore", ".oxlintignore"]


class FileExcluder:
    """Handles file exclusion with gitignore-style pattern matching."""

    def __init__(
        self,
        project_root: Path,
        include_ignored: bool = False,
        extra_excludes: list[str] | None = None,
    ) -> None:
        """Initialize the file excluder.

        Args:
            project_root: Root directory of the project.
            include_ignored: If True, don't exclude any files (bypass all patterns).
            extra_excludes: Additional patterns to exclude.
        """
        self.project_root = project_root
        self.include_ignored = include_ignored
        self._config = ExclusionConfig()
        self._spec: pathspec.PathSpec | None = None

        if not include_ignored:
            self._load_patterns(extra_excludes or [])
            self._build_spec()

    def _load_patterns(self, extra_excludes: list[str]) -> None:
        """Load patterns from all sources."""
        self._config.default_patterns = list(DEFAULT_EXCLUDES)
        self._config.sources.append("defaults")

        for name in IGNORE_FILES:
            self._load_ignore_file(self.project_root / name)

        if extra_excludes:
            self._config.default_patterns.extend(extra_excludes)
            self._config.sources.append("config")

    def _load_ignore_file(self, ignore_path: Path) -> None:
        """Load patterns from a gitignore-style file, if present and readable."""
        if not ignore_path.is_file():
            return
        try:
            content = ignore_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return

        patterns = [
            line.strip()
            for line in content.splitlines()
            if line.strip() and not line.startswith("#")
        ]
        self._config.ignore_file_patterns.extend(patterns)
        self._config.sources.append(str(ignore_path))

    def _build_spec(self) -> None:
        """Build the pathspec matcher from all patterns."""
        self._spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)

    def should_exclude(self, file_path: Path) -> bool:
        """Check if a file should be excluded.

        Args:
            file_path: Path to the file to check.

        Returns:
            True if the file should be excluded, False otherwise.
        """
        if self.include_ignored or self._spec is None:
            return False

        try:
            rel_path = file_path.relative_to(self.project_root)
        except ValueError:
            return False

        if self._spec.match_file(rel_path.as_posix()):
            return True

        # Directory-only patterns ("dist/") need the directory itself checked
        for i in range(1, len(rel_path.parts)):
            if self._spec.match_file(Path(*rel_path.parts[:i]).as_posix() + "/"):
                return True

        return False

    def filter_files(self, files: list[Path]) -> list[Path]:
        """Filter a list of files, removing excluded ones."""
        if self.include_ignored:
            return files
        return [f for f in files if not self.should_exclude(f)]

    @property
    def sources(self) -> list[str]:
        """Return list of pattern sources used."""
        return self._config.sources

    @property
    def patterns(self) -> list[str]:
        """Return all loaded patterns."""
        return self._config.default_patterns + self._config.ignore_file_patterns
