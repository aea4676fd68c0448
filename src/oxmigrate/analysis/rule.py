"""The no-eslint-disable-comments rule."""

import re
from collections.abc import Iterable

from oxmigrate.analysis.comments import DEFAULT_LANGUAGE, LINE_TERMINATORS, extract_comments
from oxmigrate.analysis.directives import find_directive
from oxmigrate.analysis.rewrite import rewrite, source_token, target_token
from oxmigrate.models.diagnostic import Diagnostic, Fix
from oxmigrate.models.directive import DirectiveKind
from oxmigrate.models.source import Comment, Span

MESSAGE = "Detected eslint disable comment"

# CRLF counts as a single line break
_LINE_BREAK = re.compile("\r\n|[" + LINE_TERMINATORS + "]")


def help_text(kind: DirectiveKind) -> str:
    """Help line suggesting the oxlint spelling of a directive."""
    return f"Prefer {target_token(kind)} instead of {source_token(kind)}"


def line_and_column(source: str, offset: int) -> tuple[int, int]:
    """Convert a string offset to a 1-based (line, column) pair."""
    line = 1
    line_start = 0
    for match in _LINE_BREAK.finditer(source, 0, offset):
        line += 1
        line_start = match.end()
    return line, offset - line_start + 1


class NoEslintDisableComments:
    """Report eslint-disable comments and suggest the oxlint equivalent."""

    name = "no-eslint-disable-comments"
    plugin = "oxc"
    category = "style"
    fix_kind = "suggestion"

    def __init__(
        self,
        kinds: Iterable[DirectiveKind] | None = None,
        severity: str = "warning",
    ) -> None:
        self.kinds = frozenset(kinds) if kinds is not None else frozenset(DirectiveKind)
        self.severity = severity

    @property
    def qualified_name(self) -> str:
        return f"{self.plugin}/{self.name}"

    def run(self, source: str, language: str = DEFAULT_LANGUAGE) -> list[Diagnostic]:
        """Lint a whole source file parsed with the given tree-sitter grammar."""
        diagnostics = []
        for comment in extract_comments(source, language):
            diagnostic = self.check_comment(source, comment)
            if diagnostic:
                diagnostics.append(diagnostic)
        return diagnostics

    def check_comment(self, source: str, comment: Comment) -> Diagnostic | None:
        """Check a single comment, returning a diagnostic with its fix if it matches."""
        span = comment.content_span
        raw = span.source_text(source)

        match = find_directive(raw, comment.is_line)
        if match is None or match.kind not in self.kinds:
            return None

        return self._diagnostic(source, span, match.kind, rewrite(raw, match.kind))

    def _diagnostic(
        self,
        source: str,
        span: Span,
        kind: DirectiveKind,
        replacement: str,
    ) -> Diagnostic:
        line, column = line_and_column(source, span.start)
        return Diagnostic(
            rule=self.qualified_name,
            kind=kind,
            span=span,
            message=MESSAGE,
            help=help_text(kind),
            line=line,
            column=column,
            severity=self.severity,
            fix=Fix(span=span, replacement=replacement),
        )
