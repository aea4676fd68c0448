"""Data models for oxmigrate."""

from oxmigrate.models.diagnostic import Diagnostic, Fix
from oxmigrate.models.directive import DirectiveKind, DirectiveMatch
from oxmigrate.models.results import FileReport, RunMetadata, RunResults, RunSummary
from oxmigrate.models.source import Comment, CommentKind, Span

__all__ = [
    # Directive models
    "DirectiveKind",
    "DirectiveMatch",
    # Source models
    "Comment",
    "CommentKind",
    "Span",
    # Diagnostic models
    "Diagnostic",
    "Fix",
    # Results models
    "FileReport",
    "RunMetadata",
    "RunResults",
    "RunSummary",
]
