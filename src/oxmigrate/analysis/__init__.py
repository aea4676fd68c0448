"""Analysis modules for directive detection and rewriting."""

from oxmigrate.analysis.comments import extract_comments
from oxmigrate.analysis.directives import find_directive
from oxmigrate.analysis.fixes import apply_fixes
from oxmigrate.analysis.rewrite import rewrite
from oxmigrate.analysis.rule import NoEslintDisableComments

__all__ = [
    "NoEslintDisableComments",
    "apply_fixes",
    "extract_comments",
    "find_directive",
    "rewrite",
]
