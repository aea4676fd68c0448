"""Applying diagnostic fixes to source text."""

from collections.abc import Iterable

from oxmigrate.models.diagnostic import Diagnostic, Fix


def apply_fixes(source: str, diagnostics: Iterable[Diagnostic]) -> tuple[str, int]:
    """
    Apply the fixes carried by ``diagnostics`` to ``source``.

    Fixes are applied in span order. A fix overlapping one that was already
    applied is skipped.

    Returns:
        Tuple of (fixed source, number of fixes applied).
    """
    fixes = sorted((d.fix for d in diagnostics if d.fix), key=lambda f: (f.span.start, f.span.end))

    applied: list[Fix] = []
    for fix in fixes:
        if applied and fix.span.overlaps(applied[-1].span):
            continue
        if fix.span.end > len(source):
            continue
        applied.append(fix)

    parts: list[str] = []
    cursor = 0
    for fix in applied:
        parts.append(source[cursor : fix.span.start])
        parts.append(fix.replacement)
        cursor = fix.span.end
    parts.append(source[cursor:])

    return "".join(parts), len(applied)
