"""Detection of eslint suppression directives in comment text."""

from oxmigrate.models.directive import DirectiveKind, DirectiveMatch

# Namespace token that must directly precede the directive keyword
DIRECTIVE_PREFIX = "eslint-"

# Characters that may precede the prefix on its line, besides whitespace
LINE_COMMENT_LEADERS = frozenset("/")
BLOCK_COMMENT_LEADERS = frozenset("*/")

# Longest keyword first, so "disable" never claims "disable-next-line"
_KEYWORDS_BY_PRIORITY = sorted(DirectiveKind, key=lambda kind: len(kind.keyword), reverse=True)


def find_directive(text: str, is_single_line: bool) -> DirectiveMatch | None:
    """
    Find an eslint suppression directive in a comment's content.

    Only the last line of ``text`` is inspected, and the ``eslint-`` prefix
    must be the first thing on that line apart from whitespace and comment
    leader characters (``/`` for line comments, ``*`` or ``/`` for block
    comments).

    Args:
        text: The comment content, delimiters excluded.
        is_single_line: True for ``//`` comments, False for ``/* */`` comments.

    Returns:
        DirectiveMatch with offsets into ``text``, or None if no directive is found.
    """
    line_start = text.rfind("\n") + 1
    line = text[line_start:]

    index = line.find(DIRECTIVE_PREFIX)
    if index == -1:
        return None

    leaders = LINE_COMMENT_LEADERS if is_single_line else BLOCK_COMMENT_LEADERS
    if not all(c.isspace() or c in leaders for c in line[:index]):
        return None

    keyword_start = index + len(DIRECTIVE_PREFIX)
    for kind in _KEYWORDS_BY_PRIORITY:
        keyword_end = keyword_start + len(kind.keyword)
        if line[keyword_start:keyword_end] != kind.keyword:
            continue
        if not _is_keyword_boundary(line, keyword_end):
            continue

        start = line_start + keyword_start
        end = start + len(kind.keyword)
        found = text[start:end]
        if found != kind.keyword:
            raise AssertionError(
                f"Expected one of {[k.keyword for k in DirectiveKind]}, got {found!r}"
            )
        return DirectiveMatch(kind=kind, start=start, end=end)

    return None


def _is_keyword_boundary(line: str, position: int) -> bool:
    """Check that the keyword ending at ``position`` is followed by a non-word character."""
    if position >= len(line):
        return True
    next_char = line[position]
    return not (next_char.isalnum() or next_char == "_")
