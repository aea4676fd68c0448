"""Renaming of eslint directives to their oxlint form."""

from oxmigrate.models.directive import DirectiveKind

SOURCE_NAMESPACE = "eslint-"
TARGET_NAMESPACE = "oxlint-"


def source_token(kind: DirectiveKind) -> str:
    """Directive token as written for eslint, e.g. "eslint-disable"."""
    return SOURCE_NAMESPACE + kind.keyword


def target_token(kind: DirectiveKind) -> str:
    """Directive token as written for oxlint, e.g. "oxlint-disable"."""
    return TARGET_NAMESPACE + kind.keyword


def rewrite(text: str, kind: DirectiveKind) -> str:
    """
    Rename the first eslint directive token of ``kind`` in ``text``.

    The first occurrence anywhere in the text is replaced, and everything
    around it (including rule names after the directive) is kept as is.
    Since "eslint-disable" is a prefix of "eslint-disable-next-line", both
    kinds give the same result on a next-line directive.

    Returns:
        The rewritten text, or ``text`` itself if the token does not occur.
    """
    return text.replace(source_token(kind), target_token(kind), 1)
