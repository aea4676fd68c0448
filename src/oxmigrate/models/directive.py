"""Data models for suppression directives found in comments."""

from dataclasses import dataclass
from enum import Enum


class DirectiveKind(Enum):
    """Suppression directives recognised after the namespace prefix."""

    DISABLE = "disable"
    DISABLE_NEXT_LINE = "disable-next-line"

    @property
    def keyword(self) -> str:
        return self.value

    @classmethod
    def from_keyword(cls, keyword: str) -> "DirectiveKind":
        """Look up a kind by its keyword text (e.g. "disable-next-line")."""
        return cls(keyword)


@dataclass(frozen=True)
class DirectiveMatch:
    """A directive keyword located inside a comment's text.

    ``start`` and ``end`` are offsets into the scanned text and always
    delimit exactly ``kind.keyword``.
    """

    kind: DirectiveKind
    start: int
    end: int
