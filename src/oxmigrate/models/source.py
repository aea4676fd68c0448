"""Data models for source locations and comments."""

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True, order=True)
class Span:
    """Half-open range of string offsets into a source text."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span: {self.start}..{self.end}")

    def source_text(self, source: str) -> str:
        """Return the slice of ``source`` covered by this span."""
        return source[self.start : self.end]

    def overlaps(self, other: "Span") -> bool:
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


class CommentKind(Enum):
    """Delimiter shape of a comment."""

    LINE = auto()  # // ...
    BLOCK = auto()  # /* ... */


@dataclass(frozen=True)
class Comment:
    """A comment found in a source file.

    ``span`` covers the delimiters, ``content_span`` only the text between them.
    """

    kind: CommentKind
    span: Span
    content_span: Span

    @property
    def is_line(self) -> bool:
        return self.kind is CommentKind.LINE

    def content(self, source: str) -> str:
        return self.content_span.source_text(source)
