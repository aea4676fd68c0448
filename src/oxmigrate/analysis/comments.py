"""Comment extraction for JavaScript and TypeScript sources using tree-sitter."""

from functools import lru_cache
from pathlib import Path

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

from oxmigrate.models.source import Comment, CommentKind, Span

# Characters that end a // comment
LINE_TERMINATORS = "\n\r\u2028\u2029"

DEFAULT_LANGUAGE = "javascript"

LANGUAGE_EXTENSIONS = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

COMMENT_TYPES = {"comment"}


def language_for_path(path: Path) -> str:
    """Pick the tree-sitter grammar for a file from its extension."""
    return LANGUAGE_EXTENSIONS.get(path.suffix.lower(), DEFAULT_LANGUAGE)


@lru_cache(maxsize=None)
def _parser(language: str) -> Parser:
    return get_parser(language)


def extract_comments(source: str, language: str = DEFAULT_LANGUAGE) -> list[Comment]:
    """Extract all line and block comments from ``source``, in source order.

    Spans are string offsets into ``source``, not byte offsets.
    """
    data = source.encode("utf-8")
    tree = _parser(language).parse(data)
    offsets = _ByteToCharOffsets(data)

    comments: list[Comment] = []
    for node in _iter_comment_nodes(tree.root_node):
        comment = _comment_from_node(node, data, offsets)
        if comment:
            comments.append(comment)
    return comments


def _iter_comment_nodes(root: Node):
    """Yield comment nodes in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in COMMENT_TYPES:
            yield node
            continue
        stack.extend(reversed(node.children))


def _comment_from_node(node: Node, data: bytes, offsets: "_ByteToCharOffsets") -> Comment | None:
    text = data[node.start_byte : node.end_byte]
    start = offsets.char_offset(node.start_byte)
    end = offsets.char_offset(node.end_byte)

    if text.startswith(b"//"):
        return Comment(
            kind=CommentKind.LINE,
            span=Span(start, end),
            content_span=Span(start + 2, end),
        )

    if text.startswith(b"/*"):
        content_end = end - 2 if len(text) >= 4 and text.endswith(b"*/") else end
        return Comment(
            kind=CommentKind.BLOCK,
            span=Span(start, end),
            content_span=Span(start + 2, content_end),
        )

    return None


class _ByteToCharOffsets:
    """Convert increasing UTF-8 byte offsets to string offsets."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.ascii = data.isascii()
        self._byte = 0
        self._char = 0

    def char_offset(self, byte_offset: int) -> int:
        if self.ascii:
            return byte_offset
        if byte_offset < self._byte:
            self._byte = 0
            self._char = 0
        self._char += len(self.data[self._byte : byte_offset].decode("utf-8"))
        self._byte = byte_offset
        return self._char
