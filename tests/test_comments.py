"""Tests for JavaScript/TypeScript comment extraction."""

from pathlib import Path

import pytest

from oxmigrate.analysis.comments import extract_comments, language_for_path
from oxmigrate.models.source import CommentKind, Span


def contents(source: str) -> list[str]:
    """Helper returning the content text of every extracted comment."""
    return [c.content(source) for c in extract_comments(source)]


class TestLineComments:
    """Tests for // comments."""

    def test_spans(self):
        source = "a; // hi\nb;"
        comments = extract_comments(source)

        assert len(comments) == 1
        comment = comments[0]
        assert comment.kind is CommentKind.LINE
        assert comment.is_line
        assert comment.span == Span(3, 8)
        assert comment.content_span == Span(5, 8)
        assert comment.content(source) == " hi"

    def test_comment_at_end_of_input(self):
        assert contents("x(); // last") == [" last"]

    def test_crlf_line_endings(self):
        source = "// a\r\n// b\r\n"
        comments = extract_comments(source)

        assert [c.span for c in comments] == [Span(0, 4), Span(6, 10)]
        assert contents(source) == [" a", " b"]

    def test_triple_slash(self):
        assert contents('/// <reference path="x" />') == ['/ <reference path="x" />']


class TestBlockComments:
    """Tests for /* */ comments."""

    def test_spans(self):
        source = "/* x */"
        comments = extract_comments(source)

        assert len(comments) == 1
        assert comments[0].kind is CommentKind.BLOCK
        assert not comments[0].is_line
        assert comments[0].span == Span(0, 7)
        assert comments[0].content_span == Span(2, 5)

    def test_multiline(self):
        source = "/**\n * eslint-disable\n */\nf();"
        assert contents(source) == ["*\n * eslint-disable\n "]

    def test_line_marker_inside_block(self):
        assert contents("/* // inner */ f();") == [" // inner "]

    def test_source_order(self):
        source = "/* a */ x; // b\n/* c */"
        assert contents(source) == [" a ", " b", " c "]


class TestLiterals:
    """Comment markers inside literals are not comments."""

    def test_single_quoted_string(self):
        assert contents("const s = '// not';") == []

    def test_double_quoted_string(self):
        assert contents('const s = "/* no */";') == []

    def test_escaped_quote(self):
        assert contents(r'const s = "a \" // b"; // c') == [" c"]

    def test_template_literal(self):
        assert contents("const t = `// nope /* nope */`;") == []

    def test_template_substitution_with_comment(self):
        source = "const t = `// ${a /* yes */} //no`;"
        assert contents(source) == [" yes "]

    def test_nested_templates(self):
        source = "`${`${'/*'}`}` // c"
        assert contents(source) == [" c"]

    def test_object_literal_inside_substitution(self):
        source = "`${ {a: 1}.a } // x` // y"
        assert contents(source) == [" y"]

    def test_regex_literal(self):
        assert contents(r"const r = /\/\/ not/g; // real") == [" real"]

    def test_regex_character_class(self):
        assert contents("const r = /[/]/; // c") == [" c"]

    def test_regex_after_keyword(self):
        assert contents("function f() { return /a\\/b/ } // c") == [" c"]

    def test_division_is_not_regex(self):
        assert contents("x = a / b; // c\ny = (c) / 2 // d") == [" c", " d"]

    def test_postfix_increment_then_division(self):
        assert contents("x = i++ / 2; // c") == [" c"]


class TestHashbang:
    def test_hashbang_is_not_a_comment(self):
        source = "#!/usr/bin/env node\n// eslint-disable\nmain();"
        comments = extract_comments(source)

        assert len(comments) == 1
        assert comments[0].content(source) == " eslint-disable"

    def test_hashbang_only(self):
        assert extract_comments("#!/usr/bin/env node") == []


def test_empty_source():
    assert extract_comments("") == []


class TestLanguages:
    """Grammar selection and JSX/TypeScript sources."""

    @pytest.mark.parametrize(
        "name,language",
        [
            ("a.js", "javascript"),
            ("a.jsx", "javascript"),
            ("a.mjs", "javascript"),
            ("a.cjs", "javascript"),
            ("a.ts", "typescript"),
            ("a.mts", "typescript"),
            ("a.cts", "typescript"),
            ("a.tsx", "tsx"),
            ("A.TSX", "tsx"),
            ("a.vue", "javascript"),
        ],
    )
    def test_language_for_path(self, name: str, language: str):
        assert language_for_path(Path(name)) == language

    def test_jsx_text_is_not_a_comment(self):
        assert contents("const a = <p>see http://x.y</p>;\n") == []

    def test_jsx_expression_comment(self):
        source = "const a = <div>{/* eslint-disable-next-line */}</div>;\n"
        assert contents(source) == [" eslint-disable-next-line "]

    def test_tsx_text_is_not_a_comment(self):
        source = "const a = (x: number) => <p>http://x.y</p>; // real\n"
        assert contents_for(source, "tsx") == [" real"]

    def test_typescript_annotations(self):
        source = "// eslint-disable\nfunction f(a: string): number { return a.length / 2; }\n"
        assert contents_for(source, "typescript") == [" eslint-disable"]


class TestOffsets:
    def test_spans_are_string_offsets(self):
        """Non-ASCII text before a comment must not shift the spans."""
        source = "const s = 'héllo ✓'; // ünïcode"
        [comment] = extract_comments(source)

        assert comment.span == Span(21, 31)
        assert comment.content(source) == " ünïcode"

    def test_several_comments_after_non_ascii(self):
        source = "/* é */ x; /* ✓✓ */ y; // ü"
        assert contents(source) == [" é ", " ✓✓ ", " ü"]


def contents_for(source: str, language: str) -> list[str]:
    """Helper like ``contents`` for a specific grammar."""
    return [c.content(source) for c in extract_comments(source, language)]
