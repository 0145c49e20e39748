"""
Tests for parsing and rendering Javadoc comments.
"""

from docfix.javadoc.block_tag import BlockTag
from docfix.javadoc.doc_comment import (
    DocComment,
    Kind,
    SingleLineComment,
    find_post_asterisk_indent,
    normalize_description,
    sort_tags,
    strip_asterisk,
)


class TestParse:
    """Tests for DocComment.parse."""

    def test_method_comment(self):
        """Test fixing a method comment with tags."""
        raw = (
            "    /**\n"
            "     * this is a method.\n"
            "     *\n"
            "     * @param x The value.\n"
            "     * @return The result.\n"
            "     */"
        )
        comment = DocComment.parse(raw, Kind.METHOD)

        assert comment.get_kind() is Kind.METHOD
        assert comment.get_description() == "This is a method."
        assert [tag.type for tag in comment.get_block_tags()] == ["param", "return"]
        assert comment.to_java() == (
            "    /**\n"
            "     * This is a method.\n"
            "     *\n"
            "     * @param x the value\n"
            "     * @return the result\n"
            "     */"
        )

    def test_single_line_without_tags(self):
        """Test that a one-line comment without tags stays on one line."""
        comment = DocComment.parse("/** return the value */")
        assert isinstance(comment, SingleLineComment)
        assert comment.to_java() == "/** Return the value. */"

    def test_single_line_with_tag_is_expanded(self):
        """Test that a one-line comment with a tag is expanded."""
        comment = DocComment.parse("/** @return the value */")
        assert not isinstance(comment, SingleLineComment)
        assert comment.to_java() == "/**\n * @return the value\n */"

    def test_inline_tag_does_not_count_as_block_tag(self):
        """Test that {@link} does not force a multi-line comment."""
        comment = DocComment.parse("/** see {@link Foo} */")
        assert isinstance(comment, SingleLineComment)
        assert comment.to_java() == "/** See {@link Foo} */"

    def test_crlf_input(self):
        """Test parsing a comment with CRLF line endings."""
        comment = DocComment.parse("/**\r\n * hello\r\n */")
        assert comment.to_java() == "/**\n * Hello.\n */"

    def test_tab_indent_preserved(self):
        """Test that tab indentation is kept."""
        comment = DocComment.parse("\t/**\n\t * hello\n\t */")
        assert comment.to_java() == "\t/**\n\t * Hello.\n\t */"

    def test_tag_continuation_lines(self):
        """Test tags whose text spans lines."""
        raw = (
            "/**\n"
            " * Sets it.\n"
            " *\n"
            " * @param value the new value,\n"
            " *     which must be positive\n"
            " */"
        )
        assert DocComment.parse(raw).to_java() == raw

    def test_preformatted_description_keeps_indentation(self):
        """Test that <pre> blocks keep their indentation."""
        raw = (
            "/**\n"
            " * Example:\n"
            " * <pre>\n"
            " *   code();\n"
            " * </pre>\n"
            " */"
        )
        assert DocComment.parse(raw).to_java() == raw


class TestTags:
    """Tests for tag ordering and removal."""

    def test_canonical_order(self):
        """Test that tags are sorted into the standard order."""
        raw = (
            "/**\n"
            " * Does it.\n"
            " *\n"
            " * @throws IOException on error\n"
            " * @return the value\n"
            " * @param b second\n"
            " * @param a first\n"
            " * @author Jane\n"
            " */"
        )
        assert DocComment.parse(raw).to_java() == (
            "/**\n"
            " * Does it.\n"
            " *\n"
            " * @author Jane\n"
            " * @param b second\n"
            " * @param a first\n"
            " * @return the value\n"
            " * @throws IOException on error\n"
            " */"
        )

    def test_throws_sorted_by_exception_ignoring_case(self):
        """Test that @throws tags sort by exception name."""
        tags = [
            BlockTag("throws", "NullPointerException", "if null"),
            BlockTag("throws", "illegalStateException", "if closed"),
            BlockTag("throws", "IOException", "on error"),
        ]
        assert [tag.argument for tag in sort_tags(tags)] == [
            "illegalStateException",
            "IOException",
            "NullPointerException",
        ]

    def test_unknown_tags_go_last(self):
        """Test that unknown tags sort after known ones."""
        tags = [BlockTag("custom", "x", "y"), BlockTag("deprecated", None, "Gone.")]
        assert [tag.type for tag in sort_tags(tags)] == ["deprecated", "custom"]

    def test_blank_tags_removed(self):
        """Test that blank tags are dropped."""
        comment = DocComment.parse("/**\n * Hello.\n * @return\n */")
        assert comment.get_block_tags() == []
        assert comment.to_java() == "/**\n * Hello.\n */"

    def test_alignment_kept_with_several_tags(self):
        """Test that aligned tag text is kept when there are several tags."""
        raw = (
            "/**\n"
            " * @param x    the x\n"
            " * @param long the long\n"
            " */"
        )
        assert DocComment.parse(raw).to_java() == raw

    def test_alignment_dropped_with_one_tag(self):
        """Test that alignment spaces are collapsed for a lone tag."""
        comment = DocComment.parse("/**\n * @param x    the x\n */")
        assert comment.to_java() == "/**\n * @param x the x\n */"


class TestEmpty:
    """Tests for comments with nothing in them."""

    def test_empty_single_line(self):
        """Test that an empty one-line comment renders as nothing."""
        comment = DocComment.parse("/** */")
        assert comment.is_empty()
        assert comment.to_java() == ""

    def test_empty_multi_line(self):
        """Test that an empty multi-line comment renders as nothing."""
        assert DocComment.parse("    /**\n     */").to_java() == ""

    def test_shortest_comment(self):
        """Test the shortest possible comment."""
        assert DocComment.parse("/**/").to_java() == ""


class TestHelpers:
    """Tests for module helpers."""

    def test_post_asterisk_indent_is_minimum(self):
        """Test that the smallest indent after the asterisks wins."""
        assert find_post_asterisk_indent("/**\n *   a\n *  b\n */") == 2

    def test_post_asterisk_indent_at_least_one(self):
        """Test that the indent after the asterisk is at least one."""
        assert find_post_asterisk_indent("/**\n *a\n */") == 1

    def test_post_asterisk_indent_ignores_tags(self):
        """Test that tag lines do not count toward the indent."""
        assert find_post_asterisk_indent("/**\n *   a\n * @return x\n */") == 3

    def test_strip_asterisk(self):
        """Test stripping the leading asterisk."""
        assert strip_asterisk(" *   foo", 1) == "  foo"
        assert strip_asterisk(" *foo", 1) == "foo"
        assert strip_asterisk("   foo", 1) == "foo"

    def test_normalize_description(self):
        """Test capitalizing and terminating a description."""
        assert normalize_description("  hello world ") == "Hello world."
        assert normalize_description("serialVersionUID for this class") == "serialVersionUID for this class."
        assert normalize_description("See https://example.com") == "See https://example.com"
        assert normalize_description("   ") == ""
        assert normalize_description(None) == ""

    def test_repr(self):
        """Test the comment's repr."""
        comment = DocComment(Kind.FIELD, "the x", [])
        assert "FIELD" in repr(comment)
        assert str(comment) == "/**\n * The x.\n */"
