"""
Tests for one-line doc comments.
"""

from docfix.javadoc.doc_comment import DocComment, Kind, SingleLineComment


class TestSingleLineComment:
    """Tests for SingleLineComment."""

    def test_capitalizes_and_terminates(self):
        """Test capitalizing and adding a period."""
        comment = SingleLineComment(Kind.FIELD, "the name")
        assert comment.to_java() == "/** The name. */"

    def test_indent(self):
        """Test rendering with indentation."""
        comment = SingleLineComment(Kind.FIELD, "the name", "    ")
        assert comment.to_java() == "    /** The name. */"

    def test_question_is_kept(self):
        """Test that a question mark ends the sentence."""
        assert SingleLineComment(None, "is it?").to_java() == "/** Is it? */"

    def test_extra_spaces_inside_markers(self):
        """Test that extra spaces inside the markers are collapsed."""
        comment = DocComment.parse("    /**   the imaginary part   */")
        assert comment.to_java() == "    /** The imaginary part. */"

    def test_double_star_close(self):
        """Test that a closing **/ is normalized."""
        assert DocComment.parse("/** the value **/").to_java() == "/** The value. */"

    def test_empty(self):
        """Test that an empty comment renders as nothing."""
        comment = SingleLineComment(None, "")
        assert comment.is_empty()
        assert comment.to_java() == ""

    def test_already_fixed_is_unchanged(self):
        """Test that a correct comment is unchanged."""
        raw = "/** A class that needs nothing. */"
        assert DocComment.parse(raw).to_java() == raw
