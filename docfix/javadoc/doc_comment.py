"""
Javadoc comment model: parse a raw comment, normalize it, render it back.

A comment is a description followed by block tags. Rendering follows the
Oracle "How to Write Doc Comments" conventions: capitalized description that
ends with a period, a blank line before the tags, and tags in canonical order.
"""

import re
from enum import Enum
from typing import List, Optional

from .block_tag import BlockTag
from .strings import capitalize_first, detect_line_ending, find_indent, needs_period


class Kind(Enum):
    """What the comment documents."""

    CLASS = "class"
    METHOD = "method"
    FIELD = "field"


TAG_ORDER = {
    "author": 0,
    "version": 1,
    "param": 2,
    "return": 3,
    "throws": 4,
    "see": 5,
    "since": 6,
    "serial": 7,
    "serialField": 7,
    "serialData": 7,
    "deprecated": 8,
}
UNKNOWN_TAG_ORDER = len(TAG_ORDER)

# A line that starts a block tag, with or without a leading asterisk
_TAG_LINE_RE = re.compile(r"^\s*\*?\s*@\S")
# "@" at the start of a word; "{@link}" is an inline tag, not a block tag
_BLOCK_TAG_RE = re.compile(r"(?:^|\s)@\S")


def sort_tags(block_tags: List[BlockTag]) -> List[BlockTag]:
    """
    Sort tags into the canonical order.

    @throws tags are ordered by exception name, ignoring case. Other tags of
    the same type keep their original order since there is no way to know
    which author was added first.
    """

    def key(tag: BlockTag):
        order = TAG_ORDER.get(tag.type, UNKNOWN_TAG_ORDER)
        if tag.type == "throws":
            return order, (tag.argument or "").lower()
        return order, ""

    return sorted(block_tags, key=key)


def find_post_asterisk_indent(raw: str) -> int:
    """
    Smallest number of spaces following the leading asterisk on description lines.

    The first line and everything from the first block tag on are ignored.
    The result is at least 1.
    """
    min_spaces = None
    for line in raw.split("\n")[1:]:
        line = line.strip()
        if _TAG_LINE_RE.match(line):
            break
        if line.startswith("*") and not line.endswith("*/") and line != "*":
            spaces = find_indent(line[1:])
            if min_spaces is None or spaces < min_spaces:
                min_spaces = spaces
    if min_spaces is None or min_spaces < 1:
        return 1
    return min_spaces


def strip_asterisk(line: str, post_asterisk_indent: int) -> str:
    """
    Remove the leading asterisk and up to ``post_asterisk_indent`` spaces.

    Spaces beyond the common indent are kept so that lists and code samples
    stay indented.
    """
    stripped = line.lstrip()
    if not stripped.startswith("*"):
        return stripped
    after = stripped[1:]
    leading = len(after) - len(after.lstrip(" "))
    return after[min(leading, post_asterisk_indent):]


class DocComment:
    """A parsed Javadoc comment."""

    def __init__(
        self,
        kind: Optional[Kind],
        description: str,
        block_tags: List[BlockTag],
        indent: str = "",
    ):
        self.kind = kind
        self.description = normalize_description(description)
        self.block_tags = sort_tags([tag for tag in block_tags if not tag.is_blank()])
        self.indent = indent

    @staticmethod
    def parse(raw: str, kind: Optional[Kind] = None) -> "DocComment":
        """
        Parse a raw comment, from its leading indentation through ``*/``.

        Returns a SingleLineComment when the comment fits on one line and has
        no block tags.
        """
        raw = raw.replace(detect_line_ending(raw), "\n")
        tag_indent = raw[: len(raw) - len(raw.lstrip(" \t"))]
        post_asterisk_indent = find_post_asterisk_indent(raw)

        body = raw.strip()
        single_line = "\n" not in body
        if body == "/**/":
            body = ""
        if body.startswith("/**"):
            body = body[3:]
        if body.endswith("**/"):
            body = body[:-3]
        elif body.endswith("*/"):
            body = body[:-2]
        body = body.strip()

        if single_line and not _BLOCK_TAG_RE.search(body):
            return SingleLineComment(kind, body, tag_indent)

        lines = body.split("\n")
        description: List[str] = []
        block_tags: List[BlockTag] = []
        in_block_tags = False
        i = 0
        while i < len(lines):
            text = strip_asterisk(lines[i], post_asterisk_indent)
            if text.lstrip().startswith("@"):
                in_block_tags = True
                tag_lines = [text.lstrip()]
                while i + 1 < len(lines) and not _TAG_LINE_RE.match(lines[i + 1]):
                    i += 1
                    if lines[i].strip() not in ("", "*"):
                        tag_lines.append(_continuation(lines[i]))
                block_tags.append(BlockTag.parse("\n".join(tag_lines)))
            elif not in_block_tags:
                description.append(text)
            i += 1

        return DocComment(kind, "\n".join(description), block_tags, tag_indent)

    def get_kind(self) -> Optional[Kind]:
        return self.kind

    def get_description(self) -> str:
        return self.description

    def get_block_tags(self) -> List[BlockTag]:
        return list(self.block_tags)

    def is_empty(self) -> bool:
        return not self.description.strip() and not self.block_tags

    def to_java(self) -> str:
        """Render the comment; an empty comment renders as the empty string."""
        if self.is_empty():
            return ""
        indent = self.indent
        out = [f"{indent}/**\n"]
        if self.description.strip():
            for line in self.description.split("\n"):
                out.append(f"{indent} * {line}\n" if line.strip() else f"{indent} *\n")
        if self.block_tags:
            if self.description.strip():
                out.append(f"{indent} *\n")
            align = len(self.block_tags) > 1
            for tag in self.block_tags:
                out.append(tag.to_java(align, indent))
        out.append(f"{indent} */")
        return "".join(out)

    def __str__(self) -> str:
        return self.to_java()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind}, description={self.description!r}, "
            f"block_tags={len(self.block_tags)})"
        )


class SingleLineComment(DocComment):
    """
    A one-line comment without block tags, rendered with both comment
    markers on the same line as the description.
    """

    def __init__(self, kind: Optional[Kind], description: str, indent: str = ""):
        super().__init__(kind, description, [], indent)

    def to_java(self) -> str:
        if self.is_empty():
            return ""
        description = self.description
        if not description.endswith((".", "!", "?")) and needs_period(description):
            description += "."
        return f"{self.indent}/** {description} */"


def normalize_description(description: Optional[str]) -> str:
    """Strip, capitalize and terminate the main description."""
    if not description or not description.strip():
        return ""
    description = capitalize_first(description.strip())
    if needs_period(description):
        description += "."
    return description


def _continuation(line: str) -> str:
    """Content of a block tag continuation line after its asterisk."""
    stripped = line.lstrip()
    if stripped.startswith("*"):
        return stripped[1:].rstrip()
    return " " + stripped.rstrip()
