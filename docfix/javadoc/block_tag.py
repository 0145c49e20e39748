"""
Javadoc block tags (@param, @return, @throws, @deprecated and custom tags).

Parsing a tag also normalizes its text to the Oracle guidelines: lowercase
first word, no trailing period on a fragment, no redundant "returns".
"""

import re
from dataclasses import dataclass
from typing import Optional

from .proper_nouns import is_proper_noun
from .strings import ends_with_abbreviation, first_word, is_acronym

NO_ARGUMENT_TAGS = frozenset(
    {"return", "deprecated", "author", "serial", "see", "serialData", "since", "version"}
)

# Tags whose text is a full sentence or a name and keeps its capitalization
KEEP_CASE_TAGS = frozenset({"author", "see", "deprecated"})

# Only these tags are dropped when they carry nothing
REMOVABLE_WHEN_BLANK = frozenset({"param", "return", "throws"})

_TAG_RE = re.compile(r"@(\S+)(.*)", re.DOTALL)
_ARGUMENT_RE = re.compile(r"[ \t]*(\S+)([ \t]*)(.*)", re.DOTALL)
_REDUNDANT_RETURN_RE = re.compile(r"returns? ", re.IGNORECASE)


@dataclass(frozen=True)
class BlockTag:
    """A single block tag of a doc comment."""

    type: str
    argument: Optional[str]
    text: str
    spaces: str = " "

    @classmethod
    def parse(cls, raw: str) -> "BlockTag":
        """
        Parse a block tag from text starting with ``@``.

        Continuation lines follow the first line after a newline, already
        stripped of their leading asterisk.
        """
        match = _TAG_RE.match(raw.strip())
        if not match:
            raise ValueError(f"Not a block tag: {raw!r}")
        tag_type, rest = match.group(1), match.group(2)
        if tag_type == "exception":
            tag_type = "throws"

        argument = None
        spaces = " "
        if tag_type in NO_ARGUMENT_TAGS:
            text = rest.strip()
        else:
            arg_match = _ARGUMENT_RE.match(rest)
            if arg_match:
                argument = arg_match.group(1)
                text = arg_match.group(3).strip()
                if arg_match.group(2) and text:
                    spaces = arg_match.group(2)
            else:
                text = rest.strip()

        return cls(tag_type, argument, normalize_text(tag_type, text), spaces)

    def is_blank(self) -> bool:
        """
        True when the tag says nothing and should be removed.

        Only @param, @return and @throws are ever blank. @return needs text;
        @param and @throws are kept as long as they name an argument.
        """
        if self.type not in REMOVABLE_WHEN_BLANK:
            return False
        text_blank = not self.text.strip()
        if self.type == "return":
            return text_blank
        return text_blank and not (self.argument or "").strip()

    def to_java(self, align: bool = False, indent: str = "") -> str:
        """Render the tag as comment lines, each ending in a newline."""
        lines = self.text.split("\n")
        head = f"{indent} * @{self.type}"
        if self.argument:
            head += f" {self.argument}"
        if lines[0]:
            head += (self.spaces if align else " ") + lines[0]
        rendered = [head]
        for line in lines[1:]:
            rendered.append(f"{indent} *{line.rstrip()}" if line.strip() else f"{indent} *")
        return "\n".join(rendered) + "\n"

    def __str__(self) -> str:
        return self.to_java()


def normalize_text(tag_type: str, text: str) -> str:
    """Apply the tag text rules in order: hyphen, redundant return, case, period."""
    if text.startswith("- "):
        text = text[2:].strip()

    if tag_type == "return":
        match = _REDUNDANT_RETURN_RE.match(text)
        if match and len(text) > match.end():
            text = text[match.end():]

    if text and should_lower_case(tag_type, text):
        text = text[0].lower() + text[1:]

    if (
        text.endswith(".")
        and ". " not in text
        and ".\n" not in text
        and tag_type != "deprecated"
        and not ends_with_abbreviation(text)
    ):
        text = text[:-1].rstrip()
    return text


def should_lower_case(tag_type: str, text: str) -> bool:
    """True iff the first word is an ordinary capitalized word."""
    if tag_type in KEEP_CASE_TAGS:
        return False
    if not text[0].isupper():
        return False

    word = first_word(text)
    if is_proper_noun(word) or is_acronym(word):
        return False
    # CamelCase or ALLCAPS words such as ManifestConfiguration or IO
    return not any(c.isupper() for c in word[1:])
