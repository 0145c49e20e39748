"""
Split Java source into code and Javadoc chunks, and rewrite the Javadoc ones.

The scanner is a small lexer: it knows enough about string literals, text
blocks, character literals and ordinary comments to never mistake
``"/** x */"`` or ``// /** x */`` for a doc comment. Everything that is not a
Javadoc comment is passed through untouched.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..errors import JavaParseError
from .doc_comment import DocComment, Kind
from .strings import detect_line_ending

logger = logging.getLogger(__name__)


class ChunkType(Enum):
    CODE = "code"
    JAVADOC = "javadoc"


@dataclass(frozen=True)
class Chunk:
    """A run of source text. Joining all chunks gives the source back."""

    type: ChunkType
    text: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_javadoc(self) -> bool:
        return self.type is ChunkType.JAVADOC


def scan(source: str) -> List[Chunk]:
    """
    Split ``source`` into alternating CODE and JAVADOC chunks.

    Raises:
        JavaParseError: if a Javadoc comment is never closed
    """
    chunks: List[Chunk] = []
    code_start = 0
    i = 0
    n = len(source)

    def flush_code(upto: int) -> None:
        if upto > code_start:
            chunks.append(Chunk(ChunkType.CODE, source[code_start:upto], code_start))

    while i < n:
        c = source[i]
        if source.startswith("//", i):
            newline = _find_line_end(source, i)
            i = n if newline == -1 else newline
        elif source.startswith("/**/", i):
            i += 4
        elif source.startswith("/**", i):
            close = source.find("*/", i + 3)
            if close == -1:
                raise JavaParseError(
                    f"Unclosed Javadoc comment starting at position {i}", position=i
                )
            flush_code(i)
            chunks.append(Chunk(ChunkType.JAVADOC, source[i:close + 2], i))
            i = close + 2
            code_start = i
        elif source.startswith("/*", i):
            close = source.find("*/", i + 2)
            # an unclosed block comment runs to the end of the file
            i = n if close == -1 else close + 2
        elif source.startswith('"""', i):
            i = _skip_text_block(source, i)
        elif c == '"' or c == "'":
            i = _skip_literal(source, i, c)
        else:
            i += 1

    flush_code(n)
    return chunks


def _find_line_end(source: str, start: int) -> int:
    positions = [p for p in (source.find("\n", start), source.find("\r", start)) if p != -1]
    return min(positions) if positions else -1


def _skip_literal(source: str, start: int, quote: str) -> int:
    """Index just past a string or char literal; literals never span lines."""
    i = start + 1
    while i < len(source):
        c = source[i]
        if c == "\\":
            i += 2
            continue
        if c == quote:
            return i + 1
        if c in "\r\n":
            return i
        i += 1
    return len(source)


def _skip_text_block(source: str, start: int) -> int:
    i = start + 3
    while i < len(source):
        if source[i] == "\\":
            i += 2
            continue
        if source.startswith('"""', i):
            return i + 3
        i += 1
    return len(source)


_CLASS_RE = re.compile(r"\b(class|interface|enum|record)\b")
_ANNOTATION_RE = re.compile(r"^\s*@\w+(\.\w+)*(\([^)]*\))?\s*", re.DOTALL)


def infer_kind(following_code: str) -> Optional[Kind]:
    """
    Guess what a comment documents from the declaration that follows it.

    Annotations are skipped. Returns None when nothing recognizable follows.
    """
    code = following_code
    while True:
        match = _ANNOTATION_RE.match(code)
        if not match or match.end() == 0:
            break
        code = code[match.end():]

    declaration = re.split(r"[;{=]", code, maxsplit=1)[0].strip()
    if not declaration:
        return None
    if _CLASS_RE.search(declaration):
        return Kind.CLASS
    if "(" in declaration:
        return Kind.METHOD
    return Kind.FIELD


def fix_source(source: str) -> str:
    """
    Rewrite every Javadoc comment in ``source`` to the Oracle conventions.

    Code before or after a comment on the same line is kept. A comment that
    ends up empty is removed, together with its line when nothing else is
    on it.
    """
    line_ending = detect_line_ending(source)
    chunks = scan(source)
    texts = [chunk.text for chunk in chunks]

    for i, chunk in enumerate(chunks):
        if not chunk.is_javadoc:
            continue

        has_before = i > 0 and not chunks[i - 1].is_javadoc
        has_after = i + 1 < len(chunks) and not chunks[i + 1].is_javadoc
        before = texts[i - 1] if has_before else ""
        after = texts[i + 1] if has_after else ""
        kind = infer_kind(after)

        line_start = max(before.rfind("\n"), before.rfind("\r")) + 1
        prefix = before[line_start:]
        inline = bool(prefix.strip()) or (i > 0 and not has_before)

        if inline:
            # Code precedes the comment; continuation lines follow the line's indent
            indent = prefix[: len(prefix) - len(prefix.lstrip())]
            fixed = DocComment.parse(indent + chunk.text, kind).to_java()
            texts[i] = fixed[len(indent):]
        else:
            fixed = DocComment.parse(prefix + chunk.text, kind).to_java()
            if fixed or _rest_of_line_blank(after):
                # to_java renders the indentation itself
                if has_before:
                    texts[i - 1] = before[:line_start]
                if not fixed and has_after:
                    texts[i + 1] = _drop_rest_of_line(after)
            elif has_after:
                # Code follows the removed comment on the same line
                texts[i + 1] = after.lstrip(" \t")
            texts[i] = fixed

        if not fixed:
            logger.debug("Removed empty Javadoc comment at position %d", chunk.start)
        texts[i] = texts[i].replace("\n", line_ending)

    return "".join(texts)


def _rest_of_line_blank(text: str) -> bool:
    line_end = _find_line_end(text, 0)
    rest = text if line_end == -1 else text[:line_end]
    return not rest.strip()


def _drop_rest_of_line(text: str) -> str:
    """Remove everything up to and including the first line terminator."""
    line_end = _find_line_end(text, 0)
    if line_end == -1:
        return ""
    if text.startswith("\r\n", line_end):
        return text[line_end + 2:]
    return text[line_end + 1:]


def extract_chunks(source: str) -> List[str]:
    """Chunk texts in order; each Javadoc comment is one string."""
    return [chunk.text for chunk in scan(source)]
