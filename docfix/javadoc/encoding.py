"""
Character encoding detection for Java source files.

Java sources are mostly ASCII keywords and identifiers, which makes a couple
of cheap heuristics good enough: a BOM wins, then UTF-8 if the bytes are
valid UTF-8, then ISO-8859-1 for older files. UTF-8 is the default.
"""

import codecs
import logging
from pathlib import Path
from typing import Optional, Union

from ..errors import InvalidEncodingError

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 4096
DEFAULT_ENCODING = "utf-8"

JAVA_KEYWORDS = ("package", "import", "class", "interface", "record", "enum")

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def detect_encoding(file: Union[str, Path]) -> str:
    """
    Detect the encoding of a Java source file.

    Args:
        file: Path to the file

    Returns:
        A codec name usable with ``open()``; ``utf-8`` when nothing better is found
    """
    with open(file, "rb") as f:
        sample = f.read(SAMPLE_SIZE)

    if not sample:
        return DEFAULT_ENCODING

    bom_encoding = detect_bom(sample)
    if bom_encoding:
        logger.debug("Detected %s BOM in %s", bom_encoding, file)
        return bom_encoding

    return detect_java_encoding(sample)


def detect_bom(sample: bytes) -> Optional[str]:
    for bom, encoding in _BOMS:
        if sample.startswith(bom):
            return encoding
    return None


def detect_java_encoding(sample: bytes) -> str:
    if is_valid_utf8(sample) and contains_java_keywords(sample, "utf-8"):
        return "utf-8"
    if contains_java_keywords(sample, "iso-8859-1"):
        return "iso-8859-1"
    return DEFAULT_ENCODING


def is_valid_utf8(sample: bytes) -> bool:
    """Valid UTF-8, allowing a multi-byte sequence cut off at the end of the sample."""
    decoder = codecs.getincrementaldecoder("utf-8")()
    try:
        decoder.decode(sample, final=False)
    except UnicodeDecodeError:
        return False
    return True


def contains_java_keywords(sample: bytes, encoding: str) -> bool:
    content = sample.decode(encoding, errors="ignore")
    return any(keyword in content for keyword in JAVA_KEYWORDS)


def resolve_encoding(name: Optional[str]) -> Optional[str]:
    """
    Validate a charset name such as ``UTF-8`` or ``ISO-8859-1``.

    Returns the name unchanged, or None when ``name`` is None.

    Raises:
        InvalidEncodingError: if Python has no codec for the name
    """
    if name is None:
        return None
    try:
        codecs.lookup(name)
    except LookupError:
        raise InvalidEncodingError(f"Invalid charset name: {name}")
    return name
