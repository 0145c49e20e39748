"""String helpers shared by the Javadoc parser and renderer."""

from typing import Optional

URL_SCHEMES = ("http://", "https://", "ftp://", "ftps://", "file://", "mailto:")
URL_HOST_PREFIXES = ("www.", "ftp.")

# Abbreviations that keep their trailing period at the end of tag text.
ABBREVIATIONS = frozenset(
    {
        "Inc.", "Ltd.", "Corp.", "Co.", "LLC.", "LLP.", "LP.",
        "Jr.", "Sr.", "Esq.",
        "Dr.", "Mr.", "Mrs.", "Ms.", "Miss.", "Prof.",
        "Ph.D.", "M.D.", "M.B.A.", "B.A.", "B.S.", "M.A.", "M.S.",
        "Ave.", "St.", "Rd.", "Blvd.", "Dept.", "Univ.",
        "etc.", "e.g.", "i.e.", "cf.", "vs.", "vol.", "no.", "pp.",
    }
)

TAB_WIDTH = 4


def find_indent(s: str) -> int:
    """Number of leading columns in ``s``, counting a tab as four spaces."""
    indent = 0
    for c in s:
        if c == " ":
            indent += 1
        elif c == "\t":
            indent += TAB_WIDTH
        else:
            break
    return indent


def detect_line_ending(code: str) -> str:
    """Return the line ending used in ``code``: CRLF, then CR, then LF."""
    if "\r\n" in code:
        return "\r\n"
    if "\r" in code:
        return "\r"
    return "\n"


def last_word(text: Optional[str]) -> str:
    if not text or not text.strip():
        return ""
    return text.split()[-1]


def first_word(text: str) -> str:
    text = text.strip()
    if not text:
        return ""
    return text.split()[0]


def ends_with_scheme_url(text: Optional[str]) -> bool:
    """True when the last token of ``text`` carries an explicit URL scheme."""
    word = last_word(text)
    return any(scheme in word for scheme in URL_SCHEMES)


def ends_with_url(text: Optional[str]) -> bool:
    """
    Check whether ``text`` ends with a URL.

    A URL is a token with an explicit scheme or one starting with ``www.`` or
    ``ftp.``. Bare domain names such as ``docs.example.com`` are not URLs.
    """
    word = last_word(text)
    if not word:
        return False
    if ends_with_scheme_url(word):
        return True
    return word.startswith(URL_HOST_PREFIXES)


def ends_with_abbreviation(text: Optional[str]) -> bool:
    """True when the final token of ``text`` is a known abbreviation."""
    word = last_word(text)
    if len(word) < 3:
        return False
    if word in ABBREVIATIONS:
        return True
    # "(etc." or "Acme,Inc." still count
    return any(
        word.endswith(abbreviation) and not word[-len(abbreviation) - 1].isalpha()
        for abbreviation in ABBREVIATIONS
        if len(word) > len(abbreviation)
    )


def is_acronym(word: str) -> bool:
    """Three or more characters with no lowercase letter, like ``XML`` or ``I/O``."""
    if len(word) < 3:
        return False
    return not any(c.islower() for c in word)


def looks_like_identifier(word: str) -> bool:
    """A lowerCamelCase word such as ``serialVersionUID`` that must keep its case."""
    if not word or not word[0].islower():
        return False
    return any(c.isupper() for c in word[1:])


def capitalize_first(text: str) -> str:
    if not text or looks_like_identifier(first_word(text)):
        return text
    return text[0].upper() + text[1:]


def needs_period(text: str) -> bool:
    """Sentences ending in a letter or digit get a period, unless they end in a URL."""
    if not text:
        return False
    return text[-1].isalnum() and not ends_with_scheme_url(text)
