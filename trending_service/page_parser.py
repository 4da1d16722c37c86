"""
Page Parser Module

Parses a fetched page into a document tree and exposes a small
"select nodes matching pattern" capability on top of it, so callers
never depend on the tree library directly.
"""

from typing import List, Union

from bs4 import BeautifulSoup, Tag
from bs4.builder import ParserRejectedMarkup
from bs4.dammit import EncodingDetector

from .errors import ParseError

HTML_PARSER = "html.parser"
DEFAULT_ENCODING = "utf-8"


def parse_document(html: Union[str, bytes]) -> BeautifulSoup:
    """
    Parse an HTML document.

    Args:
        html: Page body, either decoded text or raw bytes. Raw bytes are
            decoded using the document's <meta charset>, or UTF-8 when the
            document declares none.

    Returns:
        Parsed document tree

    Raises:
        ParseError: If the markup cannot be parsed
    """
    if isinstance(html, bytes):
        declared = EncodingDetector.find_declared_encoding(html, is_html=True)
        from_encoding = None if declared else DEFAULT_ENCODING
    elif isinstance(html, str):
        from_encoding = None
    else:
        raise ParseError(f"expected page body as text or bytes, got {type(html).__name__}")
    try:
        return BeautifulSoup(html, HTML_PARSER, from_encoding=from_encoding)
    except (ParserRejectedMarkup, AssertionError, ValueError) as e:
        raise ParseError(f"could not parse HTML document: {e}") from e


def select_nodes(node: Tag, pattern: str) -> List[Tag]:
    """Return every descendant of node matching the CSS pattern, in document order."""
    return node.select(pattern)


def select_text(node: Tag, pattern: str) -> str:
    """Return the combined text of all matches, trimmed of surrounding whitespace."""
    return "".join(match.get_text() for match in select_nodes(node, pattern)).strip()


def select_attr(node: Tag, pattern: str, attr: str) -> str:
    """Return an attribute of the first match, or an empty string."""
    match = node.select_one(pattern)
    if match is None:
        return ""
    value = match.get(attr)
    if value is None:
        return ""
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()
