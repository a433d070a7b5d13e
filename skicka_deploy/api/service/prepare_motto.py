"""Motto text normalization."""

import re

CRLF = "\r\n"

# A line feed that is not already part of a CR+LF pair
_BARE_LF = re.compile(r"(?<!\r)\n")


def prepare_motto(motto: str) -> str:
    """Rewrite line feeds to CR+LF and terminate the text with two CR+LF pairs.

    The two trailing terminators are always appended, whether or not the input already
    ends with a line break, so "Hello, World!" becomes "Hello, World!\\r\\n\\r\\n" and
    "a\\n" becomes "a\\r\\n\\r\\n\\r\\n". Existing CR+LF pairs are kept as they are.

    Args:
        motto: Free text, possibly empty or multi-line

    Returns:
        Text to be written to the motto file
    """
    return _BARE_LF.sub(CRLF, motto) + CRLF + CRLF
