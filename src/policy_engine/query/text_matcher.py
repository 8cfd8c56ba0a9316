"""
Case-insensitive substring matching and literal pattern construction.

User queries are matched as plain text. Before a query is used to build a
regular expression every syntax-significant character is escaped, so
queries such as ``$25/hr`` or ``(e.g.`` never behave as patterns.

Filtering and highlighting share ``compile_literal``, so both use the same
simple case folding and a highlighted fragment always passes the filter.
"""

import re
from typing import Pattern

# . * + ? ^ $ { } ( ) | [ ] and backslash
_SPECIAL_CHARS = re.compile(r"[.*+?^${}()|\[\]\\]")


def escape_pattern(text: str) -> str:
    """Backslash-escape regex metacharacters so ``text`` matches literally."""
    return _SPECIAL_CHARS.sub(lambda match: "\\" + match.group(0), text)


def compile_literal(query: str) -> Pattern[str]:
    """
    Build a case-insensitive pattern capturing literal occurrences of ``query``.

    The single capturing group makes ``Pattern.split`` keep the matched
    substrings in the result.
    """
    return re.compile(f"({escape_pattern(query)})", re.IGNORECASE)


def matches(haystack: str, needle: str) -> bool:
    """
    Check whether ``needle`` occurs in ``haystack``, ignoring case.

    Args:
        haystack: Text to search
        needle: Text to look for (not trimmed)

    Returns:
        bool: True if ``needle`` is a contiguous substring of ``haystack``
        under simple case folding
    """
    return compile_literal(needle).search(haystack) is not None
