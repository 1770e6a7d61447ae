"""Simplified glob matching for exclude and protected patterns.

Patterns are translated to anchored, case-insensitive regular expressions:

- ``**/`` matches zero or more leading directories
- ``**`` matches anything, including slashes
- ``*`` matches anything except a slash
- ``?`` matches exactly one character

Character classes and brace expansion are not supported.
"""

import re
from collections.abc import Iterable
from functools import lru_cache

# Escaped glob tokens and their regex equivalents, applied in order.
_GLOB_TOKENS: tuple[tuple[str, str], ...] = (
    (r"\*\*/", "(.+/)?"),
    (r"\*\*", ".*"),
    (r"\*", "[^/]*"),
    (r"\?", "."),
)


@lru_cache(maxsize=256)
def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a glob pattern to a compiled regular expression.

    Args:
        pattern: Glob-style pattern (e.g., "**/cache/**").

    Returns:
        Compiled case-insensitive pattern, to be used with ``fullmatch``.
    """
    regex = re.escape(pattern.replace("\\", "/"))
    for token, replacement in _GLOB_TOKENS:
        regex = regex.replace(token, replacement)
    return re.compile(regex, re.IGNORECASE)


def matches_glob(path: str, pattern: str) -> bool:
    """Check if a path or name matches a glob pattern.

    Args:
        path: Relative path or dotted name to test.
        pattern: Glob-style pattern.

    Returns:
        True if the whole string matches the pattern.
    """
    return glob_to_regex(pattern).fullmatch(path.replace("\\", "/")) is not None


def matches_any(path: str, patterns: Iterable[str]) -> bool:
    """Check if a path matches at least one of the given patterns."""
    return any(matches_glob(path, pattern) for pattern in patterns)
