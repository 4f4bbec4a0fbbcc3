"""Whitespace normalization for name parts."""

import re

WHITESPACE_PATTERN = re.compile(r'\s+')


def clean_string(text: str) -> str:
    """Collapse whitespace runs to a single space and trim both ends.

    Every sequence of one or more whitespace characters (space, tab, newline,
    carriage return, ...) becomes one ' ' and leading/trailing whitespace is
    removed, so cleaning an already clean string returns it unchanged.

    Args:
        text: Any string, possibly empty

    Returns:
        The normalized string ('' for empty or whitespace-only input)
    """
    return WHITESPACE_PATTERN.sub(' ', text).strip(' ')
