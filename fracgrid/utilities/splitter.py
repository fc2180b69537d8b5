"""
String splitting on a delimiter string.

An empty delimiter explodes the input into single characters; any other
delimiter splits non-overlapping, left to right, so ``k`` occurrences give
``k + 1`` parts.
"""

from __future__ import annotations

from typing import Any

from fracgrid.errors import InvalidArgument


def split(text: Any, delimiter: Any) -> list[str]:
    """
    Split *text* on *delimiter*.

    Args:
        text: The string to split.
        delimiter: The separator. ``""`` returns one element per character.

    Returns:
        The ordered parts. Always at least one element for a non-empty
        delimiter; the whole string when the delimiter does not occur.

    Raises:
        InvalidArgument: If either argument is not a ``str``.
    """
    if not isinstance(text, str):
        raise InvalidArgument(f"text must be a str, got {type(text).__name__}")
    if not isinstance(delimiter, str):
        raise InvalidArgument(f"delimiter must be a str, got {type(delimiter).__name__}")

    if delimiter == "":
        return list(text)
    return text.split(delimiter)
