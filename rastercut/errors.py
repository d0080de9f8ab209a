"""Error types and user input parsing shared by the drawing tools."""

from __future__ import annotations

import re

ERROR_TITLE = "Ошибка"

_UNSIGNED = re.compile(r"\+?[0-9]+")


class GraphicsError(Exception):
    """An error shown to the user as a titled message."""

    def __init__(self, description: str, title: str = ERROR_TITLE) -> None:
        super().__init__(description)
        self.title = title
        self.description = description


class InvalidValueError(GraphicsError, ValueError):
    """A text field does not hold a valid unsigned number."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Ошибочное значение {value}")
        self.value = value


def parse_unsigned(text: str, bits: int = 32) -> int:
    """Parse an unsigned integer that must fit in ``bits`` bits.

    Only ASCII digits with an optional leading ``+`` are accepted; no
    surrounding whitespace is allowed.
    """
    if not _UNSIGNED.fullmatch(text):
        raise InvalidValueError(text)
    value = int(text)
    if value >= 1 << bits:
        raise InvalidValueError(text)
    return value