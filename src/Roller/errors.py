"""Errors raised while reading dice notation.

Both kinds are detected during parsing, before any die is drawn.
"""

from __future__ import annotations


class NotationError(ValueError):
    """Base class for dice-notation failures."""

    pass


class UnrecognizedDieType(NotationError):
    """A dice group named a die outside the supported set."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unrecognized die type: {token!r} (expected one of d4, d6, d8, d10, d12, d20, d100)")


class NumberParseFailure(NotationError):
    """A captured digit run does not fit the notation's integer range."""

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"Could not parse {field} {text!r} as an integer")
