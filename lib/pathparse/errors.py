"""
Library exceptions.
"""

from typing import Optional


class PathParseError(Exception):
    """Base for all pathparse errors."""


class InvalidInputError(PathParseError, TypeError):
    """Input is missing (None) or it is not a text at all."""

    def __init__(self, value, what='input'):
        self.value = value
        super().__init__(f'{what} must be str or yarl.URL, not {value.__class__.__name__}')


class InvalidPatternError(PathParseError, ValueError):
    """
    Route pattern can not be compiled.

    `position` is 0-based index in the (stripped) pattern or None if the problem
    concerns the whole pattern or its end.
    """

    def __init__(self, pattern: Optional[str], reason: str, position: Optional[int] = None):
        self.pattern = pattern
        self.reason = reason
        self.position = position
        if position is None:
            where = 'invalid input'
        else:
            where = f'invalid input at position {position}'
        super().__init__(f"Can't build PathParser: {where} - {reason}")
