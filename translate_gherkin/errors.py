"""
Exceptions raised by translate-gherkin.

Parser failures are not wrapped: ``gherkin.errors.ParserError`` raised by
the Gherkin parser reaches the caller unchanged.
"""

from __future__ import annotations


class TranslateGherkinError(Exception):
    """Base exception for translate-gherkin."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UnknownDialectError(TranslateGherkinError):
    """The requested dialect code is not in the dialect table."""

    def __init__(self, code: str):
        super().__init__(f"Unknown dialect: {code}", {"code": code})
        self.code = code
