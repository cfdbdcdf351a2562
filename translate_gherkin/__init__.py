"""
translate-gherkin: Keyword translation for Gherkin feature files.

Rewrites the keywords of *.feature files (Feature, Scenario, Given, ...)
from one localized dialect to another while leaving indentation, comments,
tables and step text untouched.
"""

__version__ = "0.1.0"

from translate_gherkin.dialects import Dialect, available_dialects, resolve_dialect
from translate_gherkin.errors import TranslateGherkinError, UnknownDialectError
from translate_gherkin.translator import (
    DEFAULT_DIALECT,
    GherkinTranslator,
    TranslatorConfig,
    translate_gherkin,
)

__all__ = [
    "DEFAULT_DIALECT",
    "Dialect",
    "GherkinTranslator",
    "TranslateGherkinError",
    "TranslatorConfig",
    "UnknownDialectError",
    "available_dialects",
    "resolve_dialect",
    "translate_gherkin",
]
