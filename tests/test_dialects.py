"""
Tests for the dialect table.

Run with: pytest tests/test_dialects.py -v
"""

from dataclasses import FrozenInstanceError

import pytest

from translate_gherkin.dialects import (
    Dialect,
    available_dialects,
    resolve_dialect,
)
from translate_gherkin.errors import TranslateGherkinError, UnknownDialectError


class TestResolveDialect:
    """Tests for looking up dialects by code."""

    def test_resolve_english(self):
        """The English dialect has the well-known keywords."""
        dialect = resolve_dialect("en")

        assert dialect.code == "en"
        assert dialect.name == "English"
        assert "Feature" in dialect.keywords_for("feature")
        assert "Given " in dialect.keywords_for("given")

    def test_resolve_german(self):
        """Step keywords keep their trailing space."""
        dialect = resolve_dialect("de")

        assert dialect.name == "German"
        assert "Angenommen " in dialect.keywords_for("given")
        assert "Funktionalität" in dialect.keywords_for("feature")

    def test_unknown_dialect(self):
        """Unknown codes raise UnknownDialectError."""
        with pytest.raises(UnknownDialectError) as excinfo:
            resolve_dialect("xx-unknown")

        assert excinfo.value.code == "xx-unknown"
        assert "Unknown dialect: xx-unknown" in str(excinfo.value)
        assert isinstance(excinfo.value, TranslateGherkinError)

    def test_resolve_is_cached(self):
        """Repeated lookups share one immutable dialect."""
        assert resolve_dialect("fr") is resolve_dialect("fr")

    def test_available_dialects_sorted(self):
        """All dialects are listed, sorted by code."""
        dialects = available_dialects()
        codes = [d.code for d in dialects]

        assert codes == sorted(codes)
        assert "en" in codes
        assert "de" in codes


class TestDialectKeywords:
    """Tests for keyword lookup inside one dialect."""

    @pytest.fixture
    def dialect(self):
        return Dialect.from_spec("zz", {
            "name": "Test",
            "native": "Tst",
            "given": ["* ", "Given ", "Assuming "],
            "and": ["* ", "And "],
            "feature": ["Feature"],
        })

    def test_from_spec_skips_non_keywords(self, dialect):
        """Only list-valued entries become keyword types."""
        assert dialect.keyword_types == ("given", "and", "feature")
        assert dialect.name == "Test"
        assert dialect.native == "Tst"

    def test_keywords_for_unknown_type(self, dialect):
        assert dialect.keywords_for("rule") == ()

    def test_find_keyword_returns_type_and_index(self, dialect):
        assert dialect.find_keyword("Assuming ") == ("given", 2)
        assert dialect.find_keyword("Feature") == ("feature", 0)

    def test_find_keyword_first_match_wins(self, dialect):
        """A keyword listed under several types resolves to the first."""
        assert dialect.find_keyword("* ") == ("given", 0)

    def test_find_keyword_restricted_types(self, dialect):
        """Restricting types changes which list is searched first."""
        assert dialect.find_keyword("* ", ["and", "given"]) == ("and", 0)
        assert dialect.find_keyword("Feature", ["given"]) is None

    def test_find_keyword_is_exact(self, dialect):
        """Keywords must match exactly, including trailing whitespace."""
        assert dialect.find_keyword("Given") is None
        assert dialect.find_keyword("given ") is None

    def test_dialect_is_immutable(self, dialect):
        with pytest.raises(FrozenInstanceError):
            dialect.code = "other"
        with pytest.raises(TypeError):
            dialect.keywords["given"] = ("Given ",)
