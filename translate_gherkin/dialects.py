"""
Dialect table for Gherkin keywords.

This module wraps the keyword table shipped with the ``gherkin-official``
parser (``gherkin-languages.json``) in immutable, typed objects:

- Dialect: display name and keyword-type -> keywords mapping of one language
- resolve_dialect(): look up a dialect by its language code
- available_dialects(): every known dialect, sorted by code

Design Philosophy:
- Dialects are immutable after loading and shared across threads
- Keyword order is preserved exactly as in the table: index 0 is usually
  the canonical form, steps start with the bullet keyword ``"* "``
- Lookup by type is exact; lookup by raw string is first-match-wins
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from gherkin.dialect import DIALECTS

from translate_gherkin.errors import UnknownDialectError


@dataclass(frozen=True)
class Dialect:
    """Keyword spellings of one human language.

    Attributes:
        code: Language code (e.g., "en", "de", "en-au")
        name: English name of the language
        native: Name of the language in that language
        keywords: Keyword type -> acceptable keywords, in table order
    """
    code: str
    name: str
    native: str = ""
    keywords: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_spec(cls, code: str, spec: Mapping[str, object]) -> Dialect:
        """Build a dialect from one raw entry of the gherkin language table.

        Only list-valued entries are keyword types; ``name`` and ``native``
        are plain strings.
        """
        keywords = {
            keyword_type: tuple(values)
            for keyword_type, values in spec.items()
            if isinstance(values, list)
        }
        return cls(
            code=code,
            name=str(spec.get("name", code)),
            native=str(spec.get("native", "")),
            keywords=MappingProxyType(keywords),
        )

    @property
    def keyword_types(self) -> tuple[str, ...]:
        return tuple(self.keywords)

    def keywords_for(self, keyword_type: str) -> tuple[str, ...]:
        """Return the keywords of the given type (empty if unknown)."""
        return self.keywords.get(keyword_type, ())

    def find_keyword(
        self,
        keyword: str,
        keyword_types: Optional[Iterable[str]] = None,
    ) -> Optional[tuple[str, int]]:
        """Find the type and position of an exact keyword string.

        Args:
            keyword: Keyword as it appears in the source, e.g. "Given "
            keyword_types: Types to search, in order. Defaults to every
                type in table order.

        Returns:
            (keyword_type, index) of the first type containing the keyword,
            or None if no searched type contains it.
        """
        types = self.keyword_types if keyword_types is None else keyword_types
        for keyword_type in types:
            candidates = self.keywords_for(keyword_type)
            if keyword in candidates:
                return keyword_type, candidates.index(keyword)
        return None


@lru_cache(maxsize=None)
def resolve_dialect(code: str) -> Dialect:
    """Look up a dialect by its language code.

    Raises:
        UnknownDialectError: If the code is not in the dialect table
    """
    spec = DIALECTS.get(code)
    if spec is None:
        raise UnknownDialectError(code)
    return Dialect.from_spec(code, spec)


def available_dialects() -> list[Dialect]:
    """Return all known dialects sorted by code."""
    return [resolve_dialect(code) for code in sorted(DIALECTS)]
