"""
Keyword translation for Gherkin feature files.

This module rewrites the keywords of a feature file (Feature, Scenario,
Given, ...) from the dialect the file is written in to a configured output
dialect:

1. Parse the source and detect its dialect
2. Walk all keyword-bearing nodes and replace each keyword on its line
3. Normalize the "# language: xx" annotation on the first line

Design Philosophy:
- The original text is edited line by line, never re-serialized, so
  indentation, comments, tables and step text survive byte for byte
- Translation is best effort per keyword: a keyword without translation
  is logged and left alone
- All node edits use original line numbers; the first line is only
  inserted or removed after every node has been handled
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from translate_gherkin.dialects import Dialect, resolve_dialect
from translate_gherkin.walker import (
    KeywordNode,
    document_language,
    parse_gherkin,
    walk_gherkin_document,
)

logger = logging.getLogger(__name__)

# Dialect of files without a language annotation
DEFAULT_DIALECT = "en"

# "# language: de" with its surrounding whitespace captured
LANGUAGE_LINE_PATTERN = re.compile(r"^(\s*#\s*language:\s*)(\w+)(\s*)$")

# Keyword types a node of the given kind may use, in lookup order
NODE_KEYWORD_TYPES = {
    "feature": ("feature",),
    "background": ("background",),
    "rule": ("rule",),
    "scenario": ("scenario", "scenarioOutline"),
    "examples": ("examples",),
    "step": ("given", "when", "then", "and", "but"),
}

# Parser step classification -> preferred keyword types
STEP_KEYWORD_TYPES = {
    "Context": ("given",),
    "Action": ("when",),
    "Outcome": ("then",),
    "Conjunction": ("and", "but"),
}

PathLike = Union[str, Path]


@dataclass
class TranslatorConfig:
    """Configuration of a GherkinTranslator."""
    output_dialect: str = DEFAULT_DIALECT
    enable_logging: bool = False
    enable_verbose_logging: bool = False
    dry_run: bool = False

    def to_dict(self) -> dict:
        return {
            "output_dialect": self.output_dialect,
            "enable_logging": self.enable_logging,
            "enable_verbose_logging": self.enable_verbose_logging,
            "dry_run": self.dry_run,
        }


def candidate_keyword_types(
    node_kind: Optional[str],
    keyword_type: Optional[str] = None,
) -> tuple[str, ...]:
    """Return the keyword types to search first for a node.

    Steps classified by the parser search their own type first and the
    remaining step types after it.
    """
    types = NODE_KEYWORD_TYPES.get(node_kind or "", ())
    if node_kind == "step" and keyword_type in STEP_KEYWORD_TYPES:
        preferred = STEP_KEYWORD_TYPES[keyword_type]
        types = preferred + tuple(t for t in types if t not in preferred)
    return types


class GherkinTranslator:
    """Translates the keywords of Gherkin files to one output dialect.

    Usage:
        translator = GherkinTranslator(TranslatorConfig(output_dialect="de"))
        german = translator.translate_gherkin(english_source)

    Raises:
        UnknownDialectError: If the configured output dialect does not exist
    """

    def __init__(self, config: TranslatorConfig | None = None):
        self.config = config or TranslatorConfig()
        self.output_dialect = resolve_dialect(self.config.output_dialect)
        self._debug(f"Translator config: {self.config.to_dict()}")

    @property
    def dry_run(self) -> bool:
        return self.config.dry_run

    def translate_file(self, input_path: PathLike, output_path: PathLike) -> Path:
        """Translate a feature file and write the result.

        In dry-run mode nothing is written.

        Args:
            input_path: File to read (UTF-8)
            output_path: File to write; parent directories are created

        Returns:
            The output path
        """
        input_path = Path(input_path)
        output_path = Path(output_path)
        source = input_path.read_text(encoding="utf-8")

        action = "Would translate" if self.dry_run else "Translating"
        self._log(f"{action} {input_path} -> {output_path}")
        translated = self.translate_gherkin(source)

        if not self.dry_run:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(translated, encoding="utf-8")
        return output_path

    def translate_gherkin(self, source: str) -> str:
        """Translate the keywords of Gherkin source to the output dialect.

        Args:
            source: Gherkin source text

        Returns:
            The translated source. If the source already is in the output
            dialect, the very same string is returned.

        Raises:
            gherkin.errors.ParserError: If the source is not valid Gherkin
        """
        document = parse_gherkin(source)

        source_dialect = resolve_dialect(document_language(document, DEFAULT_DIALECT))
        if source_dialect.code == self.output_dialect.code:
            self._log(f" - file is in {source_dialect.name} already")
            return source
        self._log(f" - from {source_dialect.name} to {self.output_dialect.name} dialect")

        def handler(node: KeywordNode, lines: list[str]) -> list[str]:
            return self.translate_keyword_of(node, lines, source_dialect)

        handlers = {
            "feature": handler,
            "background": handler,
            "rule": handler,
            "scenario": handler,
            "step": handler,
            "examples": handler,
        }
        lines = walk_gherkin_document(document, source.split("\n"), handlers)
        lines = self.normalize_language_line(lines)
        return "\n".join(lines)

    def translate_keyword_of(
        self,
        node: KeywordNode,
        lines: list[str],
        source_dialect: Dialect,
    ) -> list[str]:
        """Replace the keyword of a node on its source line.

        Only the first occurrence of the keyword on the line is replaced.
        Lines are updated in place and returned.
        """
        translated = self.translate_keyword(
            node.keyword,
            source_dialect,
            node_kind=node.kind,
            keyword_type=node.keyword_type,
        )
        if translated is None:
            self._debug(f" - found no translation for '{node.keyword}' keyword")
            return lines
        self._debug(f" - line {node.line}: {node.keyword.strip()} -> {translated.strip()}")

        index = node.line - 1
        lines[index] = lines[index].replace(node.keyword, translated, 1)
        return lines

    def translate_keyword(
        self,
        keyword: str,
        source_dialect: Dialect,
        node_kind: Optional[str] = None,
        keyword_type: Optional[str] = None,
    ) -> Optional[str]:
        """Translate a keyword from the source dialect to the output dialect.

        The keyword types allowed for the node kind are searched first; if
        none contains the keyword, every type is searched in table order
        and the first match wins.

        Returns:
            The translated keyword, or None if the keyword is unknown in
            the source dialect
        """
        match = source_dialect.find_keyword(
            keyword, candidate_keyword_types(node_kind, keyword_type)
        )
        if match is None:
            match = source_dialect.find_keyword(keyword)
        if match is None:
            return None
        found_type, index = match
        return self.select_output_keyword(found_type, index)

    def select_output_keyword(self, keyword_type: str, keyword_index: int) -> Optional[str]:
        """Pick the output keyword at the same position as the source keyword.

        If the output dialect has fewer alternatives, the last one is used
        rather than the first: the first step keyword is usually the
        bullet "* ".
        """
        candidates = self.output_dialect.keywords_for(keyword_type)
        if not candidates:
            return None
        return candidates[min(keyword_index, len(candidates) - 1)]

    def normalize_language_line(self, lines: list[str]) -> list[str]:
        """Make the first line declare the output dialect.

        - No annotation: "# language: <code>" is inserted as a new first line
        - Annotation and output is the default dialect: the line is removed
        - Otherwise only the language code of the annotation is replaced
        """
        if not lines:
            return lines
        code = self.output_dialect.code
        match = LANGUAGE_LINE_PATTERN.match(lines[0])
        if match is None:
            newline = "\r" if lines[0].endswith("\r") else ""
            lines.insert(0, f"# language: {code}{newline}")
        elif code == DEFAULT_DIALECT:
            del lines[0]
        else:
            prefix, _, suffix = match.groups()
            lines[0] = f"{prefix}{code}{suffix}"
        return lines

    def _log(self, text: str) -> None:
        if self.config.enable_logging:
            logger.info(text)

    def _debug(self, text: str) -> None:
        if self.config.enable_verbose_logging:
            logger.debug(text)


def translate_gherkin(source: str, dialect: str = DEFAULT_DIALECT) -> str:
    """Quick keyword translation of Gherkin source.

        german = translate_gherkin(english_source, dialect="de")

    For logging or dry runs, use GherkinTranslator directly.
    """
    return GherkinTranslator(TranslatorConfig(output_dialect=dialect)).translate_gherkin(source)
