"""
Parsing and walking of Gherkin documents.

The gherkin parser returns untyped JSON-like dictionaries. This module is the
only place that inspects that structure: it turns every keyword-bearing node
(feature, background, rule, scenario, step, examples) into a typed
KeywordNode and hands it to a per-kind handler in document order.

Usage:
    document = parse_gherkin(source)
    lines = walk_gherkin_document(document, source.split("\\n"), {
        "step": lambda node, lines: lines,
    })
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar

from gherkin.parser import Parser
from gherkin.token_scanner import TokenScanner

T = TypeVar("T")

# Handler for one node kind: receives the node and the accumulator,
# returns the (possibly updated) accumulator.
NodeHandler = Callable[["KeywordNode", T], T]

NODE_KINDS = ("feature", "background", "rule", "scenario", "step", "examples")


@dataclass(frozen=True)
class KeywordNode:
    """A node of the document that carries a keyword.

    Attributes:
        kind: Structural kind (one of NODE_KINDS)
        keyword: Keyword exactly as written, e.g. "Scenario" or "Given "
        line: 1-based source line of the keyword
        keyword_type: Parser's step classification (Context, Action,
            Outcome, Conjunction, Unknown); None for non-step nodes
    """
    kind: str
    keyword: str
    line: int
    keyword_type: Optional[str] = None

    @classmethod
    def from_raw(cls, kind: str, raw: Mapping[str, Any]) -> KeywordNode:
        location = raw.get("location") or {}
        return cls(
            kind=kind,
            keyword=raw.get("keyword", ""),
            line=location.get("line", 0),
            keyword_type=raw.get("keywordType") if kind == "step" else None,
        )


def parse_gherkin(source: str) -> dict:
    """Parse Gherkin source into the parser's dictionary AST.

    Raises:
        gherkin.errors.ParserError: If the source is not valid Gherkin
    """
    return Parser().parse(TokenScanner(source))


def document_language(document: Mapping[str, Any], default: str) -> str:
    """Return the declared language of a parsed document."""
    feature = document.get("feature")
    if not feature:
        return default
    return feature.get("language") or default


def iter_keyword_nodes(document: Mapping[str, Any]) -> Iterator[KeywordNode]:
    """Yield every keyword-bearing node of a parsed document in order."""
    feature = document.get("feature")
    if not feature:
        return
    yield KeywordNode.from_raw("feature", feature)
    yield from _iter_children(feature.get("children", []))


def _iter_children(children: list) -> Iterator[KeywordNode]:
    for child in children:
        if "background" in child:
            yield from _iter_steps_container("background", child["background"])
        elif "scenario" in child:
            yield from _iter_steps_container("scenario", child["scenario"])
        elif "rule" in child:
            rule = child["rule"]
            yield KeywordNode.from_raw("rule", rule)
            yield from _iter_children(rule.get("children", []))


def _iter_steps_container(kind: str, raw: Mapping[str, Any]) -> Iterator[KeywordNode]:
    yield KeywordNode.from_raw(kind, raw)
    for step in raw.get("steps", []):
        yield KeywordNode.from_raw("step", step)
    for examples in raw.get("examples", []):
        yield KeywordNode.from_raw("examples", examples)


def walk_gherkin_document(
    document: Mapping[str, Any],
    accumulator: T,
    handlers: Mapping[str, NodeHandler],
) -> T:
    """Fold the keyword-bearing nodes of a document into an accumulator.

    Each node whose kind has a handler is passed to it together with the
    current accumulator; the handler's return value becomes the accumulator
    for the next node. Nodes without a handler are skipped.

    Args:
        document: Parsed document (see parse_gherkin)
        accumulator: Initial value, owned by the walk until it returns
        handlers: Node kind -> handler

    Returns:
        The final accumulator
    """
    for node in iter_keyword_nodes(document):
        handler = handlers.get(node.kind)
        if handler is not None:
            accumulator = handler(node, accumulator)
    return accumulator
