"""
Thin wrapper around the tree-sitter parser.

Trees are only handed out inside ``open_tree`` so that a tree never outlives
the analysis call that created it.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from tree_sitter import Language, Node, Parser, Tree

from .ast_walker import ASTWalker
from .errors import SourceDecodeError
from .languages import load_grammar

logger = logging.getLogger(__name__)


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: bytes

    @property
    def has_errors(self) -> bool:
        return self.tree.root_node.has_error


def encode_source(source: str) -> bytes:
    """UTF-8 bytes of ``source``; lone surrogates raise SourceDecodeError"""
    try:
        return source.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SourceDecodeError(f"Source is not valid UTF-8: {e}") from e


class SourceParser:
    """Parses source text with a single grammar"""

    def __init__(self, language: Language):
        self.language = language
        self.parser = Parser(language)

    @contextmanager
    def open_tree(self, source: bytes) -> Iterator[ParseResult]:
        """Parse ``source`` and release the tree when the block exits.

        The parser never fails on malformed input; unparseable regions show up
        as ``ERROR`` nodes in the returned tree.
        """
        result = ParseResult(tree=self.parser.parse(source), source=source)
        try:
            yield result
        finally:
            del result
            logger.debug("Released syntax tree for %d bytes of source", len(source))


def format_tree(node: Node, source: bytes, depth: int = 0) -> str:
    """Render a node and its subtree as an indented s-expression listing.

    Leaf nodes carry their source text in double quotes (newlines escaped);
    leaves whose text is blank are shown without it.
    """
    indent = "  " * depth
    line = f"{indent}({node.type}"

    if node.child_count == 0:
        text = ASTWalker.get_text(node, source)
        if text.strip():
            escaped = text.replace("\n", "\\n")
            line += f' "{escaped}"'
    line += ")"

    parts = [line]
    for child in node.children:
        parts.append(format_tree(child, source, depth + 1))
    return "\n".join(parts)


def parse_to_text(source: str, language_id: str) -> str:
    """Parse ``source`` with the grammar for ``language_id`` and dump the tree"""
    parser = SourceParser(load_grammar(language_id))
    source_bytes = encode_source(source)
    with parser.open_tree(source_bytes) as parsed:
        if parsed.has_errors:
            logger.warning("Source has syntax errors; the dump contains ERROR nodes")
        return format_tree(parsed.tree.root_node, parsed.source)
