"""
Secondary checks applied to query captures before they become findings.

A tree-sitter pattern can say "this is a function" but not "this function is
longer than 50 lines" or "nobody checks this error afterwards". Those checks
live here, keyed by rule name. Rules without an entry are reported as matched.
"""

from typing import Callable, Dict

from tree_sitter import Node

from .ast_walker import ASTWalker

MatchFilter = Callable[[Node, bytes], bool]

LARGE_FUNCTION_LINES = 50
GO_LARGE_FUNCTION_LINES = 40
DEEP_NESTING_LEVEL = 3

PUBLIC_MARKER = b"pub fn"
DOC_COMMENT_PREFIXES = ("///", "/**")

ERROR_CHECK_WINDOW = 200
ERROR_CHECK_IDIOMS = (b"if err != nil", b"if error != nil")


def _spans_more_than(lines: int) -> MatchFilter:
    def check(node: Node, source: bytes) -> bool:
        return ASTWalker.line_span(node) > lines

    return check


def is_undocumented_public(node: Node, source: bytes) -> bool:
    """Public item (``pub fn`` right before the match) with no doc comment above it."""
    if PUBLIC_MARKER not in ASTWalker.line_prefix(node, source):
        return False

    item = ASTWalker.find_parent_of_type(node, "function_item") or node
    sibling = ASTWalker.previous_sibling(item, skip=("attribute_item",))

    if sibling is None or sibling.type not in ("line_comment", "block_comment"):
        return True
    return not ASTWalker.get_text(sibling, source).startswith(DOC_COMMENT_PREFIXES)


def is_unchecked_go_error(node: Node, source: bytes) -> bool:
    """Flag ``err`` assignments that are not followed by an ``if err != nil`` check.

    Only a parent of kind ``assignment_statement`` gets the look-ahead check.
    Anything else, including no parent at all, is reported.
    """
    parent = node.parent
    if parent is not None and parent.type == "assignment_statement":
        window_end = min(node.end_byte + ERROR_CHECK_WINDOW, len(source))
        window = source[node.start_byte : window_end]
        return not any(idiom in window for idiom in ERROR_CHECK_IDIOMS)
    return True


def has_no_adjacent_comment(node: Node, source: bytes) -> bool:
    """True unless a comment ends on the line right above the node."""
    previous = ASTWalker.previous_sibling(node)
    if previous is None or previous.type != "comment":
        return True
    return previous.end_point[0] < node.start_point[0] - 1


def is_deeply_nested(node: Node, source: bytes) -> bool:
    """True when the node sits in the consequence of DEEP_NESTING_LEVEL or more ``if`` statements.

    ``else`` blocks and ``else if`` chains do not add depth.
    """
    depth = sum(
        1
        for child, parent in ASTWalker.ancestors(node)
        if parent.type == "if_statement" and ASTWalker.is_field(parent, "consequence", child)
    )
    return depth >= DEEP_NESTING_LEVEL


MATCH_FILTERS: Dict[str, MatchFilter] = {
    "large_function": _spans_more_than(LARGE_FUNCTION_LINES),
    "missing_docs": is_undocumented_public,
    "go_missing_error_check": is_unchecked_go_error,
    "go_large_function": _spans_more_than(GO_LARGE_FUNCTION_LINES),
    "go_missing_package_doc": has_no_adjacent_comment,
    "go_deep_nesting": is_deeply_nested,
}


def should_report(rule_name: str, node: Node, source: bytes) -> bool:
    check = MATCH_FILTERS.get(rule_name)
    if check is None:
        return True
    return check(node, source)
