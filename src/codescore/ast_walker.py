from typing import Collection, Iterator, Optional

from tree_sitter import Node


class ASTWalker:
    """Navigation helpers shared by the match filters and the tree dump"""

    @staticmethod
    def ancestors(node: Node) -> Iterator[tuple[Node, Node]]:
        """Yield ``(child, parent)`` pairs from the node up to the root"""
        child, parent = node, node.parent
        while parent is not None:
            yield child, parent
            child, parent = parent, parent.parent

    @staticmethod
    def find_parent_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Closest ancestor of the given kind, or None"""
        for _child, parent in ASTWalker.ancestors(node):
            if parent.type == type_name:
                return parent
        return None

    @staticmethod
    def previous_sibling(node: Node, skip: Collection[str] = ()) -> Optional[Node]:
        """Nearest preceding named sibling whose kind is not in ``skip``"""
        sibling = node.prev_named_sibling
        while sibling is not None and sibling.type in skip:
            sibling = sibling.prev_named_sibling
        return sibling

    @staticmethod
    def is_field(parent: Node, field_name: str, child: Node) -> bool:
        """True when ``child`` fills ``field_name`` on ``parent``"""
        return parent.child_by_field_name(field_name) == child

    @staticmethod
    def get_text(node: Node, source: bytes) -> str:
        """Source slice spanned by the node, or "" if it is not valid UTF-8"""
        try:
            return source[node.start_byte : node.end_byte].decode("utf-8")
        except UnicodeDecodeError:
            return ""

    @staticmethod
    def line_span(node: Node) -> int:
        """Number of line breaks between the node's first and last line"""
        return node.end_point[0] - node.start_point[0]

    @staticmethod
    def line_prefix(node: Node, source: bytes) -> bytes:
        """Bytes on the node's first line that come before the node"""
        line_start = source.rfind(b"\n", 0, node.start_byte) + 1
        return source[line_start : node.start_byte]
