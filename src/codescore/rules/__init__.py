"""Per-language rule sets.

Each factory returns a fresh, ordered list of rules written against one
tree-sitter grammar's node vocabulary.
"""

from .common import syntax_error_rule
from .go import go_rules
from .javascript import javascript_rules
from .rust import rust_rules

__all__ = ["go_rules", "javascript_rules", "rust_rules", "syntax_error_rule"]
