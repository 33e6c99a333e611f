from typing import List

from ..models import Rule, Severity
from .common import syntax_error_rule


def rust_rules() -> List[Rule]:
    return [
        syntax_error_rule(),
        Rule(
            name="unwrap_usage",
            query='(call_expression function: (field_expression field: (field_identifier) @method) (#eq? @method "unwrap")) @call',
            severity=Severity.WARNING,
            message="Use of .unwrap() can cause panics",
            suggestion="Consider using .expect() with a message or proper error handling",
        ).with_weight(1.5),
        Rule(
            name="large_function",
            query="(function_item name: (identifier) @name) @function",
            severity=Severity.STYLE,
            message="Function may be too large",
            suggestion="Consider breaking into smaller functions",
        ).with_weight(1.2),
        Rule(
            name="missing_docs",
            query="(function_item name: (identifier) @name)",
            severity=Severity.INFO,
            message="Public function is missing documentation",
            suggestion="Add a /// doc comment describing the function",
        ).with_weight(0.6),
        Rule(
            name="todo_macro",
            query='(macro_invocation macro: (identifier) @macro (#match? @macro "^(todo|unimplemented)$")) @call',
            severity=Severity.WARNING,
            message="Unfinished code marker macro",
            suggestion="Implement the code path or return an error",
        ).with_weight(1.2),
        Rule(
            name="unsafe_block",
            query="(unsafe_block) @unsafe",
            severity=Severity.INFO,
            message="Unsafe block",
            suggestion="Document the invariants that make this block sound",
        ).with_weight(0.8),
    ]
