from typing import List

from ..models import Rule, Severity
from .common import syntax_error_rule


def go_rules() -> List[Rule]:
    return [
        syntax_error_rule(),
        Rule(
            name="go_missing_error_check",
            query=(
                "(assignment_statement left: (expression_list (identifier) @var (identifier) @err) "
                '(#eq? @err "err")) @assignment'
            ),
            severity=Severity.WARNING,
            message="Potential unchecked error",
            suggestion="Check for 'if err != nil' after this assignment",
        ).with_weight(1.8),
        Rule(
            name="go_unused_variable",
            query='(short_var_declaration left: (expression_list (identifier) @var) (#not-match? @var "^_"))',
            severity=Severity.INFO,
            message="Potentially unused variable",
            suggestion="Use _ if variable is intentionally unused",
        ).with_weight(0.7),
        Rule(
            name="go_panic_usage",
            query='(call_expression function: (identifier) @func (#eq? @func "panic")) @call',
            severity=Severity.WARNING,
            message="Use of panic()",
            suggestion="Consider returning an error instead of panicking",
        ).with_weight(1.6),
        Rule(
            name="go_large_function",
            query="(function_declaration name: (identifier) @name) @function",
            severity=Severity.STYLE,
            message="Function may be too large",
            suggestion="Consider breaking into smaller functions",
        ).with_weight(1.1),
        Rule(
            name="go_too_many_parameters",
            query=(
                "(function_declaration parameters: (parameter_list "
                "(parameter_declaration) @param1 (parameter_declaration) @param2 "
                "(parameter_declaration) @param3 (parameter_declaration) @param4 "
                "(parameter_declaration) @param5 (parameter_declaration) @param6)) @function"
            ),
            severity=Severity.STYLE,
            message="Function has too many parameters",
            suggestion="Consider using a struct or reducing parameters",
        ).with_weight(1.3),
        Rule(
            name="go_global_variable",
            query="(source_file (var_declaration) @global_var)",
            severity=Severity.INFO,
            message="Global variable declaration",
            suggestion="Consider if this global variable is necessary",
        ).with_weight(0.8),
        # The "no comment right before" half of this check lives in the match filter.
        Rule(
            name="go_missing_package_doc",
            query="(source_file (package_clause) @package)",
            severity=Severity.INFO,
            message="Package missing documentation",
            suggestion="Add package documentation comment",
        ).with_weight(0.6),
        Rule(
            name="go_todo_comment",
            query='((comment) @comment (#match? @comment "TODO|FIXME|XXX|HACK"))',
            severity=Severity.INFO,
            message="TODO comment found",
            suggestion="Consider addressing this TODO item",
        ).with_weight(0.3),
        Rule(
            name="go_empty_if_block",
            query='(if_statement consequence: (block) @block (#eq? @block "{}"))',
            severity=Severity.STYLE,
            message="Empty if block",
            suggestion="Remove empty if block or add implementation",
        ).with_weight(1.0),
        Rule(
            name="go_magic_number",
            query='((int_literal) @number (#not-eq? @number "0") (#not-eq? @number "1") (#not-eq? @number "2"))',
            severity=Severity.STYLE,
            message="Magic number found",
            suggestion="Consider using a named constant",
        ).with_weight(0.4),
        # Nesting depth is counted by the match filter.
        Rule(
            name="go_deep_nesting",
            query="(if_statement) @deep_if",
            severity=Severity.STYLE,
            message="Deep nesting detected (4+ levels)",
            suggestion="Consider extracting nested logic into separate functions",
        ).with_weight(1.4),
    ]
