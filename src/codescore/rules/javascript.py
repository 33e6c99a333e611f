from typing import List

from ..models import Rule, Severity
from .common import syntax_error_rule


def javascript_rules() -> List[Rule]:
    return [
        syntax_error_rule(),
        Rule(
            name="console_log",
            query=(
                "(call_expression function: (member_expression object: (identifier) @obj "
                'property: (property_identifier) @prop) (#eq? @obj "console") (#eq? @prop "log")) @call'
            ),
            severity=Severity.INFO,
            message="Console.log statement found",
            suggestion="Remove before production",
        ).with_weight(0.5),
        # variable_declaration is only produced for `var`; let/const parse as lexical_declaration
        Rule(
            name="var_usage",
            query="(variable_declaration) @var",
            severity=Severity.WARNING,
            message="Use of 'var' keyword",
            suggestion="Use 'let' or 'const' instead",
        ).with_weight(1.3),
        Rule(
            name="debugger_statement",
            query="(debugger_statement) @debugger",
            severity=Severity.WARNING,
            message="Debugger statement found",
            suggestion="Remove before production",
        ).with_weight(1.5),
        Rule(
            name="loose_equality",
            query='[(binary_expression operator: "==") (binary_expression operator: "!=")] @comparison',
            severity=Severity.STYLE,
            message="Loose equality comparison",
            suggestion="Use === or !== to avoid type coercion",
        ).with_weight(0.8),
        Rule(
            name="eval_usage",
            query='(call_expression function: (identifier) @func (#eq? @func "eval")) @call',
            severity=Severity.WARNING,
            message="Use of eval()",
            suggestion="Avoid eval; parse data explicitly or use a lookup table",
        ).with_weight(1.8),
    ]
