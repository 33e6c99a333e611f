"""Rules shared by every language's rule set."""

from ..models import Rule, Severity

# ERROR is the node kind tree-sitter uses for unparseable regions in every grammar.
SYNTAX_ERROR_QUERY = "(ERROR) @error"


def syntax_error_rule() -> Rule:
    return Rule(
        name="syntax_error",
        query=SYNTAX_ERROR_QUERY,
        severity=Severity.ERROR,
        message="Syntax error",
    ).with_weight(2.0)
