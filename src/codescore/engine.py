"""
Analysis engine: runs a rule set's tree-sitter queries over parsed source and
turns the accepted captures into findings.
"""

import logging
from typing import Iterable, List, Tuple

from tree_sitter import Language, Node, Query, QueryCursor, QueryError

from .ast_walker import ASTWalker
from .errors import RuleCompileError
from .filters import should_report
from .languages import load_grammar, rules_for
from .models import CodeScore, Finding, Rule
from .parser import SourceParser, encode_source
from .scoring import calculate_score

logger = logging.getLogger(__name__)


class AnalysisEngine:
    """Runs one language's rules against source code.

    The engine holds nothing but its rules, so a single instance can analyze
    any number of files, and separate instances can run side by side.
    """

    def __init__(self, rules: Iterable[Rule], language_id: str = "unknown"):
        self._rules: Tuple[Rule, ...] = tuple(rules)
        self.language_id = language_id

    @classmethod
    def for_language(cls, language_id: str) -> "AnalysisEngine":
        return cls(rules_for(language_id), language_id)

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def analyze(self, source: str, language: Language) -> List[Finding]:
        """Run every rule and return findings in rule order, then match order.

        Raises:
            SourceDecodeError: ``source`` cannot be encoded as UTF-8.
            RuleCompileError: a rule's query does not compile against ``language``.
        """
        source_bytes = encode_source(source)
        compiled = self._compile(language)
        findings: List[Finding] = []

        with SourceParser(language).open_tree(source_bytes) as parsed:
            if parsed.has_errors:
                logger.debug("Source contains syntax errors; syntax_error rules will report them")
            root = parsed.tree.root_node
            for rule, query in compiled:
                before = len(findings)
                for _pattern_index, captures in QueryCursor(query).matches(root):
                    for nodes in captures.values():
                        for node in nodes:
                            if should_report(rule.name, node, source_bytes):
                                findings.append(self._create_finding(rule, node, source_bytes))
                logger.debug("Rule %s produced %d findings", rule.name, len(findings) - before)

        return findings

    def analyze_with_score(self, source: str, language: Language) -> Tuple[List[Finding], CodeScore]:
        findings = self.analyze(source, language)
        return findings, calculate_score(findings, source)

    def _compile(self, language: Language) -> List[Tuple[Rule, Query]]:
        compiled = []
        for rule in self._rules:
            try:
                compiled.append((rule, Query(language, rule.query)))
            except QueryError as e:
                raise RuleCompileError(rule.name, self.language_id, str(e)) from e
        logger.debug("Compiled %d rules for %s", len(compiled), self.language_id)
        return compiled

    @staticmethod
    def _create_finding(rule: Rule, node: Node, source: bytes) -> Finding:
        row, column = node.start_point
        return Finding(
            rule_name=rule.name,
            severity=rule.severity,
            message=rule.message,
            line=row + 1,
            column=column + 1,
            text=ASTWalker.get_text(node, source),
            suggestion=rule.suggestion,
            score_impact=rule.score_impact,
        )


def analyze_source(source: str, language_id: str) -> Tuple[List[Finding], CodeScore]:
    """Analyze source text with the rule set and grammar registered for ``language_id``"""
    engine = AnalysisEngine.for_language(language_id)
    return engine.analyze_with_score(source, load_grammar(language_id))
