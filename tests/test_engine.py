import pytest

from codescore.engine import AnalysisEngine, analyze_source
from codescore.errors import RuleCompileError, SourceDecodeError, UnsupportedLanguageError
from codescore.languages import load_grammar
from codescore.models import Rule, Severity
from helpers import by_rule


@pytest.fixture
def javascript():
    return load_grammar("javascript")


def test_finding_fields(javascript):
    rule = Rule("call", "(call_expression) @call", Severity.WARNING, "A call", "Don't").with_weight(2.0)
    engine = AnalysisEngine([rule])

    findings = engine.analyze("\n  foo(1);\n", javascript)

    assert len(findings) == 1
    finding = findings[0]
    assert finding.rule_name == "call"
    assert finding.severity is Severity.WARNING
    assert finding.message == "A call"
    assert finding.suggestion == "Don't"
    assert (finding.line, finding.column) == (2, 3)
    assert finding.text == "foo(1)"
    assert finding.score_impact == -3.0


def test_every_capture_is_a_candidate(javascript):
    rule = Rule("call", "(call_expression function: (identifier) @name) @call", Severity.INFO, "A call")

    findings = AnalysisEngine([rule]).analyze("foo(1);\n", javascript)

    assert sorted(f.text for f in findings) == ["foo", "foo(1)"]


def test_findings_follow_rule_order(javascript):
    rules = [
        Rule("second_line", "(variable_declaration) @var", Severity.WARNING, "var"),
        Rule("first_line", "(lexical_declaration) @let", Severity.STYLE, "let"),
    ]

    findings = AnalysisEngine(rules).analyze("let a = 1;\nvar b = 2;\n", javascript)

    assert [f.rule_name for f in findings] == ["second_line", "first_line"]
    assert [f.line for f in findings] == [2, 1]


def test_matches_keep_discovery_order(javascript):
    rule = Rule("ident", "(identifier) @id", Severity.STYLE, "identifier")

    findings = AnalysisEngine([rule]).analyze("let a = b;\nlet c = d;\n", javascript)

    assert [f.text for f in findings] == ["a", "b", "c", "d"]


def test_non_ascii_text_is_preserved(javascript):
    rule = Rule("string", "(string) @s", Severity.STYLE, "string")

    findings = AnalysisEngine([rule]).analyze('let s = "héllo";\n', javascript)

    assert findings[0].text == '"héllo"'


@pytest.mark.parametrize("query", ["(not_a_node_kind) @x", "((call_expression", "(call_expression bogus: (identifier))"])
def test_invalid_query_is_fatal(javascript, query):
    rules = [
        Rule("fine", "(identifier) @id", Severity.STYLE, "ok"),
        Rule("broken", query, Severity.ERROR, "never runs"),
    ]
    engine = AnalysisEngine(rules, "javascript")

    with pytest.raises(RuleCompileError) as excinfo:
        engine.analyze("let a = 1;\n", javascript)

    assert excinfo.value.rule_name == "broken"
    assert excinfo.value.language_id == "javascript"


def test_rule_for_another_grammar_is_fatal(javascript):
    go_only = Rule("go", "(short_var_declaration) @decl", Severity.INFO, "go")

    with pytest.raises(RuleCompileError):
        AnalysisEngine([go_only]).analyze("let a = 1;\n", javascript)


def test_syntax_errors_become_findings(run_rules):
    findings = run_rules("fn main() {}\n}}}\n", "rust")

    errors = by_rule(findings, "syntax_error")
    assert errors
    assert all(f.severity is Severity.ERROR for f in errors)
    assert all(f.score_impact == -6.0 for f in errors)


def test_unchecked_error_match_is_reported(run_rules):
    source = "package main\n\nfunc run() {\n\tvar x int\n\tvar err error\n\tx, err = load()\n\t_ = x\n}\n"

    findings = by_rule(run_rules(source, "go"), "go_missing_error_check")

    assert findings
    assert all(f.severity is Severity.WARNING for f in findings)
    assert any(f.text == "x, err = load()" for f in findings)


def test_empty_source_scores_perfectly():
    findings, score = analyze_source("", "javascript")

    assert findings == []
    assert score.overall_score == 10.0


def test_analyze_with_score_counts_findings(javascript):
    engine = AnalysisEngine.for_language("javascript")

    findings, score = engine.analyze_with_score("var a = 1;\nvar b = 2;\n", javascript)

    assert score.total_issues == len(findings) == 2
    assert score.breakdown.warnings == 2


def test_engine_is_reusable(javascript):
    engine = AnalysisEngine.for_language("javascript")

    first = engine.analyze("var a = 1;\n", javascript)
    engine.analyze("debugger;\n", javascript)
    again = engine.analyze("var a = 1;\n", javascript)

    assert first == again


def test_rules_are_exposed_read_only():
    engine = AnalysisEngine.for_language("go")
    assert isinstance(engine.rules, tuple)
    assert engine.language_id == "go"


def test_parse_only_language_cannot_be_analyzed():
    with pytest.raises(UnsupportedLanguageError):
        AnalysisEngine.for_language("java")


def test_unencodable_source_is_fatal(javascript):
    engine = AnalysisEngine.for_language("javascript")

    with pytest.raises(SourceDecodeError):
        engine.analyze("let a = '\ud800';\n", javascript)
