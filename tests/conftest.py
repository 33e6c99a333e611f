import pytest

from codescore.engine import AnalysisEngine
from codescore.languages import load_grammar
from codescore.parser import ParseResult, SourceParser


@pytest.fixture
def parse():
    """Parse a snippet with a registered grammar: parse(source, "go") -> ParseResult"""

    def _parse(source: str, language_id: str):
        source_bytes = source.encode("utf-8")
        tree = SourceParser(load_grammar(language_id)).parser.parse(source_bytes)
        return ParseResult(tree=tree, source=source_bytes)

    return _parse


@pytest.fixture
def run_rules():
    """Run a language's full rule set: run_rules(source, "rust") -> list[Finding]"""

    def _run(source: str, language_id: str):
        engine = AnalysisEngine.for_language(language_id)
        return engine.analyze(source, load_grammar(language_id))

    return _run
