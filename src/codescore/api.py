"""Public entry point: source in, report out."""

from .engine import AnalysisEngine
from .errors import SourceDecodeError
from .languages import load_grammar, rules_for
from .parser import encode_source
from .report import Report, format_report


def decode_source(file_contents: str | bytes) -> str:
    if isinstance(file_contents, str):
        encode_source(file_contents)
        return file_contents
    try:
        return file_contents.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceDecodeError(f"Source is not valid UTF-8: {e}") from e


def analyze(file_contents: str | bytes, language_id: str) -> Report:
    """Analyze one file's contents and return the full report.

    Args:
        file_contents: Source text, or raw bytes that must decode as UTF-8
        language_id: Registered language id, e.g. ``"rust"``, ``"go"``, ``"javascript"``

    Returns:
        Report with the score, rating, summary, breakdown and every finding

    Raises:
        UnsupportedLanguageError: no rule set exists for ``language_id``
        SourceDecodeError: ``file_contents`` bytes are not UTF-8
        RuleCompileError: a built-in rule does not compile against its grammar
    """
    engine = AnalysisEngine(rules_for(language_id), language_id)
    source = decode_source(file_contents)
    findings, score = engine.analyze_with_score(source, load_grammar(language_id))
    return format_report(findings, score)
