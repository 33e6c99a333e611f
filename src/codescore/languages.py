"""
Registry of the languages the analyzer knows about.

Each entry pairs a tree-sitter grammar with the rule set written for it.
Languages without a rule set can still be parsed and dumped.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, List, Optional

import tree_sitter_c as tsc
import tree_sitter_cpp as tscpp
import tree_sitter_go as tsgo
import tree_sitter_java as tsjava
import tree_sitter_javascript as tsjs
import tree_sitter_rust as tsrust
import tree_sitter_typescript as tsts
from tree_sitter import Language

from .errors import UnsupportedLanguageError
from .models import Rule
from .rules.go import go_rules
from .rules.javascript import javascript_rules
from .rules.rust import rust_rules


@dataclass(frozen=True)
class LanguageSupport:
    """What the analyzer can do with one source language"""

    id: str
    display_name: str
    grammar: Callable[[], object]
    extensions: tuple[str, ...]
    rules: Optional[Callable[[], List[Rule]]] = None

    @property
    def analyzable(self) -> bool:
        return self.rules is not None


LANGUAGES: dict[str, LanguageSupport] = {
    support.id: support
    for support in (
        LanguageSupport("rust", "Rust", tsrust.language, (".rs",), rust_rules),
        LanguageSupport("go", "Go", tsgo.language, (".go",), go_rules),
        LanguageSupport("javascript", "JavaScript", tsjs.language, (".js", ".jsx"), javascript_rules),
        LanguageSupport("java", "Java", tsjava.language, (".java",)),
        LanguageSupport("c", "C", tsc.language, (".c", ".h")),
        LanguageSupport("cpp", "C++", tscpp.language, (".cpp", ".cc", ".cxx", ".hpp", ".hxx")),
        LanguageSupport("typescript", "TypeScript", tsts.language_tsx, (".ts", ".tsx")),
    )
}


def get_language(language_id: str, action: str = "parsing") -> LanguageSupport:
    try:
        return LANGUAGES[language_id.lower()]
    except KeyError:
        raise UnsupportedLanguageError(language_id, action) from None


def analyzable_languages() -> List[LanguageSupport]:
    return [support for support in LANGUAGES.values() if support.analyzable]


def parseable_languages() -> List[LanguageSupport]:
    return list(LANGUAGES.values())


@lru_cache(maxsize=None)
def load_grammar(language_id: str) -> Language:
    """Load (once) the tree-sitter grammar for a language id"""
    return Language(get_language(language_id).grammar())


def rules_for(language_id: str) -> List[Rule]:
    """Fresh copy of the rule set for an analyzable language"""
    support = get_language(language_id, "analysis")
    if support.rules is None:
        raise UnsupportedLanguageError(support.display_name, "analysis")
    return support.rules()
