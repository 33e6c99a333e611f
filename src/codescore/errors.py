"""Exceptions raised by the analysis core and its front end."""


class CodeScoreError(Exception):
    """Base class for every fatal analysis error."""


class UnsupportedLanguageError(CodeScoreError):
    """The requested language has no grammar or no rule set."""

    def __init__(self, language_id: str, action: str = "analysis"):
        self.language_id = language_id
        self.action = action
        super().__init__(f"{action.capitalize()} not supported for language '{language_id}'")


class RuleCompileError(CodeScoreError):
    """A hardcoded rule pattern does not compile against its grammar."""

    def __init__(self, rule_name: str, language_id: str, detail: str):
        self.rule_name = rule_name
        self.language_id = language_id
        self.detail = detail
        super().__init__(f"Rule '{rule_name}' failed to compile for {language_id}: {detail}")


class SourceDecodeError(CodeScoreError):
    """Source bytes are not valid UTF-8."""


class ConfigError(CodeScoreError):
    """A configuration file could not be read or validated."""
