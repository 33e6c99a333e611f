import tomllib
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from codescore.errors import ConfigError
from codescore.models import Severity

DEFAULT_CONFIG_FILE = Path(".codescore.toml")


class OutputSettings(BaseModel):
    """Presentation settings; rule sets themselves are not configurable."""

    model_config = ConfigDict(extra="forbid")

    format: Literal["json", "text"] = "json"
    min_severity: str = "style"
    fail_under: Optional[float] = None

    @field_validator("min_severity")
    @classmethod
    def _known_severity(cls, value: str) -> str:
        return Severity.parse(value).value.lower()

    @property
    def severity_floor(self) -> Severity:
        return Severity.parse(self.min_severity)


class CliConfig:
    """Handles loading and validation of the [tool.codescore] table"""

    def __init__(self, config_path: Path | None = None):
        self.settings = OutputSettings()

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e

        section = data.get("tool", {}).get("codescore", {})
        self.settings = self._validate(section, path)

    def merged(self, **overrides) -> OutputSettings:
        """Settings with command-line values (None means "not given") applied on top"""
        values = self.settings.model_dump()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return self._validate(values, "command line")

    @staticmethod
    def _validate(values: dict, origin) -> OutputSettings:
        try:
            return OutputSettings(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid codescore settings in {origin}: {e}") from e
