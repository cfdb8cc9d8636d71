"""Pydantic base model and search configuration."""

from enum import StrEnum
from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


class OutputMode(StrEnum):
    """How matching lines are printed."""

    PLAIN = "plain"
    HIGHLIGHT = "highlight"


class SearchConfig(FrozenBaseModel):
    """Search configuration."""

    query: str = Field(description="Substring to look for.")
    file_path: str = Field(description="File to search, as given on the command line.")
    ignore_case: bool = Field(default=False, description="Compare lowercased lines and query.")
    output_mode: OutputMode = Field(default=OutputMode.PLAIN, description="Plain or highlighted matches.")
    log_level: LogLevel = Field(default="WARNING", description="Minimum level of log messages on stderr.")

    @property
    def highlight(self) -> bool:
        """Whether matches are highlighted."""
        return self.output_mode is OutputMode.HIGHLIGHT
