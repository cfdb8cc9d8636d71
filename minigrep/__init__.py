"""Search a file for lines containing a string."""

from .app import read_content, run
from .common.pydantic import OutputMode, SearchConfig
from .config import build_config
from .errors import (
    ConfigError,
    FileReadError,
    InvalidLogLevelError,
    MinigrepError,
    MissingFilePathError,
    MissingQueryError,
)
from .search import highlight_line, search, search_case_insensitive, search_case_sensitive, split_lines

__all__ = [
    "ConfigError",
    "FileReadError",
    "InvalidLogLevelError",
    "MinigrepError",
    "MissingFilePathError",
    "MissingQueryError",
    "OutputMode",
    "SearchConfig",
    "build_config",
    "highlight_line",
    "read_content",
    "run",
    "search",
    "search_case_insensitive",
    "search_case_sensitive",
    "split_lines",
]
