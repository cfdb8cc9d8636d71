"""Search configuration from command-line arguments and environment."""

from collections.abc import Mapping, Sequence

from loguru import logger

from .common.pydantic import LOG_LEVELS, OutputMode, SearchConfig
from .errors import InvalidLogLevelError, MissingFilePathError, MissingQueryError

IGNORE_CASE_VAR = "IGNORE_CASE"
HIGHLIGHT_VAR = "HIGHLIGHT"
LOG_LEVEL_VAR = "MINIGREP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def parse_log_level(value: str | None) -> str:
    """Normalize a loguru level name, falling back to the default when unset."""
    if value is None or not value.strip():
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise InvalidLogLevelError(value)
    return level


def log_level_from_env(env: Mapping[str, str]) -> str:
    """Log level from the environment; unknown names fall back to the default."""
    try:
        return parse_log_level(env.get(LOG_LEVEL_VAR))
    except InvalidLogLevelError as e:
        logger.warning("{}, using {}", e, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL


def build_config(args: Sequence[str], env: Mapping[str, str]) -> SearchConfig:
    """Build a search config.

    ``args`` includes the program name at position 0. Flags in ``env`` count as
    set whenever the variable is present, whatever its value.
    """
    rest = list(args[1:])
    if not rest:
        raise MissingQueryError()
    if len(rest) < 2:
        raise MissingFilePathError()
    if len(rest) > 2:
        logger.debug("Ignoring extra arguments: {}", rest[2:])

    return SearchConfig(
        query=rest[0],
        file_path=rest[1],
        ignore_case=IGNORE_CASE_VAR in env,
        output_mode=OutputMode.HIGHLIGHT if HIGHLIGHT_VAR in env else OutputMode.PLAIN,
        log_level=log_level_from_env(env),
    )
