"""Application entry point."""

import os
import sys
from collections.abc import Mapping, Sequence

from rich.console import Console

from .app import run
from .config import DEFAULT_LOG_LEVEL, LOG_LEVEL_VAR, build_config, parse_log_level
from .errors import ConfigError, FileReadError, InvalidLogLevelError
from .log import configure_logging

err_console = Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    """Main entry point."""
    argv = sys.argv if argv is None else argv
    env = os.environ if env is None else env

    # Configured first so build_config can log.
    try:
        configure_logging(parse_log_level(env.get(LOG_LEVEL_VAR)))
    except InvalidLogLevelError:
        configure_logging(DEFAULT_LOG_LEVEL)

    try:
        config = build_config(argv, env)
    except ConfigError as e:
        err_console.print(f"Problem parsing arguments: {e}")
        return 1

    print(f"Searching for {config.query}")
    print(f"In file {config.file_path}")

    try:
        run(config)
    except FileReadError as e:
        err_console.print(f"Application error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
