"""Run a search against a file."""

from pathlib import Path

from loguru import logger

from .common.pydantic import SearchConfig
from .errors import FileReadError
from .search import search


def read_content(path: str | Path) -> str:
    """Read a whole UTF-8 file, keeping its line terminators as they are."""
    try:
        with open(path, encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e


def run(config: SearchConfig) -> list[str]:
    """Print the lines of the configured file that match the query."""
    content = read_content(config.file_path)
    logger.debug("Read {} characters from {}", len(content), config.file_path)

    results = search(config.query, content, ignore_case=config.ignore_case, highlight=config.highlight)
    logger.debug("Found {} matching lines", len(results))

    for line in results:
        print(line)
    return results
