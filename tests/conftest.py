"""Pytest configuration and fixtures for the test suite."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from loguru import logger

SAMPLE_CONTENT = """\
Rust:
safe, fast, productive.
Pick three.
Duct tape."""


@pytest.fixture(scope="session")
def test_data_dir() -> Path:
    """Provide the path to the test data directory."""
    return Path(__file__).parent.parent / "data_test"


@pytest.fixture(scope="session")
def poem_path(test_data_dir: Path) -> Path:
    """Provide the path to the sample poem."""
    return test_data_dir / "poem.txt"


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace for file operations."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def sample_file(temp_workspace: Path) -> Path:
    """Write the short sample text to a file."""
    path = temp_workspace / "sample.txt"
    path.write_text(SAMPLE_CONTENT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop log sinks bound to a test's captured stderr."""
    yield
    logger.remove()
