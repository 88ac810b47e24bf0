"""Pytest configuration and shared fixtures for the mdstream test suite.

This module provides shared fixtures and test configuration used across
the entire test suite.
"""

import logging
import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def sample_markdown() -> str:
    """Provide a small markdown document touching most constructs."""
    return (
        "# Title\n"
        "\n"
        "Some *emphasis*, **strong** and ~~struck~~ text with `code`.\n"
        "\n"
        "- [x] done\n"
        "- [ ] todo\n"
        "\n"
        "> quoted\n"
        "\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
    )


@pytest.fixture
def markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Write the sample markdown to a temporary file."""
    path = tmp_path / "sample.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _restore_loggers():
    """Undo logger changes made by configure_logging."""
    saved = {}
    for name in ("mdstream", "chardet"):
        logger = logging.getLogger(name)
        saved[name] = (logger.handlers[:], logger.level, logger.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
