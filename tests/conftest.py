"""Test fixtures and configuration."""

import pytest

from corestr.printf import TextBuffer


@pytest.fixture
def buffer():
    """Empty output buffer."""
    return TextBuffer()


@pytest.fixture
def prefilled_buffer():
    """Buffer that already holds some text."""
    return TextBuffer("log: ")


@pytest.fixture
def project_dir(tmp_path):
    """Project directory for config files."""
    return str(tmp_path)
