"""
Shared pytest fixtures.

Sample messages live in tests/fixtures/emails.py; the fixtures here hand them
out as bytes or as files on disk, and keep global state (settings, logging,
environment) from leaking between tests.
"""

import os
from pathlib import Path
from typing import Generator

import pytest
import structlog

from eml_mimeparse.config import settings
from tests.fixtures.emails import SAMPLE_EMAILS


@pytest.fixture
def sample_eml_bytes() -> bytes:
    """Single text/plain message with every common header set."""
    return SAMPLE_EMAILS["simple_plain_text"]


@pytest.fixture
def multipart_html_eml() -> bytes:
    """multipart/alternative message with a text and an HTML version."""
    return SAMPLE_EMAILS["multipart_html"]


@pytest.fixture
def html_only_eml() -> bytes:
    return SAMPLE_EMAILS["html_only"]


@pytest.fixture
def attachment_eml() -> bytes:
    """multipart/mixed message: text body plus a quoted-printable text attachment."""
    return SAMPLE_EMAILS["attachment"]


@pytest.fixture
def tmp_eml_file(tmp_path: Path) -> Generator[str, None, None]:
    """
    Write the plain text sample to disk.

    Yields:
        Path of the .eml file as a string
    """
    eml_path = tmp_path / "message.eml"
    eml_path.write_bytes(SAMPLE_EMAILS["simple_plain_text"])
    yield str(eml_path)


@pytest.fixture
def eml_directory(tmp_path: Path) -> Path:
    """
    Mailbox directory for batch runs.

    Holds two decodable messages and one that fails (unsupported child type),
    named so that sorted order is plain, attachment, broken.
    """
    directory = tmp_path / "mailbox"
    directory.mkdir()
    (directory / "a_plain.eml").write_bytes(SAMPLE_EMAILS["simple_plain_text"])
    (directory / "b_attachment.eml").write_bytes(SAMPLE_EMAILS["attachment"])
    (directory / "c_broken.eml").write_bytes(SAMPLE_EMAILS["unknown_nested_type"])
    return directory


@pytest.fixture
def shallow_nesting(monkeypatch) -> int:
    """
    Lower max_nesting_depth so depth limits can be hit with small messages.

    Returns:
        The limit in effect for the test
    """
    monkeypatch.setattr(settings, "max_nesting_depth", 2)
    return 2


@pytest.fixture(autouse=True)
def restore_environment():
    """Undo environment variable changes made by a test."""
    saved = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture(autouse=True)
def reset_structlog():
    """
    Restore structlog defaults after each test.

    setup_logging() binds the stream that was stderr when it ran, which pytest
    closes once the capturing test is over.
    """
    yield
    structlog.reset_defaults()
