"""Shared test fixtures for retagger tests."""

import logging
import sys
from pathlib import Path

import pytest
from mutagen.id3 import ID3, TCON

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from retagger.reporter import Reporter

# A few bytes standing in for MPEG audio after the tag
FAKE_AUDIO = b"\xff\xfb\x90\x00" + b"\x00" * 413


def write_mp3(path: Path, *frames) -> Path:
    """Create an MP3 file with an ID3v2 tag holding the given frames.

    A genre frame is always added so the tag is never empty.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(FAKE_AUDIO)
    tags = ID3()
    tags.add(TCON(encoding=3, text=["Rock"]))
    for frame in frames:
        tags.add(frame)
    tags.save(str(path))
    return path


@pytest.fixture
def make_mp3():
    """Factory fixture creating MP3 files with ID3 tags."""
    return write_mp3


@pytest.fixture
def reporter():
    """Reporter without ANSI colors."""
    return Reporter(no_color=True)


@pytest.fixture
def album_dir(tmp_path):
    """An album folder nested a few levels deep."""
    folder = tmp_path / "Music" / "Various" / "GreatestHits"
    folder.mkdir(parents=True)
    return folder


@pytest.fixture
def fake_audio():
    """The audio bytes written after the tag by make_mp3."""
    return FAKE_AUDIO


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers added by setup_logging after each test."""
    yield
    logger = logging.getLogger("retagger")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
