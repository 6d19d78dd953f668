"""Tests for changes.py detection, application and formatting."""

import sys
from pathlib import Path

import pytest
from mutagen.id3 import ID3, TALB, TIT2, TPE1, TRCK

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from retagger.changes import apply_change, apply_changes, detect_changes, format_change
from retagger.models import Change
from retagger.properties import get_property
from retagger.tag_handle import TagHandle

FILE_PATH = "/music/GreatestHits/01 Alice ft. Bob - Song.mp3"


def _handle(*frames) -> TagHandle:
    tags = ID3()
    for frame in frames:
        tags.add(frame)
    return TagHandle(FILE_PATH, tags)


@pytest.fixture
def converged_tag():
    """A tag that already holds every expected value."""
    return _handle(
        TIT2(encoding=3, text=["Song"]),
        TPE1(encoding=3, text=["Alice/Bob"]),
        TALB(encoding=3, text=["GreatestHits"]),
        TRCK(encoding=3, text=["1"]),
    )


class TestDetectChanges:
    """Tests for detect_changes function."""

    def test_empty_tag(self):
        """Should report every frame of an empty tag, in order."""
        changes = detect_changes(_handle(), FILE_PATH)
        assert [(c.label, c.current, c.new) for c in changes] == [
            ("Title", None, "Song"),
            ("Artist", None, "Alice/Bob"),
            ("Album", None, "GreatestHits"),
            ("Track", None, "1"),
        ]

    def test_converged_tag(self, converged_tag):
        """Should report nothing when the tag is up to date."""
        assert detect_changes(converged_tag, FILE_PATH) == []

    def test_only_differing_frames(self, converged_tag):
        """Should only report frames whose value differs."""
        converged_tag.write_field("TALB", "Best Of")
        changes = detect_changes(converged_tag, FILE_PATH)
        assert len(changes) == 1
        assert changes[0].frame_id == "TALB"
        assert changes[0].current == "Best Of"
        assert changes[0].new == "GreatestHits"

    def test_both_absent_is_no_change(self):
        """Should not report a missing track when none is expected."""
        path = "/music/Album/Artist - Title.mp3"
        tag = _handle(
            TIT2(encoding=3, text=["Title"]),
            TPE1(encoding=3, text=["Artist"]),
            TALB(encoding=3, text=["Album"]),
        )
        assert detect_changes(tag, path) == []

    def test_stale_track_is_removed(self):
        """Should report a track that is set but no longer expected."""
        path = "/music/Album/Artist - Title.mp3"
        tag = _handle(
            TIT2(encoding=3, text=["Title"]),
            TPE1(encoding=3, text=["Artist"]),
            TALB(encoding=3, text=["Album"]),
            TRCK(encoding=3, text=["4"]),
        )
        changes = detect_changes(tag, path)
        assert [(c.label, c.current, c.new) for c in changes] == [("Track", "4", None)]

    def test_empty_string_differs_from_absent(self):
        """Should treat an empty frame and a missing frame as different."""
        path = "/music/Album/JustATitle.mp3"
        absent = _handle(TIT2(encoding=3, text=["JustATitle"]),
                         TALB(encoding=3, text=["Album"]))
        empty = _handle(TIT2(encoding=3, text=["JustATitle"]),
                        TPE1(encoding=3, text=[""]),
                        TALB(encoding=3, text=["Album"]))

        # A plain title expects no artist frame at all
        assert detect_changes(absent, path) == []
        changes = detect_changes(empty, path)
        assert [(c.label, c.current, c.new) for c in changes] == [("Artist", "", None)]

    def test_custom_property_subset(self):
        """Should only check the given descriptors."""
        changes = detect_changes(_handle(), FILE_PATH, [get_property("TALB")])
        assert [c.label for c in changes] == ["Album"]


class TestApplyChange:
    """Tests for apply_change and apply_changes functions."""

    def test_writes_new_value(self):
        """Should write the new value into the frame."""
        tag = _handle()
        apply_change(Change(get_property("TIT2"), None, "Song"), tag)
        assert tag.read_field("TIT2") == "Song"
        assert tag.dirty is True

    def test_removes_frame_for_absent_value(self):
        """Should remove the frame when the new value is None."""
        tag = _handle(TRCK(encoding=3, text=["4"]))
        apply_change(Change(get_property("TRCK"), "4", None), tag)
        assert tag.read_field("TRCK") is None

    def test_writes_empty_string(self):
        """Should keep an empty value as an empty frame."""
        tag = _handle()
        apply_change(Change(get_property("TPE1"), None, ""), tag)
        assert tag.read_field("TPE1") == ""

    def test_applying_converges(self):
        """Should leave nothing to change after applying all changes."""
        tag = _handle(TIT2(encoding=3, text=["Old"]), TRCK(encoding=3, text=["01"]))
        changes = detect_changes(tag, FILE_PATH)
        assert apply_changes(changes, tag) == 4
        assert detect_changes(tag, FILE_PATH) == []

    def test_no_changes_no_writes(self, converged_tag):
        """Should not touch the tag for an empty change list."""
        assert apply_changes(detect_changes(converged_tag, FILE_PATH), converged_tag) == 0
        assert converged_tag.dirty is False


class TestFormatChange:
    """Tests for format_change function."""

    def test_format(self):
        """Should render '<label>: <current> --> <new>'."""
        change = Change(get_property("TIT2"), "Old", "New")
        assert format_change(change) == "Title: Old --> New"

    def test_placeholder_for_absent_values(self):
        """Should show '-' for absent values."""
        assert format_change(Change(get_property("TRCK"), None, "1")) == "Track: - --> 1"
        assert format_change(Change(get_property("TRCK"), "4", None)) == "Track: 4 --> -"

    def test_empty_string_is_shown_empty(self):
        """Should not replace an empty string with the placeholder."""
        assert format_change(Change(get_property("TPE1"), None, "")) == "Artist: - --> "

    def test_custom_placeholder(self):
        """Should use the given placeholder."""
        change = Change(get_property("TALB"), None, "Album")
        assert format_change(change, placeholder="(none)") == "Album: (none) --> Album"
