"""Tag frames checked by Retagger and the values they are expected to hold."""

import os
from typing import Optional

from retagger.matcher import match_path
from retagger.models import PropertyDescriptor


def _or_none(value: Optional[str]) -> Optional[str]:
    # Empty text frames are not written to disk, so "" is expected as unset
    return value or None


def expected_title(file_path: str) -> Optional[str]:
    return _or_none(match_path(file_path).title)


def expected_artist(file_path: str) -> Optional[str]:
    return _or_none(match_path(file_path).artists)


def expected_album(file_path: str) -> Optional[str]:
    """Name of the folder that contains the file."""
    absolute_path = os.path.abspath(file_path)
    return _or_none(os.path.basename(os.path.dirname(absolute_path)))


def expected_track(file_path: str) -> Optional[str]:
    return match_path(file_path).track


# Checked and reported in this order
PROPERTIES = (
    PropertyDescriptor(frame_id="TIT2", label="Title", expected=expected_title),
    PropertyDescriptor(frame_id="TPE1", label="Artist", expected=expected_artist),
    PropertyDescriptor(frame_id="TALB", label="Album", expected=expected_album),
    PropertyDescriptor(frame_id="TRCK", label="Track", expected=expected_track),
)


def get_property(frame_id: str) -> PropertyDescriptor:
    """Look up a descriptor by its frame id."""
    for prop in PROPERTIES:
        if prop.frame_id == frame_id:
            return prop
    raise KeyError(frame_id)
