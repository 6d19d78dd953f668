"""ID3 tag access for a single MP3 file using mutagen."""

import logging
from typing import Optional

from mutagen import MutagenError
from mutagen.id3 import ID3, Frames, ID3NoHeaderError

from retagger.errors import ApplyError, ParseError

logger = logging.getLogger("retagger.tag_handle")

# Text frames are written as UTF-8
UTF8 = 3


class TagHandle:
    """Mutable ID3v2 tag of one MP3 file.

    Frames are addressed by their four-letter id (TIT2, TPE1, ...) and
    exchanged as text; None stands for a frame that is not set.
    """

    VALUE_SEPARATOR = "/"

    def __init__(self, file_path: str, tags: ID3):
        self.file_path = file_path
        self._tags = tags
        self.dirty = False

    @classmethod
    def open(cls, file_path: str) -> "TagHandle":
        """
        Read the ID3 header of a file.

        Args:
            file_path: Path to MP3 file

        Returns:
            TagHandle for the file

        Raises:
            ParseError: If the file has no ID3 header or it cannot be read
        """
        try:
            tags = ID3(file_path)
        except ID3NoHeaderError as e:
            raise ParseError("No ID3 header found", file_path) from e
        except (MutagenError, OSError) as e:
            raise ParseError(f"Cannot read ID3 tag: {e}", file_path) from e

        logger.debug(f"Loaded ID3v2.{tags.version[1]} tag from {file_path}")
        return cls(file_path, tags)

    def read_field(self, frame_id: str) -> Optional[str]:
        """Get the text of a frame, or None if it is not set."""
        frames = self._tags.getall(frame_id)
        if not frames:
            return None
        return self.VALUE_SEPARATOR.join(str(t) for t in frames[0].text)

    def write_field(self, frame_id: str, value: str) -> None:
        """
        Replace a frame with a single text value.

        Raises:
            ApplyError: If the value cannot be stored as UTF-8, e.g. text taken
                from a file name with undecodable bytes
        """
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ApplyError(f"Cannot store {frame_id} value as UTF-8", self.file_path) from e
        frame = Frames[frame_id](encoding=UTF8, text=[value])
        self._tags.setall(frame_id, [frame])
        self.dirty = True

    def remove_field(self, frame_id: str) -> None:
        """Remove every frame with the given id."""
        self._tags.delall(frame_id)
        self.dirty = True

    def save(self) -> None:
        """
        Write the tag back to the file, keeping the audio data.

        Raises:
            ApplyError: If the file cannot be written
        """
        try:
            self._tags.save(self.file_path)
        except (MutagenError, OSError) as e:
            raise ApplyError(f"Cannot save ID3 tag: {e}", self.file_path) from e
        self.dirty = False
        logger.debug(f"Saved ID3 tag to {self.file_path}")
