"""Filename pattern cascade used to infer title, artists and track number."""

import logging
import os
import re
from typing import Optional, Tuple

from retagger.models import InferredMetadata, PatternRule

logger = logging.getLogger("retagger.matcher")

MP3_EXTENSION = ".mp3"
ARTIST_DELIMITER = "/"

# Leading track number: "01 ", "01. " or "01 - "
_TRACK = r"(\d+)\.?\s+(?:-\s+)?"
# Separator between two artists: ft./feat. (any letter case), "," or "&"
_ARTIST_SEP = r"\s*(?:[fF](?:[eE][aA])?[tT]\.|[,&])\s*"


def _rule(name: str, pattern: str, artists=(), title: int = 1,
          track: Optional[int] = None) -> PatternRule:
    return PatternRule(
        name=name,
        regex=re.compile(pattern, re.DOTALL),
        artists=tuple(artists),
        title=title,
        track=track,
    )


# Most specific first; the first rule that matches the whole stem wins.
PATTERNS = (
    _rule("track-multi-artist", _TRACK + r"(.*?)" + _ARTIST_SEP + r"(.*?) - (.*)",
          artists=(2, 3), title=4, track=1),
    _rule("track-artist", _TRACK + r"(.*?) - (.*)",
          artists=(2,), title=3, track=1),
    _rule("track-title", _TRACK + r"(.*)",
          title=2, track=1),
    _rule("multi-artist", r"(.*?)" + _ARTIST_SEP + r"(.*?) - (.*)",
          artists=(1, 2), title=3),
    _rule("artist", r"(.*?) - (.*)",
          artists=(1,), title=2),
    # Catch-all, keeps the cascade total
    _rule("title", r"(.*)",
          title=1),
)


def apply_pattern(rule: PatternRule, stem: str) -> Optional[InferredMetadata]:
    """Apply one rule to a stem.

    Returns:
        InferredMetadata, or None if the rule does not match the whole stem.
    """
    match = rule.regex.fullmatch(stem)
    if not match:
        return None

    track = None
    if rule.track is not None:
        track = str(int(match.group(rule.track)))

    return InferredMetadata(
        title=match.group(rule.title),
        artists=ARTIST_DELIMITER.join(match.group(i) for i in rule.artists),
        track=track,
    )


def _first_match(stem: str) -> Tuple[PatternRule, InferredMetadata]:
    for rule in PATTERNS:
        result = apply_pattern(rule, stem)
        if result is not None:
            return rule, result
    raise AssertionError(f"No pattern matched {stem!r}")


def find_rule(stem: str) -> PatternRule:
    """Return the rule that wins for the given stem."""
    return _first_match(stem)[0]


def match_file(stem: str) -> InferredMetadata:
    """Infer metadata from a file name without extension."""
    rule, result = _first_match(stem)
    logger.debug(f"{stem!r} matched rule '{rule.name}'")
    return result


def get_stem(file_path: str) -> str:
    """Strip directory and .mp3 extension from a path."""
    name = os.path.basename(file_path)
    if name.endswith(MP3_EXTENSION):
        name = name[:-len(MP3_EXTENSION)]
    return name


def match_path(file_path: str) -> InferredMetadata:
    """Infer metadata from the file name of a path."""
    return match_file(get_stem(file_path))
