"""Data models for Retagger."""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple


@dataclass(frozen=True)
class PatternRule:
    """One entry of the filename cascade.

    Group numbers refer to the capture groups of ``regex``.
    """
    name: str
    regex: re.Pattern
    artists: Tuple[int, ...]
    title: int
    track: Optional[int] = None


@dataclass(frozen=True)
class InferredMetadata:
    """Metadata inferred from a file name."""
    title: str
    artists: str
    track: Optional[str] = None


@dataclass(frozen=True)
class PropertyDescriptor:
    """Binds an ID3 frame to a label and the value it should hold."""
    frame_id: str
    label: str
    expected: Callable[[str], Optional[str]]


@dataclass(frozen=True)
class Change:
    """A single frame whose current value differs from the expected one."""
    prop: PropertyDescriptor
    current: Optional[str]
    new: Optional[str]

    @property
    def frame_id(self) -> str:
        return self.prop.frame_id

    @property
    def label(self) -> str:
        return self.prop.label


@dataclass
class RunSummary:
    """Outcome of a retag run."""
    changed: int = 0
    processed: int = 0
    total: int = 0
    dry_run: bool = False

    @property
    def completed(self) -> bool:
        """Check if every scanned file was processed."""
        return self.processed == self.total
