"""Detecting and applying differences between tags and expected values."""

from typing import Iterable, List, Optional, Sequence

from retagger.models import Change, PropertyDescriptor
from retagger.properties import PROPERTIES
from retagger.tag_handle import TagHandle

PLACEHOLDER = "-"


def detect_changes(tag: TagHandle, file_path: str,
                   properties: Sequence[PropertyDescriptor] = PROPERTIES) -> List[Change]:
    """
    Collect the frames of a file that differ from their expected values.

    Args:
        tag: Tag of the file
        file_path: Path the expected values are derived from
        properties: Descriptors to check, in report order

    Returns:
        List of changes in descriptor order (empty if the tag is up to date)
    """
    changes = []
    for prop in properties:
        current = tag.read_field(prop.frame_id)
        expected = prop.expected(file_path)
        # None (unset) and "" (set but empty) are different values
        if current != expected:
            changes.append(Change(prop=prop, current=current, new=expected))
    return changes


def apply_change(change: Change, tag: TagHandle) -> None:
    """Write a change into the tag, removing the frame if the new value is None."""
    if change.new is None:
        tag.remove_field(change.frame_id)
    else:
        tag.write_field(change.frame_id, change.new)


def apply_changes(changes: Iterable[Change], tag: TagHandle) -> int:
    """Apply changes in order and return how many were written."""
    count = 0
    for change in changes:
        apply_change(change, tag)
        count += 1
    return count


def _display(value: Optional[str], placeholder: str) -> str:
    return placeholder if value is None else value


def format_change(change: Change, placeholder: str = PLACEHOLDER) -> str:
    """Render a change as '<label>: <current> --> <new>'."""
    current = _display(change.current, placeholder)
    new = _display(change.new, placeholder)
    return f"{change.label}: {current} --> {new}"
