"""Utility functions for Retagger."""


def display_text(text: str) -> str:
    """Make text from file names printable on any UTF-8 stream.

    Bytes that were not valid UTF-8 in the file name are shown as U+FFFD.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "surrogatepass")
    return raw.decode("utf-8", "replace")
