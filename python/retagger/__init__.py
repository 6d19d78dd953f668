"""
Retagger - MP3 tag normalization from file and folder names.

This package provides tools to:
- Infer title, artist and track number from an MP3 file name
- Derive the album from the name of the containing folder
- Compare the inferred values with the file's ID3 frames
- Rewrite the frames that differ (or only report them in test mode)
"""

__version__ = "1.0.0"
