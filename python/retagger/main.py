#!/usr/bin/env python3
"""
Retagger - Retagging tool for .mp3 files.

Usage:
    python -m retagger [--test] [--root DIR]
"""

import argparse
import logging
import sys
from typing import Optional

from retagger.changes import apply_changes, detect_changes
from retagger.config import eprint, load_config, setup_logging
from retagger.errors import RetaggerError
from retagger.models import RunSummary
from retagger.reporter import Reporter
from retagger.scanner import scan
from retagger.tag_handle import TagHandle

logger = logging.getLogger("retagger.main")


class Retagger:
    """Walks a folder and aligns the tags of its MP3 files with their names."""

    def __init__(self, root: str, dry_run: bool, reporter: Reporter):
        """
        Initialize retagger.

        Args:
            root: Folder to scan for .mp3 files
            dry_run: Only report changes, never write them
            reporter: Console output handler
        """
        self.root = root
        self.dry_run = dry_run
        self.reporter = reporter

    def run(self) -> RunSummary:
        """
        Process every .mp3 file below the root, one at a time.

        Returns:
            Summary with the number of changed files

        Raises:
            ScanError: If the root cannot be scanned
            ParseError: If a file's tag cannot be read
            ApplyError: If a file's tag cannot be written
        """
        files = scan(self.root)
        summary = RunSummary(total=len(files), dry_run=self.dry_run)

        if self.dry_run:
            logger.debug("Test mode - no changes will be written")

        try:
            for file_path in files:
                if self._process_file(file_path):
                    summary.changed += 1
                summary.processed += 1
        finally:
            self.reporter.show_summary(summary)

        return summary

    def _process_file(self, file_path: str) -> bool:
        """
        Check one file and apply its changes.

        Returns:
            True if the file was written
        """
        try:
            tag = TagHandle.open(file_path)
            changes = detect_changes(tag, file_path)
            if not changes:
                logger.debug(f"Up to date: {file_path}")
                return False

            self.reporter.show_file_changes(file_path, changes)
            written = False
            if not self.dry_run:
                apply_changes(changes, tag)
                if tag.dirty:
                    tag.save()
                    written = True
            self.reporter.end_file()
            return written
        except RetaggerError as e:
            if e.file_path is None:
                e.file_path = file_path
            raise
        except Exception as e:
            raise RetaggerError(f"Unexpected error: {e!r}", file_path) from e


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="retag",
        description=(
            "Retagging tool for .mp3 files. Title and artist are derived from "
            "the file's name and the album is derived from the folder's name."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Recognized file names:
  05 Artist feat. Other - Title.mp3
  05 Artist - Title.mp3
  05 Title.mp3
  Artist & Other - Title.mp3
  Artist - Title.mp3
  Title.mp3

Examples:
  # Show what would change below the current folder
  retag --test

  # Apply the changes
  retag

  # Work on another folder
  retag --root ~/Music
"""
    )

    parser.add_argument(
        "--test",
        action="store_true",
        help="Only print changes, don't apply them"
    )

    parser.add_argument(
        "--root",
        help="Folder to scan (default: $RETAGGER_ROOT or the current folder)"
    )

    # Configuration
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: ./.env)"
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug details to stderr"
    )

    return parser


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.env_file)
    setup_logging(args.verbose or config["verbose"])
    if config["env_file"]:
        logger.debug(f"Loaded environment from {config['env_file']}")

    reporter = Reporter(no_color=args.no_color or config["no_color"])
    retagger = Retagger(
        root=args.root or config["root"],
        dry_run=args.test,
        reporter=reporter,
    )

    try:
        retagger.run()
    except RetaggerError as e:
        eprint(f"An error occurred: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()
