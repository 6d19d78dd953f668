"""Console output of pending changes and the run summary."""

from typing import List

from retagger.changes import PLACEHOLDER, format_change
from retagger.models import Change, RunSummary
from retagger.utils import display_text


class Reporter:
    """Prints per-file changes and the final summary to stdout."""

    COLORS = {
        "reset": "\033[0m",
        "bold": "\033[1m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "dim": "\033[2m",
    }

    def __init__(self, no_color: bool = False, placeholder: str = PLACEHOLDER):
        """
        Initialize reporter.

        Args:
            no_color: Disable colored output
            placeholder: Text shown for frames that are not set
        """
        self.no_color = no_color
        self.placeholder = placeholder

        if no_color:
            self.COLORS = {k: "" for k in self.COLORS}

    def _c(self, color: str, text: str) -> str:
        """Apply color to text."""
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def show_file_changes(self, file_path: str, changes: List[Change]) -> None:
        """Display the header and one line per change for a file."""
        print(f"{self._c('bold', 'File:')} {display_text(file_path)}:")
        for change in changes:
            print(f"  {display_text(format_change(change, self.placeholder))}")

    def end_file(self) -> None:
        """Print the blank separator after a file's changes."""
        print("\n")

    def show_summary(self, summary: RunSummary) -> None:
        """Display '<changed>/<total> files changed'."""
        if not summary.completed:
            print(self._c("yellow",
                          f"Aborted after {summary.processed} of {summary.total} files"))
        print(f"{self._c('green', str(summary.changed))}/{summary.total} files changed")
        if summary.dry_run:
            print(self._c("dim", "Test mode: no files were written"))
