"""Completion model offering TikZ command words."""

from __future__ import annotations

from dataclasses import dataclass

FUNCTION_ICON = "code-function"


@dataclass(frozen=True)
class CompletionItem:
    """One completion entry; commands starting with a backslash carry an icon."""

    name: str
    icon: str | None = None


class CompletionModel:
    """Holds the words offered for completion.

    The number of rows shown is fixed when completion is invoked, so an
    update of the words takes effect on the next invocation.
    """

    def __init__(self) -> None:
        self.use_completion = False
        self.words: list[str] = []
        self.matches: list[CompletionItem] = []
        self.row_count = 0

    def update_completer(self, use_completion: bool, words: list[str]) -> None:
        """Replace the completion words and rebuild the matches."""
        self.use_completion = use_completion
        self.words = list(words)
        self.matches = [
            CompletionItem(word, FUNCTION_ICON if word.startswith("\\") else None)
            for word in self.words
        ]

    def completion_invoked(self) -> int:
        """Take the current matches as the visible rows; return their number."""
        self.row_count = len(self.matches)
        return self.row_count

    def item(self, row: int) -> CompletionItem | None:
        """Return the match at ``row``, or ``None`` when there is none."""
        if not 0 <= row < len(self.matches):
            return None
        return self.matches[row]