"""Completion Provider: tab-completion candidates from the static vocabulary.

Invariants:
    - Candidates are vocabulary tokens that start with the line (case-sensitive)
    - Order is vocabulary declaration order, never sorted
    - Never consults a backend, never raises
    - readline_complete is restartable: state 0 recomputes the candidate list

Design Decisions:
    - Two entry points over one vocabulary: (pos, candidates) for line editors
      that complete whole lines, (text, state) for GNU readline
"""

from base_node_console.core.commands import vocabulary_tokens


def complete_line(line: str) -> list[str]:
    return [token for token in vocabulary_tokens() if token.startswith(line)]


class CommandCompleter:
    """Line-editor completion hooks backed by complete_line()."""

    def __init__(self):
        self._readline_matches: list[str] = []

    def complete(self, line: str, pos: int) -> tuple[int, list[str]]:
        """Candidates for the whole line; the cursor position is passed through."""
        return pos, complete_line(line)

    def update(self, line: str, elected: str) -> tuple[str, int]:
        """Replace the edited line with the elected candidate.

        Returns (new_line, cursor) with the cursor at the end of the candidate.
        """
        return elected, len(elected)

    def readline_complete(self, text: str, state: int) -> str | None:
        if state == 0:
            self._readline_matches = complete_line(text)
        if state < len(self._readline_matches):
            return self._readline_matches[state]
        return None
