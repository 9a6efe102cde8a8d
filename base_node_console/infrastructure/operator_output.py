"""Operator Output: the text stream the operator reads command results from.

Invariants:
    - Each write() call lands as one uninterrupted block, even when detached
      tasks on the runner thread write concurrently with the input thread
    - Output is unstructured text; diagnostics go to logging, not here
"""

import sys
import threading
from typing import TextIO


class OperatorOutput:
    """Line-oriented, thread-safe writer over a text stream."""

    def __init__(self, stream: TextIO | None = None):
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def stream(self) -> TextIO:
        # Resolved late so a replaced sys.stdout (e.g. under capture) is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write(self, *lines: str) -> None:
        with self._lock:
            stream = self.stream
            for line in lines:
                stream.write(f"{line}\n")
            stream.flush()
