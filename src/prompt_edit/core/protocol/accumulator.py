"""Folds decoded frames into the session's content and error text."""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from prompt_edit.common.models import ContentFrame, DoneFrame, ErrorFrame, Frame


class ResponseAccumulator:
    """Append-only content/error buffers with an optional live sink.

    Content deltas go to ``sink`` as they arrive; nothing sent there is
    ever retracted. A ``done`` frame changes nothing: the process exit is
    what ends a response.
    """

    def __init__(self, sink: Optional[Callable[[str], None]] = None) -> None:
        self._sink = sink
        self._content: list[str] = []
        self._error: list[str] = []

    @property
    def content(self) -> str:
        return "".join(self._content)

    @property
    def error(self) -> str:
        return "".join(self._error)

    @property
    def streaming(self) -> bool:
        return self._sink is not None

    def consume(self, frame: Frame) -> None:
        if isinstance(frame, ErrorFrame):
            self._error.append(frame.text)
        elif isinstance(frame, ContentFrame):
            self._content.append(frame.text)
            if self._sink is not None and frame.text:
                self._sink(frame.text)
        elif isinstance(frame, DoneFrame):
            pass
        else:
            raise TypeError(f"Unknown frame type: {type(frame).__name__}")

    def consume_all(self, frames: Iterable[Frame]) -> None:
        for frame in frames:
            self.consume(frame)

    def append_error(self, text: str) -> None:
        """Add raw diagnostic text (stderr) to the error buffer."""
        if text:
            self._error.append(text)
