"""Newline-delimited JSON frame parsing for the tool's stdout."""

from __future__ import annotations

import codecs
import json
import logging
from typing import Iterable, Iterator, Union

from pydantic import ValidationError

from prompt_edit.common.models import ContentFrame, DoneFrame, ErrorFrame, Frame

logger = logging.getLogger(__name__)


class MalformedFrame(ValueError):
    """A line that does not decode to a known frame. Never leaves this module."""


def decode_frames(line: str) -> list[Frame]:
    """Decode one complete line into its frames.

    An object carrying both ``error`` and ``content`` yields both, error first.
    Raises MalformedFrame for anything that is not a recognised frame object.
    """
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as e:
        raise MalformedFrame(f"invalid JSON: {e}") from e
    if not isinstance(payload, dict):
        raise MalformedFrame(f"expected an object, got {type(payload).__name__}")

    frames: list[Frame] = []
    try:
        if "error" in payload:
            frames.append(ErrorFrame(text=payload["error"]))
        if "content" in payload:
            frames.append(ContentFrame(text=payload["content"]))
    except ValidationError as e:
        raise MalformedFrame(f"bad field type: {e.errors()[0]['msg']}") from e
    if payload.get("done") is True:
        frames.append(DoneFrame())
    if not frames:
        raise MalformedFrame(f"unknown frame keys: {sorted(payload)}")
    return frames


class FrameParser:
    """Turns stdout chunks into complete frames, holding back a partial tail.

    Chunks may be ``bytes`` (decoded incrementally as UTF-8, so a character
    split across reads survives) or ``str``. Call ``flush()`` once at end of
    input: the tail left over may itself be a complete frame.
    """

    def __init__(self) -> None:
        self._pending = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def pending(self) -> str:
        """Unterminated tail of the last chunk."""
        return self._pending

    def feed(self, chunk: Union[bytes, str]) -> Iterator[Frame]:
        if isinstance(chunk, (bytes, bytearray)):
            chunk = self._decoder.decode(bytes(chunk))
        # Split now so the tail is stored even if the caller never iterates.
        segments = (self._pending + chunk).split("\n")
        self._pending = segments.pop()
        return self._decode_lines(segments)

    def flush(self) -> Iterator[Frame]:
        tail = self._pending + self._decoder.decode(b"", final=True)
        self._pending = ""
        return self._decode_lines([tail])

    def _decode_lines(self, lines: Iterable[str]) -> Iterator[Frame]:
        for line in lines:
            line = line.strip()
            if not line:
                continue
            try:
                frames = decode_frames(line)
            except MalformedFrame as e:
                logger.warning("Dropping malformed frame %r: %s", line[:200], e)
                continue
            yield from frames
