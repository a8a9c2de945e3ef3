"""Stdio protocol: frame parsing and response accumulation."""

from prompt_edit.core.protocol.accumulator import ResponseAccumulator
from prompt_edit.core.protocol.frame_parser import FrameParser, MalformedFrame, decode_frames

__all__ = [
    "FrameParser",
    "MalformedFrame",
    "ResponseAccumulator",
    "decode_frames",
]
