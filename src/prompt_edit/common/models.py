"""Wire models for the stdio protocol spoken with the external tool.

Keep these lightweight and stable; they form the editor↔tool contract.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class ChatRequest(BaseModel):
    """The single JSON object written to the tool's stdin."""

    model_config = ConfigDict(frozen=True)

    messages: tuple[Message, ...] = Field(default_factory=tuple)
    stream: bool = False

    def to_wire(self) -> bytes:
        return self.model_dump_json().encode("utf-8")


class ContentFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["content"] = "content"
    text: str


class ErrorFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    text: str


class DoneFrame(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["done"] = "done"


Frame = Union[ContentFrame, ErrorFrame, DoneFrame]


class ContentResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["content"] = "content"
    text: str
    was_streamed: bool = False


class ErrorResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["error"] = "error"
    message: str


Result = Union[ContentResult, ErrorResult]
