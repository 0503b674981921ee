from __future__ import annotations

import base64
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Request ──────────────────────────────────────────────────────────────────

class TextBlock(_WireModel):
    type: Literal["text"] = "text"
    text: str


class DocumentBlock(_WireModel):
    type: Literal["document"] = "document"
    name: str
    format: str = "txt"
    data: str = Field(description="Base64-encoded document bytes.")

    @classmethod
    def from_bytes(cls, name: str, raw: bytes, format: str = "txt") -> "DocumentBlock":
        return cls(name=name, format=format, data=base64.b64encode(raw).decode("ascii"))


ContentBlock = Annotated[Union[TextBlock, DocumentBlock], Field(discriminator="type")]


class Message(_WireModel):
    role: Literal["user", "assistant"] = "user"
    content: list[ContentBlock]


class InvokeRequest(_WireModel):
    model: str
    system: str = ""
    max_tokens: int = Field(2048, ge=1)
    messages: list[Message]


# ── Response ─────────────────────────────────────────────────────────────────

class ResponseBlock(_WireModel):
    type: str = "text"
    text: str = ""


class Usage(_WireModel):
    input_tokens: int = 0
    output_tokens: int = 0
    estimated_cost_usd: float = 0.0


class InvokeResponse(_WireModel):
    model: str = ""
    content: list[ResponseBlock] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)

    def text(self) -> str:
        return "".join(block.text for block in self.content if block.type == "text")


class GovernorErrorBody(_WireModel):
    code: str = "UNKNOWN"
    message: str = ""
    allowed_models: list[str] = Field(default_factory=list)
