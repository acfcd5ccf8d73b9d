from dataclasses import dataclass
from typing import Literal


@dataclass
class ChatMessage:
    role: Literal["system", "user", "assistant"]
    content: str


@dataclass
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0


@dataclass
class ChatCompletion:
    text: str
    finish_reason: str | None = None
    usage: TokenUsage | None = None
