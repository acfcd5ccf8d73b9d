from .base import TextGenerator
from .entities import ChatMessage, ChatCompletion, TokenUsage
from .openai_chat import OpenAITextGenerator

__all__ = [
    "TextGenerator",
    "ChatMessage",
    "ChatCompletion",
    "TokenUsage",
    "OpenAITextGenerator",
]
