"""
The `ai` package talks to the language model: a thin LLM client and the
assistant that classifies input and answers questions.
"""

from .assistant import Assistant, AssistantResult, Classification
from .llm import LLMClient, LLMCompletionResponse


__all__ = [
    "Assistant",
    "AssistantResult",
    "Classification",
    "LLMClient",
    "LLMCompletionResponse",
]
