import logging

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

from .llm import LLMClient


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

CLASSIFIER_PROMPT = """
You are a command classifier. Analyze the user input and determine if it's:
1. A shell command (something to execute in the terminal)
2. Natural language (a question, request, or conversation)

Respond with ONLY one word: "COMMAND" or "NATURAL"

Examples:
- "ls -la" -> COMMAND
- "git status" -> COMMAND
- "how do I list files?" -> NATURAL
- "what time is it?" -> NATURAL
- "cd /home" -> COMMAND
- "show me the current directory" -> NATURAL
"""

ASSISTANT_PROMPT = """
You are a helpful shell assistant. The user is trying to use the command line.
If they enter natural language, respond helpfully.
If they enter an incorrect command or wrong options, suggest the correct command.
Be concise and practical. Format commands with backticks.
Context: {context}
"""

CLASSIFY_TEMPERATURE = 0.1
CLASSIFY_MAX_TOKENS = 10
ASK_TEMPERATURE = 0.7
ASK_MAX_TOKENS = 200


class Classification(Enum):
    COMMAND = "COMMAND"
    NATURAL = "NATURAL"


@dataclass
class AssistantResult(Generic[T]):
    """The outcome of a remote assistant call: either a value or an error message."""

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T]) -> "AssistantResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "AssistantResult[T]":
        return cls(error=error)


def parse_classification(reply: Optional[str]) -> Classification:
    # Anything other than an exact NATURAL is treated as a command.
    if (reply or "").strip().upper() == Classification.NATURAL.value:
        return Classification.NATURAL
    return Classification.COMMAND


class Assistant:
    """Classifies user input and answers questions through the completion endpoint."""

    def __init__(self, llm: LLMClient, model: str):
        self.llm = llm
        self.model = model

    def classify(self, user_input: str) -> AssistantResult[Classification]:
        """
        Decides whether `user_input` is a shell command or natural language.

        A reply that is not exactly "NATURAL" classifies the input as a command.
        A failed request returns a failure result and leaves the fallback to
        the caller.
        """
        try:
            response = self.llm.completion(
                model=self.model,
                messages=LLMClient.build_messages(CLASSIFIER_PROMPT, user_input),
                temperature=CLASSIFY_TEMPERATURE,
                max_tokens=CLASSIFY_MAX_TOKENS,
            )
        except Exception as e:
            LOGGER.error("Classification Error: %s", e)
            return AssistantResult.failure(str(e))

        return AssistantResult.success(parse_classification(response.content))

    def ask(self, user_input: str, context: str = "") -> AssistantResult[str]:
        """Asks the assistant for help with `user_input`. `context` describes the situation."""
        try:
            response = self.llm.completion(
                model=self.model,
                messages=LLMClient.build_messages(
                    ASSISTANT_PROMPT.format(context=context), user_input
                ),
                temperature=ASK_TEMPERATURE,
                max_tokens=ASK_MAX_TOKENS,
            )
        except Exception as e:
            LOGGER.error("LLM Error: %s", e)
            return AssistantResult.failure(str(e))

        return AssistantResult.success(response.content)
