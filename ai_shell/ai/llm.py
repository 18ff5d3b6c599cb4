from dataclasses import dataclass
from typing import Dict, List, Optional

import aisuite


@dataclass
class LLMCompletionResponse:
    """The reply message of one chat completion, as a plain dict."""

    assistant_message: Dict

    @property
    def content(self) -> Optional[str]:
        return self.assistant_message.get("content")


class LLMClient:
    """
    Sends single-shot chat completions through aisuite.

    Nothing is remembered between calls: each request carries its own system
    instruction and user message.
    """

    def __init__(self, provider_configs: Dict):
        """
        Args:
            provider_configs: Per-provider settings, e.g.
                `{"openai": {"api_key": "...", "base_url": "..."}}`.
        """
        self.client = aisuite.Client(provider_configs)

    @staticmethod
    def build_messages(system_prompt: str, user_input: str) -> List[Dict]:
        """Builds the role-tagged prompt envelope for one request."""
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_input},
        ]

    def completion(
        self,
        model: str,
        messages: List[Dict],
        temperature: float,
        max_tokens: int,
    ) -> LLMCompletionResponse:
        response = self.client.chat.completions.create(
            model=model,
            messages=messages,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        # Only the first choice is used; unset fields are left out of the dict.
        message = response.choices[0].message
        return LLMCompletionResponse(assistant_message=message.model_dump(exclude_unset=True))
