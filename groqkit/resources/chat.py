"""
Chat completions facade.
"""

from __future__ import annotations

from groqkit.models.chat import ChatCompletion, ChatCompletionRequest, ChatMessage
from groqkit.resources.base import APIResource
from groqkit.types import Result


class ChatResource(APIResource):
    """Chat completion operations."""

    def create(self, request: ChatCompletionRequest) -> Result[ChatCompletion]:
        """Create a chat completion.

        Raises:
            ValidationError: If the model or the message list is empty
        """
        self._require_request(request, ChatCompletionRequest)
        self._require_text(request.model, "Model", "model")
        self._require_items(request.messages, "Messages", "messages")
        return self._client.post(self._path("chat", "completions"), request, ChatCompletion)

    def create_simple(self, model: str, message: str) -> Result[ChatCompletion]:
        """Single-turn completion for one user message."""
        self._require_text(message, "Message", "messages")
        request = ChatCompletionRequest(model=model, messages=[ChatMessage.user(message)])
        return self.create(request)
