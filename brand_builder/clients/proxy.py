"""Client for the generation proxy endpoint.

Sends requests through the server-side handler so the API key never leaves
the server.
"""

import requests

from ..config import GENERATION_TIMEOUT, IMAGE_MODEL
from ..models.generation import ContentPart, GenerationRequest, GenerationResult
from .base import GenerationClient
from .errors import GenerationError


class ProxyClient(GenerationClient):
    """Generation client that posts to the proxy endpoint instead of calling Gemini."""

    def __init__(self, url: str, model: str = IMAGE_MODEL, timeout: float = GENERATION_TIMEOUT):
        self.url = url
        self.model = model
        self.timeout = timeout

    def generate(self, model: str | None, parts: list[ContentPart]) -> GenerationResult:
        """
        Generate an image via the proxy.

        Raises:
            GenerationError: on transport failure, non-2xx status, or a
                response that cannot be parsed
        """
        request = GenerationRequest(model=model or self.model, parts=list(parts))

        try:
            response = requests.post(
                self.url,
                json=request.to_wire(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise GenerationError(f"Proxy request failed: {e}") from e

        if not response.ok:
            raise GenerationError(self._error_message(response))

        try:
            return GenerationResult.from_response(response.json())
        except (ValueError, AttributeError, TypeError) as e:
            raise GenerationError(f"Malformed proxy response: {e}") from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Prefer the proxy's {"error": ...} message over the bare status."""
        error_msg = f"Proxy error: {response.status_code}"
        try:
            error_data = response.json()
        except ValueError:
            return error_msg
        if isinstance(error_data, dict) and error_data.get("error"):
            return str(error_data["error"])
        return error_msg
