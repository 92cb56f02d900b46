"""Gemini image generation client (Gemini 2.5 Flash Image)."""

import json
from typing import Any

from google import genai
from google.genai import types

from ..config import DEFAULT_MIME_TYPE, GENERATION_TIMEOUT, IMAGE_MODEL
from ..models.generation import ContentPart, GenerationResult, ImagePart, InlineImage, TextPart
from .base import GenerationClient
from .errors import GenerationError


class GeminiClient(GenerationClient):
    """Client for generating and editing images via the Gemini API.

    Holds the API key, so it must only be constructed server-side or in a
    trusted local process.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = IMAGE_MODEL,
        timeout: float = GENERATION_TIMEOUT,
        client: Any = None,
    ):
        if client is None:
            if not api_key:
                raise GenerationError("GEMINI_API_KEY is not set")
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(timeout * 1000)),
            )
        self.client = client
        self.model = model

    def generate(self, model: str | None, parts: list[ContentPart]) -> GenerationResult:
        """
        Generate an image from ordered content parts.

        Args:
            model: Model identifier (defaults to the client's model)
            parts: Text and/or inline image parts, in order

        Returns:
            Result holding the first inline image of the first candidate, if any

        Raises:
            GenerationError: on any API or transport failure
        """
        contents = types.Content(role="user", parts=[self._to_part(p) for p in parts])

        try:
            response = self.client.models.generate_content(
                model=model or self.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    response_modalities=["IMAGE", "TEXT"],
                ),
            )
        except Exception as e:
            raise GenerationError(f"Gemini request failed: {e}") from e

        # Extract generated image from response
        if response.candidates:
            content = response.candidates[0].content
            for part in (content.parts if content and content.parts else []):
                if part.inline_data and part.inline_data.data:
                    return GenerationResult(
                        image=InlineImage(
                            data=part.inline_data.data,
                            mime_type=part.inline_data.mime_type or DEFAULT_MIME_TYPE,
                        )
                    )

        return GenerationResult()

    def generate_content(self, model: str, contents: Any) -> dict:
        """
        Forward a raw request and return the raw response as a JSON-able dict.

        `contents` uses the wire shape (camelCase keys, base64 image data), as
        sent by ProxyClient or any other client of the proxy endpoint.

        Raises:
            GenerationError: on any API or transport failure
        """
        try:
            response = self.client.models.generate_content(
                model=model,
                contents=self._parse_contents(contents),
            )
            return response.model_dump(mode="json", by_alias=True, exclude_none=True)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(str(e) or "Failed to generate content") from e

    @staticmethod
    def _to_part(part: ContentPart) -> types.Part:
        if isinstance(part, TextPart):
            return types.Part.from_text(text=part.text)
        if isinstance(part, ImagePart):
            return types.Part.from_bytes(data=part.image.data, mime_type=part.image.mime_type)
        raise TypeError(f"Unsupported content part: {part!r}")

    @staticmethod
    def _parse_contents(contents: Any) -> Any:
        """Validate wire-shaped contents into SDK types.

        JSON-mode validation decodes base64 image data into bytes.
        """
        if contents is None:
            raise GenerationError("Missing 'contents'")
        if isinstance(contents, str):
            return contents
        if isinstance(contents, dict):
            return types.Content.model_validate_json(json.dumps(contents))
        if isinstance(contents, list):
            # A list of Content objects, or a bare list of parts for one turn
            if all(isinstance(c, dict) and "parts" in c for c in contents):
                return [types.Content.model_validate_json(json.dumps(c)) for c in contents]
            return types.Content.model_validate_json(json.dumps({"parts": contents}))
        raise GenerationError(f"Unsupported 'contents' type: {type(contents).__name__}")
