"""Request/response models for the image generation API."""

from dataclasses import dataclass, field
from typing import Any

from ..config import DEFAULT_MIME_TYPE
from ..utils import decode_base64, encode_base64


@dataclass(frozen=True)
class InlineImage:
    """Image bytes plus content type, embedded directly in a request or response."""

    data: bytes
    mime_type: str = DEFAULT_MIME_TYPE

    def to_wire(self) -> dict:
        return {"inlineData": {"data": encode_base64(self.data), "mimeType": self.mime_type}}


@dataclass(frozen=True)
class TextPart:
    text: str

    def to_wire(self) -> dict:
        return {"text": self.text}


@dataclass(frozen=True)
class ImagePart:
    image: InlineImage

    def to_wire(self) -> dict:
        return self.image.to_wire()


ContentPart = TextPart | ImagePart


@dataclass
class GenerationRequest:
    """A single generate call: target model and ordered content parts."""

    model: str
    parts: list[ContentPart] = field(default_factory=list)

    def to_wire(self) -> dict:
        """Body accepted by the proxy endpoint: {"model": ..., "contents": {"parts": [...]}}."""
        return {
            "model": self.model,
            "contents": {"parts": [part.to_wire() for part in self.parts]},
        }


@dataclass
class GenerationResult:
    """Outcome of a generate call. `image` is None when no image part came back."""

    image: InlineImage | None = None

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "GenerationResult":
        """
        Build a result from a raw JSON response.

        Only the first candidate is considered; the first part carrying inline
        data wins and the remaining parts are ignored. Accepts both camelCase
        and snake_case keys.

        Raises:
            ValueError: if the payload is not shaped like a generate response
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected response type: {type(payload).__name__}")

        candidates = payload.get("candidates") or []
        if not candidates:
            return cls()

        content = candidates[0].get("content") or {}
        for part in content.get("parts") or []:
            inline = part.get("inlineData") or part.get("inline_data")
            if inline and inline.get("data"):
                mime_type = inline.get("mimeType") or inline.get("mime_type") or DEFAULT_MIME_TYPE
                return cls(image=InlineImage(data=decode_base64(inline["data"]), mime_type=mime_type))

        return cls()
