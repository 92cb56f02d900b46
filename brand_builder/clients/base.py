"""Base class for generation clients."""

from abc import ABC, abstractmethod

from ..models.generation import ContentPart, GenerationResult


class GenerationClient(ABC):
    """A configured client for the image generation API.

    Built once at startup and passed to the campaign workflow explicitly.
    """

    model: str

    @abstractmethod
    def generate(self, model: str | None, parts: list[ContentPart]) -> GenerationResult:
        """Send one generate call. Raises GenerationError on failure."""
        pass
