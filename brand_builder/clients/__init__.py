"""Clients for the image generation API."""

from .base import GenerationClient
from .errors import GenerationError
from .gemini import GeminiClient
from .proxy import ProxyClient

__all__ = ["GenerationClient", "GenerationError", "GeminiClient", "ProxyClient"]
