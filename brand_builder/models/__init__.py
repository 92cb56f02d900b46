"""Data models."""

from .campaign import Campaign, CampaignItem, CampaignStatus, ItemState, SLOTS
from .generation import (
    ContentPart,
    GenerationRequest,
    GenerationResult,
    ImagePart,
    InlineImage,
    TextPart,
)

__all__ = [
    "Campaign",
    "CampaignItem",
    "CampaignStatus",
    "ItemState",
    "SLOTS",
    "ContentPart",
    "GenerationRequest",
    "GenerationResult",
    "ImagePart",
    "InlineImage",
    "TextPart",
]
