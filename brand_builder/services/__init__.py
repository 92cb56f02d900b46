"""Business logic services."""

from .campaign import CampaignService, VARIATIONS, build_base_prompt

__all__ = ["CampaignService", "VARIATIONS", "build_base_prompt"]
