"""Campaign service - base product photo followed by three marketing edits."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..clients.base import GenerationClient
from ..clients.errors import GenerationError
from ..models.campaign import Campaign, CampaignStatus
from ..models.generation import ImagePart, InlineImage, TextPart

logger = logging.getLogger(__name__)

BASE_PROMPT_TEMPLATE = (
    "A clean, high-quality studio product photography shot of {description}. "
    "Professional lighting, neutral background. "
    "Absolutely no people, no hands, no human figures."
)

BASE_IMAGE_ERROR = "Failed to generate base product image."
DEFAULT_ERROR = "An error occurred during generation."


@dataclass(frozen=True)
class Variation:
    """An edit applied to the base image for one campaign item."""

    item_id: str
    prompt: str


# Processed in this order, one at a time
VARIATIONS: list[Variation] = [
    Variation(
        "billboard",
        "Edit this image to place the product on a large outdoor billboard in a bustling city "
        "environment. The product should be the main focus of the billboard. "
        "Absolutely no people in the scene.",
    ),
    Variation(
        "newspaper",
        "Edit this image to make it look like a vintage black and white newspaper advertisement "
        "featuring this product. Include some mock newspaper text around it. "
        "Absolutely no people.",
    ),
    Variation(
        "social",
        "Edit this image to look like an engaging, modern Instagram social media post featuring "
        "this product, perhaps resting on a stylish table or aesthetic background. "
        "Absolutely no people.",
    ),
]


def build_base_prompt(description: str) -> str:
    return BASE_PROMPT_TEMPLATE.format(description=description)


class CampaignService:
    """Run a campaign: one base image, then each variation edited from it."""

    def __init__(self, client: GenerationClient, model: str | None = None):
        self.client = client
        self.model = model or client.model

    def start_campaign(
        self,
        campaign: Campaign,
        description: str,
        on_update: Callable[[Campaign], None] | None = None,
    ) -> Campaign:
        """
        Generate all four campaign images for a product description.

        Blank descriptions, or a campaign that is already running, are ignored.
        A base failure aborts the campaign and sets `campaign.error`; a
        variation failure only empties that item.

        Args:
            campaign: State to update in place
            description: Free-text product description
            on_update: Called after every state change (for rendering)

        Returns:
            The same campaign, with status DONE if a run happened
        """
        if not campaign.can_start(description):
            return campaign

        notify = on_update or (lambda _: None)

        # 1. Everything loading, previous run cleared
        campaign.description = description
        campaign.error = None
        campaign.status = CampaignStatus.RUNNING
        for item in campaign.items:
            item.start_loading()
        notify(campaign)

        try:
            # 2. Base product photo
            base_image = self._generate_base(description)
            campaign.base.fill(base_image)
            notify(campaign)

            # 3. Variations, each isolated from the others
            for variation in VARIATIONS:
                self._generate_variation(campaign, variation, base_image)
                notify(campaign)

        except Exception as e:
            logger.error(f"Campaign failed: {e}")
            campaign.error = str(e) or DEFAULT_ERROR
            for item in campaign.items:
                item.clear()

        finally:
            campaign.status = CampaignStatus.DONE
            notify(campaign)

        return campaign

    def _generate_base(self, description: str) -> InlineImage:
        logger.info(f"Generating base image for: {description}")
        result = self.client.generate(self.model, [TextPart(build_base_prompt(description))])
        if result.image is None:
            raise GenerationError(BASE_IMAGE_ERROR)
        logger.info(f"  Base image ready ({len(result.image.data)} bytes)")
        return result.image

    def _generate_variation(self, campaign: Campaign, variation: Variation, base_image: InlineImage):
        item = campaign.item(variation.item_id)
        logger.info(f"Generating {variation.item_id} variant...")

        try:
            result = self.client.generate(
                self.model,
                [ImagePart(base_image), TextPart(variation.prompt)],
            )
        except Exception as e:
            logger.warning(f"Error generating {variation.item_id}: {e}")
            item.clear()
            return

        if result.image is None:
            logger.warning(f"No image returned for {variation.item_id}")
        item.fill(result.image)
