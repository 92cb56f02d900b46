"""Shared fakes for the generation API."""

import pytest

from brand_builder.clients import GenerationClient
from brand_builder.models import Campaign, GenerationResult, ImagePart, InlineImage, TextPart

BASE_IMAGE = InlineImage(data=b"\x89PNG base product", mime_type="image/png")


def variant_image(item_id: str) -> InlineImage:
    return InlineImage(data=f"{item_id} image".encode(), mime_type="image/jpeg")


class FakeClient(GenerationClient):
    """Scripted generation client.

    `responses` maps a call key ("base", or the variant id found in the
    prompt) to a GenerationResult or an exception to raise.
    """

    model = "fake-image-model"

    def __init__(self, responses: dict | None = None, campaign: Campaign | None = None):
        self.responses = responses or {}
        self.campaign = campaign
        self.calls: list[tuple[str, list]] = []
        self.states_at_call: list[list] = []

    def generate(self, model, parts):
        self.calls.append((model, list(parts)))
        if self.campaign is not None:
            self.states_at_call.append([item.state for item in self.campaign.items])

        key = self._key(parts)
        outcome = self.responses.get(key)
        if outcome is None:
            outcome = GenerationResult(image=BASE_IMAGE if key == "base" else variant_image(key))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @staticmethod
    def _key(parts) -> str:
        if not any(isinstance(p, ImagePart) for p in parts):
            return "base"
        text = " ".join(p.text for p in parts if isinstance(p, TextPart)).lower()
        for key in ("billboard", "newspaper", "social"):
            if key in text:
                return key
        raise AssertionError(f"Unrecognised variant prompt: {text}")


@pytest.fixture
def campaign():
    return Campaign()


@pytest.fixture
def make_client(campaign):
    def _make(**responses):
        return FakeClient(responses, campaign=campaign)

    return _make
