"""Command-line entry point: generate a campaign for one product description."""

import argparse
import logging
import sys
from pathlib import Path

from .clients import GeminiClient, GenerationClient, GenerationError, ProxyClient
from .config import GEMINI_API_KEY, IMAGE_MODEL, LOG_LEVEL, OUTPUT_DIR, PROXY_URL
from .models import Campaign, CampaignStatus, ItemState
from .services import CampaignService
from .utils import extension_for

STATE_TEXT = {
    ItemState.LOADING: "Processing",
    ItemState.EMPTY: "Awaiting Input",
}


def render(campaign: Campaign) -> str:
    """Text rendering of the result grid."""
    lines = []
    for item in campaign.items:
        if item.state == ItemState.FILLED:
            status = f"{item.image.mime_type}, {len(item.image.data)} bytes"
        else:
            status = STATE_TEXT[item.state]
        lines.append(f"  [{item.icon}] {item.label}: {status}")
    if campaign.error:
        lines.append(f"  ERROR: {campaign.error}")
    return "\n".join(lines)


def build_client(proxy_url: str | None, model: str) -> GenerationClient:
    """Route through the proxy when configured, else call Gemini directly."""
    if proxy_url:
        return ProxyClient(proxy_url, model=model)
    return GeminiClient(api_key=GEMINI_API_KEY, model=model)


def save_images(campaign: Campaign, output_dir: Path) -> list[Path]:
    """Write every filled item to <output_dir>/<item id>.<ext>."""
    output_dir.mkdir(parents=True, exist_ok=True)
    saved = []
    for item in campaign.items:
        if item.image is None:
            continue
        path = output_dir / f"{item.id}.{extension_for(item.image.mime_type)}"
        path.write_bytes(item.image.data)
        saved.append(path)
    return saved


def main(description: str, output_dir: str = OUTPUT_DIR, proxy_url: str | None = PROXY_URL,
         model: str = IMAGE_MODEL) -> Campaign:
    campaign = Campaign()
    if not campaign.can_start(description):
        print("Nothing to generate: description is empty")
        return campaign

    service = CampaignService(build_client(proxy_url, model), model=model)

    def on_update(c: Campaign):
        print(f"\n[{c.status.value}]", flush=True)
        print(render(c), flush=True)

    service.start_campaign(campaign, description, on_update=on_update)

    if campaign.status == CampaignStatus.DONE and not campaign.error:
        saved = save_images(campaign, Path(output_dir))
        print(f"\nSaved {len(saved)} images to {output_dir}")
        for path in saved:
            print(f"  {path}")

    return campaign


def cli():
    parser = argparse.ArgumentParser(
        description="Generate a product photo and billboard, newspaper and social variants."
    )
    parser.add_argument("description", help='e.g. "A sleek matte black espresso machine with wood accents"')
    parser.add_argument("--output-dir", default=OUTPUT_DIR)
    parser.add_argument("--proxy-url", default=PROXY_URL, help="Generate via the proxy endpoint")
    parser.add_argument("--model", default=IMAGE_MODEL)
    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        campaign = main(args.description, args.output_dir, args.proxy_url, args.model)
    except GenerationError as e:
        # Client construction failures, e.g. missing API key
        print(f"Error: {e}")
        sys.exit(1)

    if campaign.error:
        sys.exit(1)


if __name__ == "__main__":
    cli()
