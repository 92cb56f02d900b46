"""Campaign presentation state - the four result slots and workflow status."""

from dataclasses import dataclass, field
from enum import Enum

from .generation import InlineImage


class CampaignStatus(Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


class ItemState(Enum):
    LOADING = "loading"
    FILLED = "filled"
    EMPTY = "empty"


@dataclass(frozen=True)
class SlotDefinition:
    """Display metadata for one fixed result slot."""

    id: str
    label: str
    icon: str  # icon tag for the rendering layer


BASE_SLOT = "base"

# Fixed slot set, in display order
SLOTS: list[SlotDefinition] = [
    SlotDefinition(BASE_SLOT, "Product Concept", "image"),
    SlotDefinition("billboard", "Billboard Ad", "monitor-up"),
    SlotDefinition("newspaper", "Newspaper Ad", "newspaper"),
    SlotDefinition("social", "Social Media", "smartphone"),
]


@dataclass
class CampaignItem:
    """One result card: a slot plus its loading flag and optional image."""

    id: str
    label: str
    icon: str
    image: InlineImage | None = None
    is_loading: bool = False

    @property
    def state(self) -> ItemState:
        if self.is_loading:
            return ItemState.LOADING
        if self.image is not None:
            return ItemState.FILLED
        return ItemState.EMPTY

    def start_loading(self):
        self.image = None
        self.is_loading = True

    def fill(self, image: InlineImage | None):
        """Finish loading with a result; None leaves the item empty."""
        self.image = image
        self.is_loading = False

    def clear(self):
        self.fill(None)


def create_items() -> list[CampaignItem]:
    """Create the four campaign items in slot order."""
    return [CampaignItem(id=s.id, label=s.label, icon=s.icon) for s in SLOTS]


@dataclass
class Campaign:
    """Presentation state for one session. Mutated only by the campaign workflow."""

    items: list[CampaignItem] = field(default_factory=create_items)
    status: CampaignStatus = CampaignStatus.IDLE
    error: str | None = None
    description: str = ""

    @property
    def is_generating(self) -> bool:
        return self.status == CampaignStatus.RUNNING

    @property
    def base(self) -> CampaignItem:
        return self.item(BASE_SLOT)

    def item(self, item_id: str) -> CampaignItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(f"Unknown campaign item: {item_id}")

    def can_start(self, description: str) -> bool:
        """Whether the trigger action is enabled for this input."""
        return not self.is_generating and bool(description.strip())
