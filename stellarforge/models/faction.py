"""Faction data model."""

from dataclasses import dataclass, field

CONTESTED_FACTION_ID = "faction-contested"
RESOURCE_KINDS = ("credits", "minerals", "energy", "food")


@dataclass
class Faction:
    """A political power holding one or more planets of a system.

    Every populated system also lists the contested faction, which stands
    for planets nobody controls.
    """

    id: str  # "faction-<planet id>" or CONTESTED_FACTION_ID
    name: str
    description: str
    leader: str
    homeworld_id: str | None = None  # Planet id; None for the contested faction
    influence: int = 0  # 0-99
    goals: list[str] = field(default_factory=list)
    resources: dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        """Validate faction data after initialization."""
        if not self.id:
            raise ValueError("id cannot be empty")
        if not 0 <= self.influence < 100:
            raise ValueError(f"Invalid influence: {self.influence} (must be 0-99)")
        for kind, amount in self.resources.items():
            if kind not in RESOURCE_KINDS:
                raise ValueError(f"Invalid resource: {kind} (must be one of {', '.join(RESOURCE_KINDS)})")
            if amount < 0:
                raise ValueError(f"Invalid {kind}: {amount} (must be >= 0)")

    @property
    def is_contested(self) -> bool:
        return self.id == CONTESTED_FACTION_ID
