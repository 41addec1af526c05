from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math


class Colour:
    RED = "#DF4661"
    ORANGE = "#DB6B30"
    YELLOW = "#FED141"
    GREEN = "#008C95"
    BLUE = "#00A3E0"
    SILVER = "#BABABA"
    PINK = "#AF1685"
    PURPLE = "#2E1A47"


@dataclass(frozen=True)
class TierStyle:
    colour: str
    mention: str


class SeverityTier(Enum):
    CRITICAL = TierStyle(colour=Colour.RED, mention="@channel")
    HIGH = TierStyle(colour=Colour.ORANGE, mention="@channel")
    MEDIUM = TierStyle(colour=Colour.YELLOW, mention="@here")
    LOW = TierStyle(colour=Colour.BLUE, mention="")
    UNKNOWN = TierStyle(colour=Colour.SILVER, mention="")

    @property
    def colour(self) -> str:
        return self.value.colour

    @property
    def mention(self) -> str:
        return self.value.mention


# Lower bound inclusive, upper bound exclusive, checked in order.
TIER_BOUNDS = (
    (9.0, 10.0, SeverityTier.CRITICAL),
    (7.0, 9.0, SeverityTier.HIGH),
    (4.0, 7.0, SeverityTier.MEDIUM),
    (1.0, 4.0, SeverityTier.LOW),
)


def classify(severity: float) -> SeverityTier:
    if math.isnan(severity):
        return SeverityTier.UNKNOWN
    for lower, upper, tier in TIER_BOUNDS:
        if lower <= severity < upper:
            return tier
    return SeverityTier.UNKNOWN
