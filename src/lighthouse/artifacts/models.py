"""Artifact record models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field


class _CaseInsensitiveEnum(StrEnum):
    """String enum that resolves member values case-insensitively."""

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if not isinstance(value, str):
            return None
        needle = value.strip().casefold()
        for member in cls:
            if member.value.casefold() == needle:
                return member
        return None

    @classmethod
    def parse(cls, text: str | None) -> Self | None:
        """Parse free text into a member.

        Args:
            text: Raw user text.

        Returns:
            Matching member, or ``None`` when text names no member.
        """
        if text is None:
            return None
        try:
            return cls(text)
        except ValueError:
            return None


class Rarity(_CaseInsensitiveEnum):
    """Closed set of artifact rarities."""

    COMMON = "Common"
    RARE = "Rare"
    EPIC = "Epic"
    LEGENDARY = "Legendary"


class ArtifactType(_CaseInsensitiveEnum):
    """Closed set of artifact kinds."""

    RELIC = "Relic"
    TOOL = "Tool"
    MAP = "Map"
    GEM = "Gem"


class Location(BaseModel):
    """Where an artifact was found."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    latitude: float = 0.0
    longitude: float = 0.0
    depth: int = 0

    def describe(self) -> str:
        """Return short human-readable coordinates."""
        return f"({self.latitude:.2f}, {self.longitude:.2f}, depth: {self.depth}m)"


class Explorer(BaseModel):
    """Owner of an artifact."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    rank: str = "Novice"
    experience: int = 0

    def describe(self) -> str:
        return f"{self.name} ({self.rank})"


class Artifact(BaseModel):
    """One catalog record.

    ``id`` is zero until the collection assigns one on insert.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    id: int = Field(default=0, ge=0)
    name: str = ""
    description: str = ""
    rarity: Rarity = Rarity.COMMON
    type: ArtifactType = ArtifactType.RELIC
    coordinates: Location = Location()
    weight: float = 0.0
    value: int = 0
    power: float = 0.0
    owner: Explorer | None = None

    def describe(self) -> str:
        """Return one-line summary used by list views."""
        line = (
            f"[{self.id}] {self.name} | {self.rarity.value}, {self.type.value}, "
            f"weight: {self.weight}, power: {self.power}, value: {self.value} | "
            f"{self.coordinates.describe()}"
        )
        if self.owner is not None:
            line += f" | owner: {self.owner.describe()}"
        return line


class CollectionInfo(BaseModel):
    """Summary metadata for a collection."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    container: str
    initialized_at: datetime
    count: int
    next_id: int
