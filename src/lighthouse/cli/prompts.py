"""Interactive artifact description prompt."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable

import typer

from lighthouse.artifacts.models import (
    Artifact,
    ArtifactType,
    Explorer,
    Location,
    Rarity,
)
from lighthouse.config import ExplorerSettings

_LOGGER = logging.getLogger(__name__)

Ask = Callable[[str], str]


def typer_ask(label: str) -> str:
    """Read one line from the terminal; empty input is allowed.

    Args:
        label: Prompt label.

    Returns:
        Raw entered text.
    """
    return typer.prompt(label, default="", show_default=False)


class ArtifactPrompt:
    """Build artifacts from sequential line answers.

    Unrecognized rarity/type text falls back to ``Common``/``Relic`` and
    unparseable numbers become zero; nothing is asked twice.
    """

    def __init__(
        self,
        *,
        ask: Ask = typer_ask,
        explorer: ExplorerSettings | None = None,
    ) -> None:
        """Store input source and owner defaults.

        Args:
            ask: Callable returning the answer for one prompt label.
            explorer: Rank/experience given to newly named owners.
        """
        self._ask = ask
        self._explorer = explorer or ExplorerSettings()

    def build_artifact(self) -> Artifact:
        """Prompt for every artifact field in order.

        Returns:
            Artifact without an assigned id.
        """
        name = self._ask("Name").strip()
        description = self._ask("Description").strip()
        rarity = Rarity.parse(
            self._ask(f"Rarity ({', '.join(member.value for member in Rarity)})")
        )
        kind = ArtifactType.parse(
            self._ask(f"Type ({', '.join(member.value for member in ArtifactType)})")
        )
        coordinates = Location(
            latitude=self._ask_float("Latitude"),
            longitude=self._ask_float("Longitude"),
            depth=self._ask_int("Depth"),
        )
        weight = self._ask_float("Weight")
        value = self._ask_int("Value")
        power = self._ask_float("Power")
        owner_name = self._ask("Owner name (blank for none)").strip()
        owner = (
            Explorer(
                name=owner_name,
                rank=self._explorer.default_rank,
                experience=self._explorer.default_experience,
            )
            if owner_name
            else None
        )
        return Artifact(
            name=name,
            description=description,
            rarity=rarity or Rarity.COMMON,
            type=kind or ArtifactType.RELIC,
            coordinates=coordinates,
            weight=weight,
            value=value,
            power=power,
            owner=owner,
        )

    def _ask_float(self, label: str) -> float:
        raw = self._ask(label).strip()
        try:
            value = float(raw)
        except ValueError:
            _LOGGER.warning("%s: '%s' is not a number; using 0.", label, raw)
            return 0.0
        if not math.isfinite(value):
            _LOGGER.warning("%s: '%s' is not a finite number; using 0.", label, raw)
            return 0.0
        return value

    def _ask_int(self, label: str) -> int:
        raw = self._ask(label).strip()
        try:
            return int(raw)
        except ValueError:
            _LOGGER.warning("%s: '%s' is not an integer; using 0.", label, raw)
            return 0
