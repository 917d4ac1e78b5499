"""In-memory artifact collection manager."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import datetime

from pydantic import BaseModel, ConfigDict

from lighthouse.artifacts.errors import ArtifactError, ArtifactErrorCode
from lighthouse.artifacts.models import Artifact, ArtifactType, CollectionInfo, Rarity

CONTAINER_KIND = "list"


def resolve_rarity(rarity: Rarity | str) -> Rarity:
    """Resolve a rarity member from a member or case-insensitive name.

    Args:
        rarity: Rarity member or rarity name.

    Returns:
        Matching rarity member.

    Raises:
        ArtifactError: If ``rarity`` names no known rarity.
    """
    resolved = rarity if isinstance(rarity, Rarity) else Rarity.parse(rarity)
    if resolved is None:
        raise ArtifactError(
            ArtifactErrorCode.INVALID_RARITY,
            f"Error: invalid rarity '{rarity}'. "
            f"Use {'|'.join(member.value for member in Rarity)}.",
            data={"rarity": str(rarity)},
        )
    return resolved


class ReplaceOutcome(BaseModel):
    """Result of one conditional replace attempt."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    replaced: bool
    previous: Artifact
    current: Artifact


class ArtifactCollection:
    """Ordered artifact collection with monotonically increasing identifiers."""

    def __init__(
        self,
        artifacts: Iterable[Artifact] = (),
        *,
        next_id: int | None = None,
    ) -> None:
        """Build collection from already-identified artifacts.

        Args:
            artifacts: Artifacts in display order, keeping their ids.
            next_id: Optional counter override; defaults to max id + 1.

        Raises:
            ValueError: If identifiers repeat or ``next_id`` would reuse one.
        """
        self._artifacts: list[Artifact] = list(artifacts)
        ids = [artifact.id for artifact in self._artifacts]
        if len(set(ids)) != len(ids):
            raise ValueError("artifact identifiers must be unique.")
        floor = max(ids, default=0) + 1
        if next_id is not None and next_id < floor:
            raise ValueError(f"next_id must be >= {floor}, got {next_id}.")
        self._next_id = next_id if next_id is not None else floor
        self._initialized_at = datetime.now()

    def __len__(self) -> int:
        return len(self._artifacts)

    def __iter__(self) -> Iterator[Artifact]:
        return iter(tuple(self._artifacts))

    @property
    def artifacts(self) -> tuple[Artifact, ...]:
        """Snapshot of artifacts in insertion order."""
        return tuple(self._artifacts)

    @property
    def next_id(self) -> int:
        """Identifier the next insert will receive."""
        return self._next_id

    def info(self) -> CollectionInfo:
        """Return container kind, initialization time, and size."""
        return CollectionInfo(
            container=CONTAINER_KIND,
            initialized_at=self._initialized_at,
            count=len(self._artifacts),
            next_id=self._next_id,
        )

    def get(self, artifact_id: int) -> Artifact | None:
        """Return artifact with matching id, if any."""
        index = self._index_of(artifact_id)
        return None if index is None else self._artifacts[index]

    def insert(self, artifact: Artifact) -> Artifact:
        """Assign the next identifier and append.

        Args:
            artifact: Candidate record; its current id is ignored.

        Returns:
            Stored artifact carrying its assigned id.
        """
        stored = artifact.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self._artifacts.append(stored)
        return stored

    def remove_by_id(self, artifact_id: int) -> Artifact:
        """Remove one artifact by id.

        Args:
            artifact_id: Identifier to remove.

        Returns:
            Removed artifact.

        Raises:
            ArtifactError: If no artifact has this id.
        """
        index = self._require_index(artifact_id)
        return self._artifacts.pop(index)

    def clear(self) -> int:
        """Drop every artifact; the id counter keeps its value.

        Returns:
            Number of removed artifacts.
        """
        removed = len(self._artifacts)
        self._artifacts.clear()
        return removed

    def replace_if_lower(self, artifact_id: int, candidate: Artifact) -> ReplaceOutcome:
        """Replace artifact in place when candidate value is strictly lower.

        Args:
            artifact_id: Identifier of the artifact to replace.
            candidate: Replacement fields; takes over ``artifact_id``.

        Returns:
            Outcome describing whether replacement happened.

        Raises:
            ArtifactError: If no artifact has this id.
        """
        index = self._require_index(artifact_id)
        previous = self._artifacts[index]
        if candidate.value >= previous.value:
            return ReplaceOutcome(replaced=False, previous=previous, current=previous)
        current = candidate.model_copy(update={"id": artifact_id})
        self._artifacts[index] = current
        return ReplaceOutcome(replaced=True, previous=previous, current=current)

    def filter_by_rarity(self, rarity: Rarity | str) -> tuple[Artifact, ...]:
        """Return artifacts of one rarity in collection order.

        Args:
            rarity: Rarity member or case-insensitive rarity name.

        Returns:
            Matching artifacts.

        Raises:
            ArtifactError: If ``rarity`` names no known rarity.
        """
        resolved = resolve_rarity(rarity)
        return tuple(item for item in self._artifacts if item.rarity == resolved)

    def group_by_type(self) -> dict[ArtifactType, tuple[Artifact, ...]]:
        """Partition artifacts by type in first-seen group order."""
        groups: dict[ArtifactType, list[Artifact]] = {}
        for artifact in self._artifacts:
            groups.setdefault(artifact.type, []).append(artifact)
        return {kind: tuple(members) for kind, members in groups.items()}

    def _index_of(self, artifact_id: int) -> int | None:
        for index, artifact in enumerate(self._artifacts):
            if artifact.id == artifact_id:
                return index
        return None

    def _require_index(self, artifact_id: int) -> int:
        index = self._index_of(artifact_id)
        if index is None:
            raise ArtifactError(
                ArtifactErrorCode.NOT_FOUND,
                f"Error: artifact {artifact_id} not found.",
                data={"id": artifact_id},
            )
        return index
