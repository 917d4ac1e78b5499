"""Artifact models, collection, and persistence public surface."""

from lighthouse.artifacts.collection import (
    ArtifactCollection,
    ReplaceOutcome,
    resolve_rarity,
)
from lighthouse.artifacts.errors import ArtifactError, ArtifactErrorCode
from lighthouse.artifacts.models import (
    Artifact,
    ArtifactType,
    CollectionInfo,
    Explorer,
    Location,
    Rarity,
)
from lighthouse.artifacts.store import (
    CollectionDecodeError,
    CollectionStoreError,
    load_collection,
    read_artifacts,
    recover_corrupt_collection,
    save_collection,
)

__all__ = [
    "Artifact",
    "ArtifactCollection",
    "ArtifactError",
    "ArtifactErrorCode",
    "ArtifactType",
    "CollectionDecodeError",
    "CollectionInfo",
    "CollectionStoreError",
    "Explorer",
    "Location",
    "Rarity",
    "ReplaceOutcome",
    "load_collection",
    "read_artifacts",
    "recover_corrupt_collection",
    "resolve_rarity",
    "save_collection",
]
