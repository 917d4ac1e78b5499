"""Collection persistence and reload helpers."""

from __future__ import annotations

import json
import logging
import time
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from lighthouse.artifacts.collection import ArtifactCollection
from lighthouse.artifacts.models import Artifact

_LOGGER = logging.getLogger(__name__)
_ARTIFACT_LIST = TypeAdapter(list[Artifact])


class CollectionStoreError(RuntimeError):
    """Base persistence error for collection store operations."""


class CollectionDecodeError(CollectionStoreError):
    """Raised when persisted payload cannot be decoded/validated."""


def save_collection(
    collection: ArtifactCollection, path: Path, *, indent: int = 2
) -> None:
    """Persist the full collection, replacing any previous file.

    Args:
        collection: Collection to persist.
        path: Target file path.
        indent: JSON indentation width.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = _ARTIFACT_LIST.dump_json(list(collection.artifacts), indent=indent)
    temp_path = path.with_name(f"{path.name}.tmp")
    temp_path.write_bytes(payload)
    temp_path.replace(path)
    _LOGGER.debug("Saved %d artifacts to %s", len(collection), path)


def read_artifacts(path: Path) -> tuple[Artifact, ...]:
    """Read persisted artifacts from disk.

    Args:
        path: Collection file path.

    Returns:
        Artifacts in persisted order.

    Raises:
        CollectionDecodeError: If JSON decode or payload validation fails.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        decoded = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CollectionDecodeError(f"Invalid collection JSON: {exc}") from exc
    if not isinstance(decoded, list):
        raise CollectionDecodeError("Invalid collection payload: expected JSON array.")
    try:
        artifacts = _ARTIFACT_LIST.validate_python(decoded)
    except ValidationError as exc:
        raise CollectionDecodeError(f"Invalid collection payload: {exc}") from exc
    ids = [artifact.id for artifact in artifacts]
    if len(set(ids)) != len(ids):
        raise CollectionDecodeError(
            "Invalid collection payload: duplicate artifact identifiers."
        )
    return tuple(artifacts)


def load_collection(path: Path) -> ArtifactCollection:
    """Load collection from disk, starting empty when unavailable.

    Decode failures move the unreadable file aside so a later save cannot
    overwrite it.

    Args:
        path: Collection file path.

    Returns:
        Loaded collection, or an empty one if the file is missing or invalid.
    """
    try:
        artifacts = read_artifacts(path)
    except FileNotFoundError:
        _LOGGER.debug("No collection file at %s; starting empty", path)
        return ArtifactCollection()
    except CollectionDecodeError as exc:
        backup = recover_corrupt_collection(path)
        _LOGGER.warning(
            "Collection file %s was invalid (%s); starting empty. Backup: %s",
            path,
            exc,
            backup,
        )
        return ArtifactCollection()
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.warning(
            "Collection file %s could not be read (%s); starting empty.", path, exc
        )
        return ArtifactCollection()
    _LOGGER.debug("Loaded %d artifacts from %s", len(artifacts), path)
    return ArtifactCollection(artifacts)


def recover_corrupt_collection(path: Path) -> Path | None:
    """Move unreadable collection aside and return backup path.

    Args:
        path: Collection file path.

    Returns:
        Backup path when source exists, else None.
    """
    if not path.exists():
        return None
    timestamp = int(time.time())
    backup = path.with_name(f"{path.name}.corrupt-{timestamp}")
    path.replace(backup)
    return backup
