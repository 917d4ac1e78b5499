"""Deterministic artifact error contracts."""

from __future__ import annotations

from enum import StrEnum


class ArtifactErrorCode(StrEnum):
    """Stable collection error codes."""

    NOT_FOUND = "artifact_not_found"
    INVALID_RARITY = "artifact_invalid_rarity"


class ArtifactError(RuntimeError):
    """Collection failure with stable deterministic code."""

    def __init__(
        self,
        code: ArtifactErrorCode,
        message: str,
        *,
        data: dict[str, object] | None = None,
    ) -> None:
        """Create collection failure.

        Args:
            code: Stable artifact error code.
            message: Human-readable error message.
            data: Optional structured payload for diagnostics.
        """
        super().__init__(message)
        self.code = code
        self.data = data or {}
