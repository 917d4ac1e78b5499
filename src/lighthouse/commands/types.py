"""Shared command-domain types."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict

from lighthouse.artifacts.models import Artifact
from lighthouse.commands.parser import CommandCall


class CommandStatus(StrEnum):
    """Normalized command execution status."""

    OK = "ok"
    ERROR = "error"


class CommandResult(BaseModel):
    """Deterministic command execution result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: CommandStatus
    code: str
    message: str
    data: dict[str, Any] | None = None

    @classmethod
    def ok(
        cls,
        message: str,
        *,
        code: str = "ok",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct a successful command result.

        Args:
            message: User-facing output payload.
            code: Stable machine-readable success code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Successful command result.
        """
        return cls(status=CommandStatus.OK, code=code, message=message, data=data)

    @classmethod
    def error(
        cls,
        message: str,
        *,
        code: str = "error",
        data: dict[str, Any] | None = None,
    ) -> CommandResult:
        """Construct an error command result.

        Args:
            message: User-facing error payload.
            code: Stable machine-readable error code.
            data: Optional structured payload for downstream consumers.

        Returns:
            Error command result.
        """
        return cls(status=CommandStatus.ERROR, code=code, message=message, data=data)


class CommandHandler(Protocol):
    """Protocol implemented by deterministic command handlers."""

    def execute(self, call: CommandCall) -> CommandResult:
        """Execute one parsed command call.

        Args:
            call: Normalized command call.
        """


class ArtifactSource(Protocol):
    """Supplies new artifact records, typically by prompting the user."""

    def build_artifact(self) -> Artifact:
        """Return a freshly described artifact without an assigned id."""


def artifact_rows(artifacts: tuple[Artifact, ...]) -> list[dict[str, Any]]:
    """Serialize artifacts for result payloads.

    Args:
        artifacts: Artifacts in display order.

    Returns:
        JSON-compatible artifact mappings.
    """
    return [artifact.model_dump(mode="json") for artifact in artifacts]
