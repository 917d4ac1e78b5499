"""Result code groupings used by CLI rendering policy."""

from __future__ import annotations

HIDE_DATA_CODES = frozenset(
    {
        "help_listed",
        "collection_info",
        "collection_empty",
        "artifacts_listed",
        "artifact_inserted",
        "artifact_removed",
        "collection_cleared",
        "collection_saved",
        "artifact_replaced",
        "artifact_not_replaced",
        "artifacts_filtered",
        "artifacts_grouped",
        "session_exit",
    }
)

NOTICE_CODES = frozenset(
    {
        "artifact_not_replaced",
    }
)
