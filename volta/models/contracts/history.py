"""
History contracts.

TrackedState is the only part of a session that undo/redo sees. Everything
else (selection, clipboard, zoom) lives in InteractionState and is never
snapshotted.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from volta.models.contracts.layout import LayoutTemplate


class TrackedState(BaseModel):
    """Tracked projection of a designer session."""

    layout: LayoutTemplate = Field(description="Current layout document")
    action_description: str = Field(description="Human-readable description of the last edit")


class HistoryEntry(BaseModel):
    """A single undo/redo snapshot."""

    tracked_state: TrackedState
    description: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
