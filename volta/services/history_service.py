"""
History Service

Bounded undo/redo over the tracked projection of a designer session.

    past:    oldest -> newest
    present: the snapshot matching the live layout
    future:  nearest redo -> farthest redo

Entries are deep copies. Nothing handed in or out of the manager aliases a
stored snapshot, so later edits to a live layout can never rewrite history.
"""

import logging

from volta.core.constants import MAX_HISTORY
from volta.models.contracts.history import HistoryEntry, TrackedState
from volta.models.contracts.layout import LayoutTemplate

logger = logging.getLogger(__name__)


def track_state(layout: LayoutTemplate, action_description: str) -> TrackedState:
    """
    Project session state onto the subset tracked by undo/redo.

    Only the layout and the description of the edit that produced it are
    tracked. Selection, clipboard, zoom and other interaction state are not.
    """
    return TrackedState(
        layout=layout.model_copy(deep=True),
        action_description=action_description,
    )


class HistoryManager:
    """Past/present/future snapshot stack with a fixed depth."""

    def __init__(self, initial: TrackedState, max_history: int = MAX_HISTORY):
        if max_history < 1:
            raise ValueError("max_history must be at least 1")
        self.max_history = max_history
        self._past: list[HistoryEntry] = []
        self._present = self._make_entry(initial)
        self._future: list[HistoryEntry] = []

    @staticmethod
    def _make_entry(state: TrackedState) -> HistoryEntry:
        return HistoryEntry(
            tracked_state=state.model_copy(deep=True),
            description=state.action_description,
        )

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def present(self) -> TrackedState:
        """Deep copy of the current snapshot."""
        return self._present.tracked_state.model_copy(deep=True)

    @property
    def past(self) -> list[HistoryEntry]:
        return [entry.model_copy(deep=True) for entry in self._past]

    @property
    def future(self) -> list[HistoryEntry]:
        return [entry.model_copy(deep=True) for entry in self._future]

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    def past_descriptions(self) -> list[str]:
        return [entry.description for entry in self._past]

    def future_descriptions(self) -> list[str]:
        return [entry.description for entry in self._future]

    @property
    def present_description(self) -> str:
        return self._present.description

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def record(self, state: TrackedState) -> None:
        """
        Record a new snapshot after an edit.

        The previous present moves to past (evicting the oldest entry when
        full) and any pending redo entries are discarded.
        """
        if len(self._past) >= self.max_history:
            evicted = self._past.pop(0)
            logger.debug(f"History full, evicted '{evicted.description}'")
        self._past.append(self._present)
        self._present = self._make_entry(state)
        if self._future:
            logger.debug(f"Discarded {len(self._future)} redo entries")
        self._future.clear()

    def undo(self) -> TrackedState | None:
        """Step back one snapshot. Returns the restored state, or None if past is empty."""
        if not self._past:
            return None
        self._future.insert(0, self._present)
        self._present = self._past.pop()
        return self.present

    def redo(self) -> TrackedState | None:
        """Step forward one snapshot. Returns the restored state, or None if future is empty."""
        if not self._future:
            return None
        self._past.append(self._present)
        self._present = self._future.pop(0)
        return self.present

    def jump(self, delta: int) -> TrackedState | None:
        """
        Move several steps at once.

        Negative delta undoes, positive redoes. Stops at either end. Returns
        the restored state, or None if no step was taken.
        """
        step = self.undo if delta < 0 else self.redo
        restored: TrackedState | None = None
        for _ in range(abs(delta)):
            state = step()
            if state is None:
                break
            restored = state
        return restored

    def clear(self) -> None:
        """Drop past and future, keeping the present snapshot."""
        self._past.clear()
        self._future.clear()
