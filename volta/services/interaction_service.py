"""
Interaction Service

Synchronous setters over a session's InteractionState. Nothing here touches
history: undo/redo never changes selection, clipboard or canvas flags.
"""

import logging

from volta.config import Settings, get_settings
from volta.models.contracts.base import generate_component_id
from volta.models.contracts.interaction import DesignerMode, InteractionState
from volta.models.contracts.layout import PlacedComponent

logger = logging.getLogger(__name__)


class InteractionService:
    """Owns the ephemeral UI state of one designer session."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.state = self._initial_state()

    def _initial_state(self) -> InteractionState:
        return InteractionState(
            zoom=self.settings.default_zoom,
            grid_enabled=self.settings.grid_enabled_default,
            snap_to_grid=self.settings.snap_to_grid_default,
        )

    def set_mode(self, mode: DesignerMode) -> None:
        self.state.mode = mode

    # Selection and hover ids are not checked against the layout; consumers
    # resolve stale ids themselves.
    def select_component(self, component_id: str | None) -> None:
        self.state.selected_component_id = component_id

    def hover_component(self, component_id: str | None) -> None:
        self.state.hovered_component_id = component_id

    def copy_component(self, component: PlacedComponent) -> None:
        """Store a detached copy of a component in the clipboard."""
        self.state.clipboard = component.model_copy(deep=True)

    def paste_component(self) -> PlacedComponent | None:
        """
        Produce a new instance from the clipboard.

        Returns:
            A deep copy of the clipboard entry with a fresh id, or None if
            the clipboard is empty. The clipboard itself is left intact so
            repeated pastes yield distinct instances.
        """
        clipboard = self.state.clipboard
        if clipboard is None:
            return None
        return clipboard.model_copy(deep=True, update={"id": generate_component_id()})

    def clear_clipboard(self) -> None:
        self.state.clipboard = None

    def set_zoom(self, zoom: int | float) -> int:
        """Clamp and store the zoom level. Returns the stored value."""
        clamped = int(round(min(self.settings.zoom_max, max(self.settings.zoom_min, zoom))))
        self.state.zoom = clamped
        return clamped

    def toggle_grid(self) -> bool:
        self.state.grid_enabled = not self.state.grid_enabled
        return self.state.grid_enabled

    def toggle_snap_to_grid(self) -> bool:
        self.state.snap_to_grid = not self.state.snap_to_grid
        return self.state.snap_to_grid

    def set_dirty(self, dirty: bool) -> None:
        self.state.is_dirty = dirty

    def reset(self) -> None:
        """Restore the state a freshly opened session starts with."""
        self.state = self._initial_state()
