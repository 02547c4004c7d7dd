"""
Designer Session

Context object for one open document. Wires together:
- the live LayoutTemplate
- the layout mutation functions
- a HistoryManager over the tracked projection
- an InteractionService for selection, clipboard and canvas flags
- the ComponentRegistry used to build palette components

Sessions are constructed explicitly (DesignerSession.open) and dropped with
close(); nothing is shared between sessions.
"""

import logging
from typing import Any

from volta.config import Settings, get_settings
from volta.core.constants import INITIAL_ACTION_DESCRIPTION
from volta.core.exceptions import SessionClosedError
from volta.models.contracts.history import TrackedState
from volta.models.contracts.layout import DataSourceConfig, LayoutTemplate, PlacedComponent
from volta.services import layout_mutations
from volta.services.component_registry import ComponentRegistry
from volta.services.history_service import HistoryManager, track_state
from volta.services.interaction_service import InteractionService
from volta.services.layout_queries import find_component
from volta.services.layout_templates import require_layout_template

logger = logging.getLogger(__name__)


class DesignerSession:
    """Editing session for a single layout document."""

    def __init__(
        self,
        layout: LayoutTemplate,
        registry: ComponentRegistry | None = None,
        settings: Settings | None = None,
        description: str = INITIAL_ACTION_DESCRIPTION,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or ComponentRegistry()
        self._layout = layout.model_copy(deep=True)
        self._action_description = description
        self.history = HistoryManager(
            track_state(self._layout, description),
            max_history=self.settings.max_history,
        )
        self.interaction = InteractionService(self.settings)
        self._closed = False

    @classmethod
    def open(
        cls,
        layout: LayoutTemplate | None = None,
        template_id: str | None = None,
        registry: ComponentRegistry | None = None,
        settings: Settings | None = None,
    ) -> "DesignerSession":
        """
        Open a session on a loaded document or a catalog template.

        Args:
            layout: Loaded document; takes precedence over template_id
            template_id: Catalog template to start from, defaults to
                Settings.default_layout_template

        Raises:
            LayoutTemplateNotFoundError: If the template id is not in the catalog
        """
        settings = settings or get_settings()
        if layout is None:
            layout = require_layout_template(template_id or settings.default_layout_template)
        session = cls(layout, registry=registry, settings=settings)
        logger.info(f"Opened designer session for layout '{layout.id}'")
        return session

    def close(self) -> None:
        """End the session and drop its history and interaction state."""
        if self._closed:
            return
        self.history.clear()
        self.interaction.reset()
        self._closed = True
        logger.info(f"Closed designer session for layout '{self._layout.id}'")

    # -------------------------------------------------------------------------
    # State access
    # -------------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def layout(self) -> LayoutTemplate:
        """The live layout. Treat as read-only; edit through session methods."""
        return self._layout

    @property
    def action_description(self) -> str:
        return self._action_description

    @property
    def tracked_state(self) -> TrackedState:
        return track_state(self._layout, self._action_description)

    @property
    def is_dirty(self) -> bool:
        return self.interaction.state.is_dirty

    @property
    def selected_component(self) -> PlacedComponent | None:
        """The selected component, or None if nothing is selected or the id went stale."""
        return find_component(self._layout, self.interaction.state.selected_component_id)

    def _ensure_open(self) -> None:
        if self._closed:
            raise SessionClosedError()

    def _commit(self, updated: LayoutTemplate, description: str, mark_dirty: bool = True) -> bool:
        """Adopt a mutation result and record it. Returns False for a no-op."""
        if updated is self._layout:
            return False
        self._layout = updated
        self._action_description = description
        self.history.record(track_state(updated, description))
        if mark_dirty:
            self.interaction.set_dirty(True)
        logger.info(f"Layout '{updated.id}': {description}")
        return True

    def _restore(self, state: TrackedState | None) -> bool:
        if state is None:
            return False
        self._layout = state.layout
        self._action_description = state.action_description
        self.interaction.set_dirty(True)
        return True

    # -------------------------------------------------------------------------
    # Structural edits
    # -------------------------------------------------------------------------

    def add_component(
        self,
        component: PlacedComponent,
        zone_id: str | None = None,
        index: int | None = None,
    ) -> bool:
        """Insert a component. Returns False if the zone does not exist."""
        self._ensure_open()
        updated = layout_mutations.add_component(self._layout, component, zone_id, index)
        return self._commit(updated, f"Add {component.type}")

    def add_component_of_type(
        self,
        component_type: str,
        zone_id: str | None = None,
        index: int | None = None,
    ) -> PlacedComponent | None:
        """
        Create a component from the registry, insert it and select it.

        Returns the new component, or None if the type is unknown or the zone
        does not exist.
        """
        self._ensure_open()
        component = self.registry.create_component(component_type)
        if component is None:
            return None
        if not self.add_component(component, zone_id, index):
            return None
        self.interaction.select_component(component.id)
        return component

    def update_component_props(self, component_id: str, props: dict[str, Any]) -> bool:
        self._ensure_open()
        updated = layout_mutations.update_component_props(self._layout, component_id, props)
        return self._commit(updated, f"Update props of {component_id}")

    def update_component_data_source(
        self,
        component_id: str,
        data_source: DataSourceConfig | None,
    ) -> bool:
        self._ensure_open()
        updated = layout_mutations.update_component_data_source(
            self._layout, component_id, data_source
        )
        return self._commit(updated, f"Update data source of {component_id}")

    def delete_component(self, component_id: str) -> bool:
        """Delete a component and clear any selection or hover pointing at it."""
        self._ensure_open()
        component = find_component(self._layout, component_id)
        updated = layout_mutations.delete_component(self._layout, component_id)
        if not self._commit(updated, f"Delete {component.type if component else component_id}"):
            return False

        state = self.interaction.state
        if state.selected_component_id == component_id:
            self.interaction.select_component(None)
        if state.hovered_component_id == component_id:
            self.interaction.hover_component(None)
        return True

    def delete_selected_component(self) -> bool:
        selected_id = self.interaction.state.selected_component_id
        if selected_id is None:
            return False
        return self.delete_component(selected_id)

    def reorder_component(self, zone_id: str, old_index: int, new_index: int) -> bool:
        self._ensure_open()
        updated = layout_mutations.reorder_component(self._layout, zone_id, old_index, new_index)
        return self._commit(updated, f"Reorder {zone_id}")

    def move_component(
        self,
        component_id: str,
        source_zone_id: str,
        target_zone_id: str,
        new_index: int | None = None,
    ) -> bool:
        self._ensure_open()
        updated = layout_mutations.move_component(
            self._layout, component_id, source_zone_id, target_zone_id, new_index
        )
        return self._commit(updated, f"Move {component_id} to {target_zone_id}")

    # -------------------------------------------------------------------------
    # Clipboard
    # -------------------------------------------------------------------------

    def copy_component(self, component_id: str) -> bool:
        """Copy a component to the clipboard. Returns False for unknown ids."""
        self._ensure_open()
        component = find_component(self._layout, component_id)
        if component is None:
            logger.debug(f"copy_component: component '{component_id}' not found, ignoring")
            return False
        self.interaction.copy_component(component)
        return True

    def copy_selected_component(self) -> bool:
        selected_id = self.interaction.state.selected_component_id
        if selected_id is None:
            return False
        return self.copy_component(selected_id)

    def paste_component(
        self,
        zone_id: str | None = None,
        index: int | None = None,
    ) -> PlacedComponent | None:
        """
        Insert a fresh copy of the clipboard component and select it.

        Returns the pasted component, or None if the clipboard is empty or the
        zone does not exist.
        """
        self._ensure_open()
        pasted = self.interaction.paste_component()
        if pasted is None:
            return None
        updated = layout_mutations.add_component(self._layout, pasted, zone_id, index)
        if not self._commit(updated, f"Paste {pasted.type}"):
            return None
        self.interaction.select_component(pasted.id)
        return pasted

    # -------------------------------------------------------------------------
    # Whole-document edits
    # -------------------------------------------------------------------------

    def set_layout(self, layout: LayoutTemplate, description: str = "Load layout") -> None:
        """
        Replace the whole document, e.g. after loading from the backend.

        Records exactly one history entry. Does not mark the session dirty.
        """
        self._ensure_open()
        replacement = layout.model_copy(deep=True)
        self._commit(replacement, description, mark_dirty=False)

    def change_layout(self, template_id: str) -> None:
        """
        Switch to another catalog template, keeping every component.

        Raises:
            LayoutTemplateNotFoundError: If the template id is not in the catalog
        """
        self._ensure_open()
        template = require_layout_template(template_id)
        updated = layout_mutations.replace_zones(self._layout, template)
        self._commit(updated, f"Change layout to {template.name}")

    def mark_saved(self) -> None:
        """Clear the dirty flag after the persistence layer saved the layout."""
        self.interaction.set_dirty(False)

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def undo(self) -> bool:
        self._ensure_open()
        return self._restore(self.history.undo())

    def redo(self) -> bool:
        self._ensure_open()
        return self._restore(self.history.redo())

    def jump_history(self, delta: int) -> bool:
        """Undo (negative) or redo (positive) several steps at once."""
        self._ensure_open()
        return self._restore(self.history.jump(delta))

    def clear_history(self) -> None:
        self.history.clear()

    def history_descriptions(self) -> dict[str, Any]:
        """Descriptions for a history panel: past (oldest first), present, future (next first)."""
        return {
            "past": self.history.past_descriptions(),
            "present": self.history.present_description,
            "future": self.history.future_descriptions(),
        }
