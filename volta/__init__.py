"""
Volta Designer Engine

Layout state engine for the Volta page and dashboard designer: zone-based
layout documents, pure structural edits, bounded undo/redo and clipboard.

Usage:
    from volta import DesignerSession, ComponentRegistry, ComponentDefinition
    from volta import DropTarget, PaletteDragPayload, resolve_drop

Example:
    registry = ComponentRegistry([
        ComponentDefinition(type="text-input", name="Text Input", default_props={"label": ""}),
    ])
    session = DesignerSession.open(template_id="sidebar-right", registry=registry)

    # Drop a palette item into the main zone
    result = resolve_drop(
        session,
        PaletteDragPayload(component_type="text-input"),
        DropTarget(zone_id="main", index=0),
    )

    session.update_component_props(result.component_id, {"label": "Name"})
    session.undo()
"""

from volta.core.exceptions import (
    ComponentRegistrationError,
    LayoutTemplateNotFoundError,
    SessionClosedError,
    VoltaError,
)
from volta.models.contracts.drop import (
    ComponentDragPayload,
    DropResult,
    DropTarget,
    PaletteDragPayload,
)
from volta.models.contracts.history import HistoryEntry, TrackedState
from volta.models.contracts.interaction import InteractionState
from volta.models.contracts.layout import (
    DataSourceConfig,
    LayoutTemplate,
    LayoutZone,
    PlacedComponent,
)
from volta.services.component_registry import ComponentDefinition, ComponentRegistry
from volta.services.designer_session import DesignerSession
from volta.services.drop_resolution import resolve_drop
from volta.services.history_service import HistoryManager, track_state
from volta.services.layout_serializer import (
    deserialize_layout,
    layout_from_json,
    layout_to_json,
    serialize_layout,
)
from volta.services.layout_templates import get_layout_template, list_layout_templates

__all__ = [
    # Session
    "DesignerSession",
    "resolve_drop",
    # Registry
    "ComponentDefinition",
    "ComponentRegistry",
    # History
    "HistoryManager",
    "HistoryEntry",
    "TrackedState",
    "track_state",
    # Models
    "DataSourceConfig",
    "LayoutTemplate",
    "LayoutZone",
    "PlacedComponent",
    "InteractionState",
    "ComponentDragPayload",
    "PaletteDragPayload",
    "DropTarget",
    "DropResult",
    # Templates and serialization
    "get_layout_template",
    "list_layout_templates",
    "serialize_layout",
    "deserialize_layout",
    "layout_to_json",
    "layout_from_json",
    # Errors
    "VoltaError",
    "ComponentRegistrationError",
    "LayoutTemplateNotFoundError",
    "SessionClosedError",
]
