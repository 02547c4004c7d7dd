"""
Drop Resolution

Translates a finished drag gesture into a session edit:
- Palette payload            -> add_component_of_type (new component is selected)
- Existing component, same zone  -> reorder_component
- Existing component, other zone -> move_component

A drop that cannot be resolved (no zone under the pointer, unknown zone,
unknown type or component, zone constraints) is rejected and leaves the
document untouched. Rejections are returned as DropResult values, never
raised.
"""

import logging

from volta.models.contracts.drop import (
    ComponentDragPayload,
    DragPayload,
    DropResult,
    DropTarget,
    PaletteDragPayload,
)
from volta.models.contracts.layout import LayoutZone
from volta.services.designer_session import DesignerSession
from volta.services.layout_queries import (
    find_component,
    find_component_zone,
    find_zone,
    index_in_zone,
    zone_accepts,
)

logger = logging.getLogger(__name__)


def _rejected(reason: str, target: DropTarget | None = None, component_id: str | None = None) -> DropResult:
    logger.debug(f"Drop rejected: {reason}")
    return DropResult(
        applied=False,
        component_id=component_id,
        zone_id=target.zone_id if target else None,
        index=target.index if target else None,
        reason=reason,
    )


def resolve_drop(
    session: DesignerSession,
    payload: DragPayload,
    target: DropTarget | None,
) -> DropResult:
    """
    Apply a drop to the session.

    Args:
        session: Open designer session
        payload: What was dragged
        target: Zone and index under the pointer, or None if the pointer was
            not over a zone

    Returns:
        DropResult describing the applied edit, or the rejection reason
    """
    if target is None or target.zone_id is None:
        return _rejected("no drop target", target)

    zone = find_zone(session.layout, target.zone_id)
    if zone is None:
        return _rejected(f"zone '{target.zone_id}' not found", target)

    if isinstance(payload, PaletteDragPayload):
        return _drop_new_component(session, payload, zone, target)
    if isinstance(payload, ComponentDragPayload):
        return _drop_existing_component(session, payload, zone, target)
    return _rejected(f"unsupported payload {type(payload).__name__}", target)


def _drop_new_component(
    session: DesignerSession,
    payload: PaletteDragPayload,
    zone: LayoutZone,
    target: DropTarget,
) -> DropResult:
    if not session.registry.has(payload.component_type):
        return _rejected(f"unknown component type '{payload.component_type}'", target)
    if not zone_accepts(zone, payload.component_type):
        return _rejected(f"zone '{zone.id}' does not accept '{payload.component_type}'", target)

    component = session.add_component_of_type(payload.component_type, zone.id, target.index)
    if component is None:
        return _rejected(f"could not add '{payload.component_type}'", target)

    placed_zone = find_zone(session.layout, zone.id)
    return DropResult(
        applied=True,
        action="add",
        component_id=component.id,
        zone_id=zone.id,
        index=index_in_zone(placed_zone, component.id) if placed_zone else None,
    )


def _drop_existing_component(
    session: DesignerSession,
    payload: ComponentDragPayload,
    zone: LayoutZone,
    target: DropTarget,
) -> DropResult:
    component_id = payload.component_id
    component = find_component(session.layout, component_id)
    source_zone = find_component_zone(session.layout, component_id)
    if component is None or source_zone is None:
        return _rejected(f"component '{component_id}' not found", target, component_id)

    if source_zone.id == zone.id:
        old_index = index_in_zone(zone, component_id)
        last = len(zone.components) - 1
        # An insertion point past the end means "last position" for a reorder
        new_index = last if target.index is None or target.index > last else target.index
        if not session.reorder_component(zone.id, old_index, new_index):
            return _rejected("component position unchanged", target, component_id)
        return DropResult(
            applied=True,
            action="reorder",
            component_id=component_id,
            zone_id=zone.id,
            index=new_index,
        )

    if not zone_accepts(zone, component.type):
        return _rejected(f"zone '{zone.id}' does not accept '{component.type}'", target, component_id)

    if not session.move_component(component_id, source_zone.id, zone.id, target.index):
        return _rejected("move not applied", target, component_id)

    moved_zone = find_zone(session.layout, zone.id)
    return DropResult(
        applied=True,
        action="move",
        component_id=component_id,
        zone_id=zone.id,
        index=index_in_zone(moved_zone, component_id) if moved_zone else None,
    )
