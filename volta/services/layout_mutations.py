"""
Layout Mutations

Pure structural edits over a LayoutTemplate:
- Add, delete components
- Update props (shallow merge) and data source (replace)
- Reorder within a zone, move across zones

Every function clones its input and edits the clone, so the returned
template shares no mutable structure with the input or with any history
snapshot. When an edit does not apply (unknown zone or component id, index
out of range) the input template itself is returned; callers detect a no-op
with an identity check.
"""

import logging
from typing import Any

from volta.models.contracts.layout import (
    DataSourceConfig,
    LayoutTemplate,
    PlacedComponent,
)
from volta.services.layout_queries import all_components, index_in_zone

logger = logging.getLogger(__name__)


def _clone(template: LayoutTemplate) -> LayoutTemplate:
    return template.model_copy(deep=True)


def _zone_position(template: LayoutTemplate, zone_id: str) -> int | None:
    for idx, zone in enumerate(template.zones):
        if zone.id == zone_id:
            return idx
    return None


def _locate(template: LayoutTemplate, component_id: str) -> tuple[int, int] | None:
    """(zone position, component position) of the first match."""
    for zone_idx, zone in enumerate(template.zones):
        comp_idx = index_in_zone(zone, component_id)
        if comp_idx is not None:
            return zone_idx, comp_idx
    return None


def _clamp_insert_index(index: int | None, length: int) -> int:
    if index is None:
        return length
    return max(0, min(index, length))


# =============================================================================
# Insert / Delete
# =============================================================================


def add_component(
    template: LayoutTemplate,
    component: PlacedComponent,
    zone_id: str | None = None,
    index: int | None = None,
) -> LayoutTemplate:
    """
    Insert a component into a zone.

    Args:
        template: Current layout
        component: Component to insert (a deep copy is stored)
        zone_id: Target zone, defaults to the first zone
        index: Insertion position, appended when None; clamped into range

    Returns:
        New template, or the input template if the zone does not exist
    """
    target_id = zone_id if zone_id is not None else template.zones[0].id
    zone_idx = _zone_position(template, target_id)
    if zone_idx is None:
        logger.debug(f"add_component: zone '{target_id}' not found, ignoring")
        return template

    updated = _clone(template)
    components = updated.zones[zone_idx].components
    components.insert(_clamp_insert_index(index, len(components)), component.model_copy(deep=True))
    return updated


def delete_component(template: LayoutTemplate, component_id: str) -> LayoutTemplate:
    """Remove the first component with a matching id from any zone."""
    location = _locate(template, component_id)
    if location is None:
        logger.debug(f"delete_component: component '{component_id}' not found, ignoring")
        return template

    zone_idx, comp_idx = location
    updated = _clone(template)
    del updated.zones[zone_idx].components[comp_idx]
    return updated


# =============================================================================
# Property Edits
# =============================================================================


def update_component_props(
    template: LayoutTemplate,
    component_id: str,
    partial_props: dict[str, Any],
) -> LayoutTemplate:
    """Shallow-merge partial_props into a component's props."""
    location = _locate(template, component_id)
    if location is None:
        logger.debug(f"update_component_props: component '{component_id}' not found, ignoring")
        return template

    zone_idx, comp_idx = location
    updated = _clone(template)
    component = updated.zones[zone_idx].components[comp_idx]
    component.props = {**component.props, **partial_props}
    return updated


def update_component_data_source(
    template: LayoutTemplate,
    component_id: str,
    data_source: DataSourceConfig | None,
) -> LayoutTemplate:
    """Replace a component's data source wholesale (None clears it)."""
    location = _locate(template, component_id)
    if location is None:
        logger.debug(f"update_component_data_source: component '{component_id}' not found, ignoring")
        return template

    zone_idx, comp_idx = location
    updated = _clone(template)
    updated.zones[zone_idx].components[comp_idx].data_source = (
        data_source.model_copy(deep=True) if data_source is not None else None
    )
    return updated


# =============================================================================
# Reorder / Move
# =============================================================================


def reorder_component(
    template: LayoutTemplate,
    zone_id: str,
    old_index: int,
    new_index: int,
) -> LayoutTemplate:
    """
    Move a component to a new position within its zone.

    Both indices must address existing positions in the zone; otherwise, or
    when they are equal, the input template is returned.
    """
    zone_idx = _zone_position(template, zone_id)
    if zone_idx is None:
        logger.debug(f"reorder_component: zone '{zone_id}' not found, ignoring")
        return template

    size = len(template.zones[zone_idx].components)
    if not (0 <= old_index < size and 0 <= new_index < size):
        logger.debug(
            f"reorder_component: indices {old_index}->{new_index} out of range "
            f"for zone '{zone_id}' (size={size}), ignoring"
        )
        return template
    if old_index == new_index:
        return template

    updated = _clone(template)
    components = updated.zones[zone_idx].components
    moved = components.pop(old_index)
    components.insert(new_index, moved)
    return updated


def move_component(
    template: LayoutTemplate,
    component_id: str,
    source_zone_id: str,
    target_zone_id: str,
    new_index: int | None = None,
) -> LayoutTemplate:
    """
    Move a component from one zone to another.

    1. Locate the component in the source zone
    2. Remove it
    3. Insert into the target zone at new_index (appended when None)

    Returns the input template if either zone is unknown or the component is
    not in the source zone.
    """
    source_idx = _zone_position(template, source_zone_id)
    target_idx = _zone_position(template, target_zone_id)
    if source_idx is None or target_idx is None:
        logger.debug(
            f"move_component: zone not found (source='{source_zone_id}', "
            f"target='{target_zone_id}'), ignoring"
        )
        return template

    comp_idx = index_in_zone(template.zones[source_idx], component_id)
    if comp_idx is None:
        logger.debug(
            f"move_component: component '{component_id}' not in zone '{source_zone_id}', ignoring"
        )
        return template

    updated = _clone(template)
    moved = updated.zones[source_idx].components.pop(comp_idx)
    target = updated.zones[target_idx].components
    target.insert(_clamp_insert_index(new_index, len(target)), moved)
    return updated


# =============================================================================
# Whole-layout Edits
# =============================================================================


def replace_zones(template: LayoutTemplate, new_template: LayoutTemplate) -> LayoutTemplate:
    """
    Switch to another layout archetype, keeping every component.

    All components of the current layout are carried, in order, into the
    first zone of new_template. Components already present in new_template
    are dropped.
    """
    carried = [component.model_copy(deep=True) for component in all_components(template)]
    updated = _clone(new_template)
    for zone in updated.zones:
        zone.components = []
    updated.zones[0].components = carried
    return updated
