"""
Layout Queries

Read-only lookups over a LayoutTemplate. All lookups are by id equality;
with duplicate ids the first match (zone order, then component order) wins.
"""

from volta.models.contracts.layout import LayoutTemplate, LayoutZone, PlacedComponent


def find_zone(template: LayoutTemplate, zone_id: str | None) -> LayoutZone | None:
    """Find a zone by id."""
    if zone_id is None:
        return None
    return next((zone for zone in template.zones if zone.id == zone_id), None)


def all_components(template: LayoutTemplate) -> list[PlacedComponent]:
    """All components across all zones, in zone order then render order."""
    return [component for zone in template.zones for component in zone.components]


def component_count(template: LayoutTemplate) -> int:
    return sum(len(zone.components) for zone in template.zones)


def find_component(template: LayoutTemplate, component_id: str | None) -> PlacedComponent | None:
    """Find a component by id across all zones."""
    if component_id is None:
        return None
    for zone in template.zones:
        for component in zone.components:
            if component.id == component_id:
                return component
    return None


def find_component_zone(template: LayoutTemplate, component_id: str | None) -> LayoutZone | None:
    """Find the zone that contains a component."""
    if component_id is None:
        return None
    for zone in template.zones:
        if any(component.id == component_id for component in zone.components):
            return zone
    return None


def index_in_zone(zone: LayoutZone, component_id: str) -> int | None:
    """Position of a component within a zone, or None."""
    for idx, component in enumerate(zone.components):
        if component.id == component_id:
            return idx
    return None


def zone_accepts(zone: LayoutZone, component_type: str, incoming: int = 1) -> bool:
    """
    Check a zone's drop constraints.

    Args:
        zone: Target zone
        component_type: Registry key of the component being dropped
        incoming: Number of components the drop adds to the zone (0 for a
            reorder within the zone)
    """
    if zone.allowed_component_types is not None and component_type not in zone.allowed_component_types:
        return False
    if zone.max_components is not None and len(zone.components) + incoming > zone.max_components:
        return False
    return True
