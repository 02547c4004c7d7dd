"""
Component Registry

Maps a component type key to palette metadata and default props. The
rendering side of the registry is external; the layout engine only needs
enough to construct a new PlacedComponent for a palette drop.
"""

import copy
import logging
from dataclasses import dataclass, field
from typing import Any

from volta.core.exceptions import ComponentRegistrationError
from volta.models.contracts.base import generate_component_id
from volta.models.contracts.layout import DataSourceConfig, PlacedComponent

logger = logging.getLogger(__name__)


@dataclass
class ComponentDefinition:
    """Palette entry for a component type."""

    type: str
    name: str
    icon: str | None = None
    category: str = "General"
    description: str = ""
    default_props: dict[str, Any] = field(default_factory=dict)


class ComponentRegistry:
    """
    Registry of component types available in the palette.

    One registry is injected per designer session; there is no module-level
    instance.
    """

    def __init__(self, definitions: list[ComponentDefinition] | None = None):
        self._definitions: dict[str, ComponentDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: ComponentDefinition, replace: bool = False) -> None:
        """
        Register a component type.

        Raises:
            ComponentRegistrationError: If the type is already registered and
                replace is False
        """
        if definition.type in self._definitions and not replace:
            raise ComponentRegistrationError(
                f"Component type '{definition.type}' is already registered"
            )
        self._definitions[definition.type] = definition
        logger.debug(f"Registered component type '{definition.type}'")

    def unregister(self, component_type: str) -> bool:
        """Remove a component type. Returns False if it was not registered."""
        return self._definitions.pop(component_type, None) is not None

    def has(self, component_type: str) -> bool:
        return component_type in self._definitions

    def get(self, component_type: str) -> ComponentDefinition | None:
        return self._definitions.get(component_type)

    def list_definitions(self, category: str | None = None) -> list[ComponentDefinition]:
        """All definitions sorted by name, optionally filtered by category."""
        definitions = [
            d for d in self._definitions.values()
            if category is None or d.category == category
        ]
        return sorted(definitions, key=lambda d: d.name)

    def create_component(self, component_type: str) -> PlacedComponent | None:
        """
        Build a new component instance of a registered type.

        The instance gets a fresh id, a copy of the default props and a
        static data source. Returns None for unknown types.
        """
        definition = self.get(component_type)
        if definition is None:
            logger.warning(f"Component type '{component_type}' not found in registry")
            return None

        return PlacedComponent(
            id=generate_component_id(),
            type=component_type,
            props=copy.deepcopy(definition.default_props),
            data_source=DataSourceConfig(type="static"),
        )
