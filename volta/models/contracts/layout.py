"""
Layout Definitions

Core types for the zone-based page layout system:
- Placed components and their data source configuration
- Layout zones (named, ordered drop targets)
- Layout templates (the root document of a designer session)

Serialized documents use camelCase keys (dataSource, gridSpan, ...). Dump
with by_alias=True; both spellings are accepted on input.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# -----------------------------------------------------------------------------
# Literal Types
# -----------------------------------------------------------------------------

ZonePosition = Literal["header", "sidebar", "main", "footer"]

LayoutStructure = Literal[
    "full-width",
    "sidebar-left",
    "sidebar-right",
    "two-column",
    "dashboard-grid",
]

DataSourceType = Literal["api", "query", "static", "binding"]

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

QueryOutputFormat = Literal["sql", "json", "mongodb"]


# -----------------------------------------------------------------------------
# Data Source
# -----------------------------------------------------------------------------


class QueryDefinition(BaseModel):
    """Query builder rule group."""

    model_config = ConfigDict(extra="allow")

    combinator: str = Field(default="and", description="Rule combinator (and/or)")
    rules: list[Any] = Field(default_factory=list, description="Query rules")


class BindingSource(BaseModel):
    """Binds a component input to another component's output."""

    model_config = ConfigDict(populate_by_name=True)

    component_id: str = Field(alias="componentId", description="Source component id")
    output_key: str = Field(alias="outputKey", description="Output key on the source component")
    transform: str | None = Field(
        default=None, description="Optional transformation expression"
    )


class DataSourceConfig(BaseModel):
    """Data source configuration for a placed component.

    Opaque to the layout engine: stored and forwarded verbatim to the data
    layer. Unknown keys are kept.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: DataSourceType = Field(description="Type of data source")

    # API
    endpoint: str | None = Field(default=None, description="API endpoint (for 'api' type)")
    method: HttpMethod | None = Field(default=None, description="HTTP method")
    headers: dict[str, str] | None = Field(default=None, description="Request headers")
    body: Any | None = Field(default=None, description="Request body")
    refresh_interval: int | None = Field(
        default=None,
        alias="refreshInterval",
        ge=0,
        description="Auto-refresh interval in milliseconds",
    )

    # Query builder
    query: QueryDefinition | None = Field(default=None, description="Query rules (for 'query' type)")
    table: str | None = Field(default=None, description="Target table (for 'query' type)")
    output_format: QueryOutputFormat | None = Field(
        default=None, alias="outputFormat", description="Query output format"
    )

    # Static
    static_data: Any | None = Field(
        default=None, alias="staticData", description="Static data (for 'static' type)"
    )

    # Binding
    binding_source: BindingSource | None = Field(
        default=None, alias="bindingSource", description="Binding (for 'binding' type)"
    )

    response_path: str | None = Field(
        default=None,
        alias="responsePath",
        description="Path to extract from the response (e.g. 'data.items')",
    )


# -----------------------------------------------------------------------------
# Placed Components
# -----------------------------------------------------------------------------


class ComponentPosition(BaseModel):
    """Free-form canvas position metadata."""

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0


class PlacedComponent(BaseModel):
    """A component instance bound to one zone.

    `id` and `type` are frozen: retyping an instance means deleting it and
    adding a new one.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(frozen=True, min_length=1, description="Unique component identifier")
    type: str = Field(frozen=True, min_length=1, description="Component registry key")
    props: dict[str, Any] = Field(default_factory=dict, description="Component props")
    data_source: DataSourceConfig | None = Field(
        default=None, alias="dataSource", description="Data source forwarded to the data layer"
    )
    grid_span: int | None = Field(
        default=None, alias="gridSpan", ge=1, description="Grid column span"
    )
    position: ComponentPosition | None = Field(
        default=None, description="Canvas position metadata"
    )


# -----------------------------------------------------------------------------
# Zones and Templates
# -----------------------------------------------------------------------------


class ZoneSize(BaseModel):
    """CSS size hints for a zone."""

    model_config = ConfigDict(populate_by_name=True)

    width: str | None = None
    height: str | None = None
    min_width: str | None = Field(default=None, alias="minWidth")
    max_width: str | None = Field(default=None, alias="maxWidth")


class LayoutZone(BaseModel):
    """A named, ordered drop target within a layout template."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1, description="Zone identifier, unique within a template")
    name: str | None = Field(default=None, description="Display name (defaults to id)")
    position: ZonePosition = Field(default="main", description="Zone placement")
    size: ZoneSize | None = Field(default=None, description="Size hints")
    components: list[PlacedComponent] = Field(
        default_factory=list, description="Components in render order"
    )
    allowed_component_types: list[str] | None = Field(
        default=None,
        alias="allowedComponentTypes",
        description="Component types that may be dropped here (None allows all)",
    )
    max_components: int | None = Field(
        default=None,
        alias="maxComponents",
        ge=1,
        description="Maximum number of components the zone accepts",
    )

    @property
    def display_name(self) -> str:
        return self.name or self.id


class LayoutTemplate(BaseModel):
    """Root document of a designer session."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(description="Template identifier")
    name: str = Field(description="Template display name")
    description: str | None = Field(default=None, description="Template description")
    icon: str | None = Field(default=None, description="Icon name (lucide icon)")
    structure: LayoutStructure = Field(default="full-width", description="Layout archetype")
    zones: list[LayoutZone] = Field(min_length=1, description="Zones in render order")
    default_styles: dict[str, str] | None = Field(
        default=None, alias="defaultStyles", description="Default CSS values"
    )

    @field_validator("zones")
    @classmethod
    def check_unique_zone_ids(cls, zones: list[LayoutZone]) -> list[LayoutZone]:
        seen: set[str] = set()
        for zone in zones:
            if zone.id in seen:
                raise ValueError(f"Duplicate zone id '{zone.id}'")
            seen.add(zone.id)
        return zones
