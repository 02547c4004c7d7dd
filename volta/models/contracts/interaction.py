"""
Interaction state contract.

Ephemeral editor UI state. Not part of any history snapshot.
"""

from typing import Literal

from pydantic import BaseModel, Field

from volta.core.constants import DEFAULT_ZOOM
from volta.models.contracts.layout import PlacedComponent

DesignerMode = Literal["edit", "preview"]


class InteractionState(BaseModel):
    """Selection, hover, clipboard and canvas flags for one session."""

    mode: DesignerMode = Field(default="edit", description="Editor mode")
    selected_component_id: str | None = Field(default=None, description="Selected component")
    hovered_component_id: str | None = Field(default=None, description="Hovered component")
    clipboard: PlacedComponent | None = Field(
        default=None, description="Detached copy of the last copied component"
    )
    is_dirty: bool = Field(default=False, description="Unsaved structural changes exist")
    zoom: int = Field(default=DEFAULT_ZOOM, description="Canvas zoom percentage")
    grid_enabled: bool = Field(default=True, description="Show the canvas grid")
    snap_to_grid: bool = Field(default=True, description="Snap drops to the grid")
