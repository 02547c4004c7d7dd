"""
Drop Resolution contracts.

A drag session carries a payload naming either a palette component type or
an existing component instance. The hosting surface resolves the pointer to
a DropTarget; the index is passed through verbatim.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

DropAction = Literal["add", "reorder", "move"]


class PaletteDragPayload(BaseModel):
    """A new component dragged from the palette."""

    kind: Literal["palette"] = "palette"
    component_type: str = Field(description="Registry key of the component to create")


class ComponentDragPayload(BaseModel):
    """An existing placed component being relocated."""

    kind: Literal["component"] = "component"
    component_id: str = Field(description="Id of the component being dragged")


DragPayload = Annotated[
    Union[PaletteDragPayload, ComponentDragPayload],
    Field(discriminator="kind"),
]


class DropTarget(BaseModel):
    """Zone and insertion index under the pointer at drop time."""

    zone_id: str | None = Field(default=None, description="Zone under the pointer, if any")
    index: int | None = Field(default=None, description="Insertion index (None appends)")


class DropResult(BaseModel):
    """Outcome of resolving a drop. Rejections leave the document untouched."""

    applied: bool
    action: DropAction | None = None
    component_id: str | None = None
    zone_id: str | None = None
    index: int | None = None
    reason: str | None = None
