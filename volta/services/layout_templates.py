"""
Layout Template Catalog

Predefined page layouts offered when a designer session opens or when the
user switches layout. Catalog entries are never handed out directly; callers
always receive a clone.
"""

from volta.core.exceptions import LayoutTemplateNotFoundError
from volta.models.contracts.layout import LayoutTemplate, LayoutZone, ZoneSize

LAYOUT_TEMPLATES: tuple[LayoutTemplate, ...] = (
    LayoutTemplate(
        id="full-width",
        name="Full Width",
        description="Single column layout spanning full width",
        icon="layout",
        structure="full-width",
        zones=[
            LayoutZone(id="main", name="Main Content", position="main"),
        ],
    ),
    LayoutTemplate(
        id="sidebar-left",
        name="Sidebar Left",
        description="Left sidebar with main content area",
        icon="sidebar",
        structure="sidebar-left",
        zones=[
            LayoutZone(
                id="sidebar",
                name="Sidebar",
                position="sidebar",
                size=ZoneSize(width="280px", min_width="200px", max_width="400px"),
                allowed_component_types=["data-tree", "multi-select"],
            ),
            LayoutZone(id="main", name="Main Content", position="main"),
        ],
    ),
    LayoutTemplate(
        id="sidebar-right",
        name="Sidebar Right",
        description="Main content with right sidebar",
        icon="sidebar-right",
        structure="sidebar-right",
        zones=[
            LayoutZone(id="main", name="Main Content", position="main"),
            LayoutZone(
                id="sidebar",
                name="Sidebar",
                position="sidebar",
                size=ZoneSize(width="320px"),
            ),
        ],
    ),
    LayoutTemplate(
        id="header-sidebar-main",
        name="Header + Sidebar + Main",
        description="Full page layout with header, sidebar and main area",
        icon="layout-dashboard",
        structure="sidebar-left",
        zones=[
            LayoutZone(
                id="header",
                name="Header",
                position="header",
                size=ZoneSize(height="64px"),
                max_components=1,
            ),
            LayoutZone(
                id="sidebar",
                name="Sidebar",
                position="sidebar",
                size=ZoneSize(width="280px"),
            ),
            LayoutZone(id="main", name="Main Content", position="main"),
        ],
    ),
    LayoutTemplate(
        id="two-column",
        name="Two Column",
        description="Equal two-column layout",
        icon="columns",
        structure="two-column",
        zones=[
            LayoutZone(id="left", name="Left Column", position="main", size=ZoneSize(width="50%")),
            LayoutZone(id="right", name="Right Column", position="main", size=ZoneSize(width="50%")),
        ],
    ),
)


def clone_layout_template(template: LayoutTemplate) -> LayoutTemplate:
    """Create an independently owned copy of a layout template."""
    return template.model_copy(deep=True)


def list_layout_templates() -> list[LayoutTemplate]:
    """All catalog templates, cloned."""
    return [clone_layout_template(template) for template in LAYOUT_TEMPLATES]


def get_layout_template(template_id: str) -> LayoutTemplate | None:
    """Get a clone of a catalog template by id, or None."""
    for template in LAYOUT_TEMPLATES:
        if template.id == template_id:
            return clone_layout_template(template)
    return None


def require_layout_template(template_id: str) -> LayoutTemplate:
    """
    Get a clone of a catalog template by id.

    Raises:
        LayoutTemplateNotFoundError: If the id is not in the catalog
    """
    template = get_layout_template(template_id)
    if template is None:
        raise LayoutTemplateNotFoundError(template_id)
    return template
