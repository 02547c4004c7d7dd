"""
Volta Models

Pydantic contracts for the designer engine:
    from volta.models.contracts.layout import LayoutTemplate, LayoutZone, PlacedComponent
    from volta.models.contracts.history import HistoryEntry, TrackedState
    from volta.models.contracts.interaction import InteractionState
    from volta.models.contracts.drop import DropTarget, DropResult
"""
