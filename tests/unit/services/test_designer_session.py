"""
Unit tests for DesignerSession.

Tests cover:
- Session lifecycle (open, close)
- Structural edits recorded in history and flagged dirty
- No-op edits leave history and dirty flag alone
- Undo/redo laws at session level
- Interaction state untouched by undo/redo
- Clipboard paste into the layout
- Whole-document replacement and layout switching
"""

import pytest

from volta.core.exceptions import LayoutTemplateNotFoundError, SessionClosedError
from volta.models.contracts.layout import DataSourceConfig
from volta.services.designer_session import DesignerSession
from volta.services.layout_queries import component_count, find_component

from tests.helpers.factories import make_component, make_layout, make_zone, zone_ids


class TestSessionLifecycle:

    def test_open_defaults_to_configured_template(self, settings, registry):
        session = DesignerSession.open(registry=registry, settings=settings)
        assert session.layout.id == "full-width"
        assert session.action_description == "Initial layout"
        assert not session.can_undo
        assert not session.is_dirty

    def test_open_from_template_id(self, settings):
        session = DesignerSession.open(template_id="two-column", settings=settings)
        assert [z.id for z in session.layout.zones] == ["left", "right"]

    def test_open_unknown_template_raises(self, settings):
        with pytest.raises(LayoutTemplateNotFoundError):
            DesignerSession.open(template_id="nope", settings=settings)

    def test_open_with_loaded_layout_copies_it(self, settings):
        layout = make_layout()
        session = DesignerSession.open(layout=layout, settings=settings)
        session.add_component(make_component("c1"))
        assert layout.zones[0].components == []

    def test_closed_session_rejects_edits(self, session):
        session.close()
        assert session.closed
        with pytest.raises(SessionClosedError):
            session.add_component(make_component("c1"))
        with pytest.raises(SessionClosedError):
            session.undo()

    def test_close_drops_history_and_interaction_state(self, session):
        session.add_component(make_component("c1"))
        session.interaction.select_component("c1")
        session.close()
        assert not session.can_undo
        assert session.interaction.state.selected_component_id is None

    def test_sessions_are_independent(self, settings, registry):
        first = DesignerSession(make_layout(), registry=registry, settings=settings)
        second = DesignerSession(make_layout(), registry=registry, settings=settings)
        first.add_component(make_component("c1"))
        first.interaction.set_zoom(150)
        assert component_count(second.layout) == 0
        assert second.interaction.state.zoom == 100
        assert not second.can_undo


class TestStructuralEdits:

    def test_add_undo_redo_scenario(self, session):
        assert session.add_component(make_component("c1", type="text-input", props={}), "main")
        assert zone_ids(session.layout, "main") == ["c1"]

        assert session.undo()
        assert zone_ids(session.layout, "main") == []

        assert session.redo()
        assert zone_ids(session.layout, "main") == ["c1"]
        assert find_component(session.layout, "c1").props == {}

    def test_edits_mark_dirty_and_record_history(self, session):
        session.add_component(make_component("c1"))
        assert session.is_dirty
        assert session.history_descriptions()["past"] == ["Initial layout"]
        assert session.action_description == "Add text-input"

    def test_noop_edits_are_not_recorded(self, session):
        assert not session.add_component(make_component("c1"), "nope")
        assert not session.update_component_props("missing", {"a": 1})
        assert not session.delete_component("missing")
        assert not session.reorder_component("main", 0, 1)
        assert not session.move_component("missing", "main", "main")
        assert not session.can_undo
        assert not session.is_dirty

    def test_update_props_and_data_source(self, session):
        session.add_component(make_component("c1", props={"label": "A"}))
        session.update_component_props("c1", {"required": True})
        session.update_component_data_source("c1", DataSourceConfig(type="api", endpoint="/x"))

        component = find_component(session.layout, "c1")
        assert component.props == {"label": "A", "required": True}
        assert component.data_source.endpoint == "/x"

        session.undo()
        assert find_component(session.layout, "c1").data_source is None

    def test_delete_clears_selection_and_hover(self, session):
        session.add_component(make_component("c1"))
        session.add_component(make_component("c2"))
        session.interaction.select_component("c1")
        session.interaction.hover_component("c1")

        assert session.delete_component("c1")

        assert session.interaction.state.selected_component_id is None
        assert session.interaction.state.hovered_component_id is None
        assert session.action_description == "Delete text-input"

    def test_delete_keeps_unrelated_selection(self, session):
        session.add_component(make_component("c1"))
        session.add_component(make_component("c2"))
        session.interaction.select_component("c2")
        session.delete_component("c1")
        assert session.interaction.state.selected_component_id == "c2"

    def test_delete_selected_component(self, session):
        assert not session.delete_selected_component()
        session.add_component(make_component("c1"))
        session.interaction.select_component("c1")
        assert session.delete_selected_component()
        assert component_count(session.layout) == 0

    def test_reorder_and_move(self, two_zone_session):
        session = two_zone_session
        assert session.reorder_component("left", 0, 2)
        assert zone_ids(session.layout, "left") == ["b", "c", "a"]
        assert session.move_component("a", "left", "right", 0)
        assert zone_ids(session.layout, "right") == ["a", "x"]

    def test_add_component_of_type_selects_new_component(self, session):
        component = session.add_component_of_type("chart", "main")
        assert component.type == "chart"
        assert component.props == {"kind": "bar"}
        assert session.interaction.state.selected_component_id == component.id

    def test_add_component_of_unknown_type(self, session):
        assert session.add_component_of_type("nope") is None
        assert not session.can_undo

    def test_selected_component_resolves_stale_ids_to_none(self, session):
        session.interaction.select_component("ghost")
        assert session.selected_component is None


class TestSessionHistory:

    def test_inverse_law_over_mixed_edits(self, two_zone_session):
        session = two_zone_session
        initial = session.layout.model_copy(deep=True)

        session.add_component(make_component("n1"), "right", 0)
        session.update_component_props("a", {"label": "A"})
        session.reorder_component("left", 0, 2)
        session.move_component("b", "left", "right")
        session.delete_component("x")
        final = session.layout.model_copy(deep=True)

        for _ in range(5):
            assert session.undo()
        assert session.layout == initial
        assert not session.undo()

        for _ in range(5):
            assert session.redo()
        assert session.layout == final
        assert not session.redo()

    def test_new_edit_after_undo_clears_redo(self, session):
        session.add_component(make_component("c1"))
        session.add_component(make_component("c2"))
        session.undo()
        assert session.can_redo

        session.add_component(make_component("c3"))

        assert not session.can_redo
        assert zone_ids(session.layout, "main") == ["c1", "c3"]

    def test_history_is_bounded(self, session):
        for i in range(60):
            session.add_component(make_component(f"c{i}"))
        assert len(session.history.past) == 50

        for _ in range(50):
            session.undo()
        assert not session.can_undo
        assert zone_ids(session.layout, "main") == [f"c{i}" for i in range(10)]

    def test_undo_does_not_touch_interaction_state(self, session):
        session.add_component(make_component("c1"))
        session.interaction.select_component("c1")
        session.interaction.set_zoom(150)
        session.copy_component("c1")

        session.undo()

        state = session.interaction.state
        assert state.selected_component_id == "c1"
        assert state.zoom == 150
        assert state.clipboard.id == "c1"

    def test_live_layout_edits_cannot_rewrite_history(self, session):
        session.add_component(make_component("c1", props={"label": "A"}))
        # Misbehaving caller mutates the live layout in place
        session.layout.zones[0].components[0].props["label"] = "hacked"

        session.undo()
        session.redo()

        assert find_component(session.layout, "c1").props == {"label": "A"}

    def test_tracked_state_is_a_detached_projection(self, session):
        session.add_component(make_component("c1"))
        tracked = session.tracked_state
        assert tracked.action_description == "Add text-input"
        assert tracked.layout == session.layout
        assert tracked.layout is not session.layout

    def test_undo_marks_dirty(self, session):
        session.add_component(make_component("c1"))
        session.mark_saved()
        assert not session.is_dirty
        session.undo()
        assert session.is_dirty

    def test_jump_and_descriptions(self, session):
        for name in ("c1", "c2", "c3"):
            session.add_component(make_component(name))

        assert session.jump_history(-2)
        assert zone_ids(session.layout, "main") == ["c1"]
        descriptions = session.history_descriptions()
        assert descriptions["past"] == ["Initial layout"]
        assert descriptions["present"] == "Add text-input"
        assert len(descriptions["future"]) == 2

        assert not session.jump_history(0)

    def test_clear_history(self, session):
        session.add_component(make_component("c1"))
        session.clear_history()
        assert not session.can_undo
        assert zone_ids(session.layout, "main") == ["c1"]


class TestClipboardEdits:

    def test_copy_unknown_component(self, session):
        assert not session.copy_component("missing")
        assert session.interaction.state.clipboard is None

    def test_paste_inserts_fresh_copy_and_selects_it(self, session):
        session.add_component(make_component("c1", props={"label": "A"}))
        session.interaction.select_component("c1")
        assert session.copy_selected_component()

        pasted = session.paste_component()

        assert pasted.id != "c1"
        assert zone_ids(session.layout, "main") == ["c1", pasted.id]
        assert find_component(session.layout, pasted.id).props == {"label": "A"}
        assert session.interaction.state.selected_component_id == pasted.id
        assert session.action_description == "Paste text-input"

    def test_two_pastes_are_distinct(self, session):
        session.add_component(make_component("c1"))
        session.copy_component("c1")
        first = session.paste_component()
        second = session.paste_component()
        assert first.id != second.id
        assert component_count(session.layout) == 3

    def test_paste_into_zone_at_index(self, two_zone_session):
        session = two_zone_session
        session.copy_component("x")
        pasted = session.paste_component("left", 1)
        assert zone_ids(session.layout, "left") == ["a", pasted.id, "b", "c"]

    def test_paste_with_empty_clipboard(self, session):
        assert session.paste_component() is None
        assert not session.can_undo

    def test_paste_into_unknown_zone_changes_nothing(self, session):
        session.add_component(make_component("c1"))
        session.copy_component("c1")
        session.interaction.select_component("c1")

        assert session.paste_component("nope") is None

        assert component_count(session.layout) == 1
        assert session.interaction.state.selected_component_id == "c1"
        assert session.history_descriptions()["past"] == ["Initial layout"]


class TestWholeDocumentEdits:

    def test_set_layout_records_single_entry_and_stays_clean(self, session):
        loaded = make_layout(id="loaded", zones=[make_zone("main", [make_component("c9")])])

        session.set_layout(loaded, "Load from server")

        assert session.layout.id == "loaded"
        assert session.action_description == "Load from server"
        assert session.history_descriptions()["past"] == ["Initial layout"]
        assert not session.is_dirty

        session.undo()
        assert session.layout.id == "test-layout"

    def test_set_layout_copies_input(self, session):
        loaded = make_layout(id="loaded")
        session.set_layout(loaded)
        loaded.zones[0].components.append(make_component("late"))
        assert component_count(session.layout) == 0

    def test_change_layout_keeps_components(self, two_zone_session):
        session = two_zone_session
        session.change_layout("header-sidebar-main")

        assert [z.id for z in session.layout.zones] == ["header", "sidebar", "main"]
        assert zone_ids(session.layout, "header") == ["a", "b", "c", "x"]
        assert session.action_description == "Change layout to Header + Sidebar + Main"
        assert session.is_dirty

        session.undo()
        assert [z.id for z in session.layout.zones] == ["left", "right"]

    def test_change_layout_unknown_template(self, session):
        with pytest.raises(LayoutTemplateNotFoundError):
            session.change_layout("nope")
        assert not session.can_undo
