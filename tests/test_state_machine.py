"""Tests for the page state machine."""

from unittest.mock import Mock

import pytest

from chorder.core import PageStateMachine
from chorder.models import ChorderConfig
from chorder.protocols import PageEvent, PageObserver, SlotRenderer


class TestPageStateMachine:
    """Test page tracking and rendering."""

    @pytest.mark.unit
    def test_initial_page_is_main(self, launcher_config):
        machine = PageStateMachine(launcher_config)
        assert machine.current_page == "main"

    @pytest.mark.unit
    def test_layout(self, launcher_config, renderer):
        machine = PageStateMachine(launcher_config)
        machine.attach_renderer(renderer)

        machine.layout()

        rows, cols, geometry = renderer.layout
        assert (rows, cols) == (2, 3)
        assert geometry.window_width == launcher_config.get_window_width()

    @pytest.mark.unit
    def test_render_shows_only_displayable_records(self, launcher_config, renderer):
        machine = PageStateMachine(launcher_config)
        machine.attach_renderer(renderer)

        machine.render()

        # Every slot was touched, slot 3 lacks a description, slot 5 is empty
        assert sorted(renderer.slots) == [0, 1, 2, 3, 4, 5]
        assert renderer.visible() == {
            0: ("c-a", "Echo"),
            1: ("m-1", "Second page"),
            2: ("b", "Backup"),
            4: ("n", "Nothing"),
        }

    @pytest.mark.unit
    def test_render_hides_before_showing(self, launcher_config):
        renderer = Mock(spec=SlotRenderer)
        machine = PageStateMachine(launcher_config)
        machine.attach_renderer(renderer)

        machine.render()

        calls = renderer.set_slot.call_args_list
        hidden = [c for c in calls if c.args[1] is False]
        shown = [c for c in calls if c.args[1] is True]
        assert len(hidden) == launcher_config.capacity
        assert calls.index(shown[0]) > calls.index(hidden[-1])

    @pytest.mark.unit
    def test_switch_rerenders_and_notifies(self, launcher_config, renderer):
        observer = Mock(spec=PageObserver)
        machine = PageStateMachine(launcher_config)
        machine.attach_renderer(renderer)
        machine.render()
        machine.register_observer(observer)

        machine.switch_to("second")

        assert machine.current_page == "second"
        assert renderer.pages == ["second"]
        assert renderer.visible() == {0: ("m-1", "Back"), 1: ("z", "Zsh script")}
        observer.on_page_event.assert_any_call(PageEvent.PAGE_CHANGED, "second")

    @pytest.mark.unit
    def test_switch_to_unknown_page_renders_empty(self, launcher_config, renderer):
        machine = PageStateMachine(launcher_config)
        machine.attach_renderer(renderer)
        machine.render()

        machine.switch_to("does-not-exist")

        assert machine.current_page == "does-not-exist"
        assert renderer.visible() == {}

    @pytest.mark.unit
    def test_renderer_failure_does_not_break_others(self, launcher_config, renderer):
        bad = Mock(spec=SlotRenderer)
        bad.set_slot.side_effect = RuntimeError("broken widget")
        machine = PageStateMachine(launcher_config)
        machine.attach_renderer(bad)
        machine.attach_renderer(renderer)

        machine.render()

        assert len(renderer.visible()) == 4

    @pytest.mark.unit
    def test_unregister_observer(self):
        observer = Mock(spec=PageObserver)
        machine = PageStateMachine(ChorderConfig())
        machine.register_observer(observer)
        machine.unregister_observer(observer)

        machine.switch_to("other")

        observer.on_page_event.assert_not_called()
