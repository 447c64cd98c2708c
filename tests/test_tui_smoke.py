"""Smoke tests for the TUI using Textual's test framework."""

import pytest

from chorder.core import Modifier
from chorder.models import ChorderConfig
from chorder.tui import ChorderApp
from chorder.tui.widgets import SlotGrid, SlotWidget


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUILaunch:
    """Test that the TUI launches and renders the grid."""

    async def test_grid_has_one_widget_per_slot(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            grid = app.query_one(SlotGrid)
            assert len(grid.slot_widgets) == 6
            assert len(app.query(SlotWidget)) == 6

    async def test_initial_page_visible_slots(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            grid = app.query_one(SlotGrid)
            assert grid.visible_slots() == [0, 1, 2, 4]
            assert grid.slot_widgets[0].shortcut_text == "c-a"
            assert grid.slot_widgets[0].description_text == "Echo"
            assert app.sub_title == "main"


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIKeys:
    """Test keypresses routed through the launcher."""

    async def test_switch_page(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            app.launcher.handle_key_event("1", Modifier.SUPER)
            await pilot.pause()

            grid = app.query_one(SlotGrid)
            assert app.launcher.current_page == "second"
            assert app.sub_title == "second"
            assert grid.visible_slots() == [0, 1]

    async def test_unbound_key_keeps_running(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("q")
            await pilot.pause()
            assert app.is_running
            assert spawner.commands == []

    async def test_run_option_spawns_and_exits(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+a")

        assert spawner.commands == [["echo", "hi"]]
        assert app.return_code == 0

    async def test_escape_exits(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner, initial_page="second")

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("escape")

        assert app.return_code == 0
        assert spawner.commands == []

    async def test_ctrl_q_reaches_bound_option(self, spawner):
        config = ChorderConfig(
            max_rows=1,
            max_columns=1,
            options={"main": [{"shortcut": "c-q", "description": "Bound", "run": "bound"}]},
        )
        app = ChorderApp(config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+q")

        assert spawner.commands == [["bound"]]
        assert app.return_code == 0

    async def test_ctrl_q_unbound_keeps_running(self, launcher_config, spawner):
        app = ChorderApp(launcher_config, spawner=spawner)

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("ctrl+q")
            await pilot.pause()
            assert app.is_running
            assert spawner.commands == []
