import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from gridpath.app.viewer import Viewer  # noqa: E402
from gridpath.config import Settings  # noqa: E402
from gridpath.core.maps import MAP_FILES, load_map  # noqa: E402


@pytest.fixture
def viewer():
    v = Viewer(load_map(MAP_FILES["01_gap_wall"]), Settings(step_budget=100))
    yield v
    pygame.quit()


def test_steps_until_done_and_shows_path(viewer):
    for _ in range(60):
        viewer._do_step()
        if viewer.state != "Paused":
            break
    assert viewer.state == "Done"
    assert len(viewer.path) == 9
    assert viewer._last_metrics["total_cost"] == 8
    viewer._draw()


def test_switch_map_and_reset(viewer):
    viewer._switch_map("02_sealed_wall")
    assert viewer.selected_map_key == "02_sealed_wall"
    for _ in range(60):
        viewer._do_step()
    assert viewer.state == "No path"
    viewer._reset()
    assert viewer.state == "Idle"
    assert viewer.open_set == {(0, 0)}
    assert not viewer.closed_set and not viewer.path


def test_new_maze_bumps_seed(viewer):
    viewer._new_maze()
    assert viewer.seed == 5
    assert viewer.grid.width == 30
    viewer._draw()


def test_rejected_grid_keeps_current_map(viewer):
    from gridpath.core.errors import InvalidInput
    from gridpath.core.types import Grid

    walled_start = Grid.from_cells([[1, 0], [0, 0]], start=(0, 0), goal=(1, 1))
    with pytest.raises(InvalidInput):
        viewer._load_grid(walled_start, "bad")
    assert viewer.selected_map_key == "maze"
    assert viewer.grid.width == 5
    assert viewer.algo.grid is viewer.grid
    viewer._do_step()
    assert viewer.closed_set == {(0, 0)}
    viewer._draw()


def test_panel_buttons_light_selected_map(viewer):
    lit = [b.label for b in viewer._buttons if b.lit]
    assert lit == ["New random maze"]
    viewer._switch_map("03_corridors")
    lit = [b.label for b in viewer._buttons if b.lit]
    assert lit == ["Map 3: Corridors"]
    viewer._toggle_run()
    assert viewer._buttons[0].lit
