import pytest

from gridpath.cli import main
from gridpath.config import Settings
from gridpath.core.errors import InvalidInput
from gridpath.core.maps import MAP_FILES


def test_defaults():
    s = Settings()
    assert (s.width, s.height, s.seed, s.wall_chance, s.step_budget) == (30, 15, 4, 25, 9999)
    assert s.frontier == "heap"


def test_from_env_overrides():
    s = Settings.from_env({"GRIDPATH_WIDTH": "12", "GRIDPATH_FRONTIER": "Linear", "GRIDPATH_LOG_LEVEL": "debug"})
    assert s.width == 12
    assert s.frontier == "linear"
    assert s.log_level == "DEBUG"
    assert s.height == 15


def test_from_env_rejects_bad_values():
    with pytest.raises(InvalidInput):
        Settings.from_env({"GRIDPATH_SEED": "four"})
    with pytest.raises(InvalidInput):
        Settings.from_env({"GRIDPATH_FRONTIER": "bucket"})


def test_merged_ignores_none():
    s = Settings().merged(seed=None, step_budget=10)
    assert s.seed == 4 and s.step_budget == 10


def test_cli_prints_path_on_open_maze(capsys):
    assert main(["--width", "8", "--height", "5", "--wall-chance", "0"]) == 0
    out = capsys.readouterr().out
    assert out.count("X") == 2 * (2 * 8 + 2 * 3)  # border, printed twice
    assert "." in out


def test_cli_exit_codes_for_maps(capsys):
    assert main(["--map", str(MAP_FILES["01_gap_wall"])]) == 0
    assert main(["--map", str(MAP_FILES["02_sealed_wall"]), "--frontier", "linear"]) == 1
    assert main(["--map", str(MAP_FILES["01_gap_wall"]), "--budget", "1"]) == 1


def test_cli_invalid_input(capsys, tmp_path):
    assert main(["--budget", "0"]) == 2
    assert main(["--width", "2"]) == 2
    assert main(["--map", str(tmp_path / "missing.json")]) == 2
    assert main(["--log-level", "chatty"]) == 2


def test_cli_env_settings(monkeypatch, capsys):
    monkeypatch.setenv("GRIDPATH_WALL_CHANCE", "0")
    monkeypatch.setenv("GRIDPATH_WIDTH", "6")
    monkeypatch.setenv("GRIDPATH_HEIGHT", "4")
    assert main([]) == 0
    monkeypatch.setenv("GRIDPATH_FRONTIER", "bucket")
    assert main([]) == 2
