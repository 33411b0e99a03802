"""Tests for project root and config directory discovery."""

from pathlib import Path

import pytest

from yearweek.utils.find_paths import ProjectRootFinder, find_config_dir

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def test_finds_root_from_nested_directory(tmp_path):
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'demo'\n")
    nested = tmp_path / "src" / "pkg" / "sub"
    nested.mkdir(parents=True)

    assert ProjectRootFinder().find_path(nested) == tmp_path.resolve()


def test_custom_markers(tmp_path):
    (tmp_path / "marker.txt").write_text("")
    nested = tmp_path / "a"
    nested.mkdir()

    assert ProjectRootFinder(markers=["marker.txt"]).find_path(str(nested)) == tmp_path.resolve()


def test_missing_marker_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ProjectRootFinder(markers=["no-such-marker.cfg"]).find_path(tmp_path)


def test_find_config_dir_of_this_project():
    assert find_config_dir(Path(__file__).parent) == PROJECT_ROOT / "conf"
    assert (find_config_dir(Path(__file__).parent) / "config.yaml").is_file()


def test_find_config_dir_missing(tmp_path):
    (tmp_path / "setup.py").write_text("")
    with pytest.raises(FileNotFoundError):
        find_config_dir(tmp_path)


def test_find_config_dir_custom_name(tmp_path):
    (tmp_path / "pyproject.toml").write_text("")
    (tmp_path / "hydra_conf").mkdir()
    assert find_config_dir(tmp_path, config_dir_name="hydra_conf") == tmp_path.resolve() / "hydra_conf"
