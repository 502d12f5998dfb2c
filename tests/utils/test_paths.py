"""Tests for the filesystem path helpers."""

from pathlib import Path

from worth_tracker.utils import paths


def test_project_root_is_checkout_with_pyproject():
    root = paths.get_project_root()

    assert (root / "pyproject.toml").is_file()
    assert (root / "worth_tracker").is_dir()


def test_installed_package_uses_working_directory(tmp_path, monkeypatch):
    """An installed copy should not write under site-packages."""
    site_packages = tmp_path / "lib" / "site-packages"
    module_file = site_packages / "worth_tracker" / "utils" / "paths.py"
    module_file.parent.mkdir(parents=True)
    module_file.write_text("")
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.setattr(paths, "__file__", str(module_file))
    monkeypatch.chdir(workdir)

    root = paths.get_project_root()

    assert root == Path.cwd()
    assert site_packages not in (root, *root.parents)
