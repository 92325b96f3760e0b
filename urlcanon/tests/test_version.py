import subprocess
from importlib.metadata import PackageNotFoundError

from urlcanon.core import version as version_module


def _missing(_name: str) -> str:
    raise PackageNotFoundError("urlcanon")


def test_version_falls_back_to_git_tag(monkeypatch) -> None:
    monkeypatch.setattr(version_module, "version", _missing)
    monkeypatch.setattr(version_module.subprocess, "check_output", lambda *args, **kwargs: "v1.4.0-3-gabc\n")
    assert version_module.get_urlcanon_version() == "1.4.0-3-gabc"


def test_version_defaults_to_dev_without_git(monkeypatch) -> None:
    def _no_git(*args, **kwargs):
        raise subprocess.CalledProcessError(128, "git")

    monkeypatch.setattr(version_module, "version", _missing)
    monkeypatch.setattr(version_module.subprocess, "check_output", _no_git)
    assert version_module.get_urlcanon_version() == "dev"


def test_installed_metadata_wins(monkeypatch) -> None:
    monkeypatch.setattr(version_module, "version", lambda name: "0.1.0")
    assert version_module.get_urlcanon_version() == "0.1.0"
