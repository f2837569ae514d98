import pytest


@pytest.fixture(autouse=True)
def settings_home(tmp_path, monkeypatch):
    """Point the settings file at a per-test directory."""
    home = tmp_path / "passcraft-home"
    monkeypatch.setenv("PASSCRAFT_HOME", str(home))
    return home
