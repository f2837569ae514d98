import json

from passcraft.config import DEFAULTS, config_from_settings, config_path, load_config, save_config
from passcraft.generator import PasswordConfig


def test_missing_file_gives_defaults(settings_home):
    assert config_path() == str(settings_home / "config.json")
    assert load_config() == DEFAULTS
    # loading never creates anything
    assert not settings_home.exists()


def test_save_and_load(settings_home):
    cfg = dict(DEFAULTS, length=20, symbols=False, copies=3)
    save_config(cfg)
    assert (settings_home / "config.json").exists()
    assert load_config() == cfg


def test_partial_file_merges_defaults(settings_home):
    settings_home.mkdir()
    (settings_home / "config.json").write_text(json.dumps({"length": 12, "colour": "red"}), encoding="utf-8")
    cfg = load_config()
    assert cfg["length"] == 12
    assert cfg["uppercase"] is True
    assert "colour" not in cfg


def test_malformed_file_falls_back(settings_home, caplog):
    settings_home.mkdir()
    (settings_home / "config.json").write_text("{not json", encoding="utf-8")
    assert load_config() == DEFAULTS
    assert "ignoring" in caplog.text

    (settings_home / "config.json").write_text("[1, 2]", encoding="utf-8")
    assert load_config() == DEFAULTS


def test_config_from_settings():
    assert config_from_settings(DEFAULTS) == PasswordConfig(length=32)
    cfg = config_from_settings(dict(DEFAULTS, length=10, uppercase=False, symbols=False))
    assert cfg == PasswordConfig(10, False, True, True, False)


def test_invalid_values_fall_back_per_key(settings_home, caplog):
    bad = {
        "length": "long",
        "uppercase": "no",
        "digits": 0,
        "copies": "many",
        "log_level": "LOUD",
        "symbols": False,
    }
    save_config(bad)
    cfg = load_config()
    assert cfg["length"] == DEFAULTS["length"]
    assert cfg["uppercase"] is True
    assert cfg["digits"] is True
    assert cfg["copies"] == DEFAULTS["copies"]
    assert cfg["log_level"] == DEFAULTS["log_level"]
    # valid keys still apply
    assert cfg["symbols"] is False
    assert "copies='many'" in caplog.text


def test_copies_must_be_in_range(settings_home):
    for copies in (0, -3, 101, True, 2.5):
        save_config(dict(DEFAULTS, copies=copies))
        assert load_config()["copies"] == DEFAULTS["copies"]
    save_config(dict(DEFAULTS, copies=100))
    assert load_config()["copies"] == 100
