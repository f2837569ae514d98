import pytest

from passcraft.charsets import DIGITS
from passcraft.generator import PasswordConfig, generate
from passcraft.templates import TEMPLATES, UnknownTemplateError, get_template


def test_catalog_contents():
    assert list(TEMPLATES) == ["standard", "pin", "memorable", "strong"]
    assert TEMPLATES["standard"].config == PasswordConfig(16, True, True, True, True)
    assert TEMPLATES["pin"].config == PasswordConfig(8, False, False, True, False)
    assert TEMPLATES["memorable"].config == PasswordConfig(12, True, True, True, False)
    assert TEMPLATES["strong"].config == PasswordConfig(24, True, True, True, True)
    for key, tpl in TEMPLATES.items():
        assert tpl.key == key
        assert tpl.name and tpl.description


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        TEMPLATES["custom"] = TEMPLATES["pin"]


def test_every_template_generates():
    for tpl in TEMPLATES.values():
        assert len(generate(tpl.config)) == tpl.config.length


def test_pin_is_digits_only():
    cfg = get_template("pin").config
    for _ in range(200):
        pw = generate(cfg)
        assert len(pw) == 8
        assert all(c in DIGITS for c in pw)


def test_lookup_ignores_case_and_whitespace():
    assert get_template(" Memorable ") is TEMPLATES["memorable"]


def test_unknown_template():
    with pytest.raises(UnknownTemplateError) as exc:
        get_template("passphrase")
    assert isinstance(exc.value, KeyError)
    assert "passphrase" in str(exc.value)
    assert "standard" in str(exc.value)
