"""
passcraft.templates
Named presets. Picking one replaces the whole working configuration.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .generator import PasswordConfig


class UnknownTemplateError(KeyError):
    """Raised when a template key is not in the catalog."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        available = ", ".join(TEMPLATES)
        return f"Unknown template {self.key!r} (available: {available})"


@dataclass(frozen=True)
class PresetTemplate:
    key: str
    name: str
    description: str
    config: PasswordConfig


TEMPLATES: Mapping[str, PresetTemplate] = MappingProxyType({
    "standard": PresetTemplate(
        key="standard",
        name="Standard",
        description="Strong password with mixed-case letters, digits and symbols",
        config=PasswordConfig(length=16),
    ),
    "pin": PresetTemplate(
        key="pin",
        name="PIN",
        description="Digits only",
        config=PasswordConfig(
            length=8,
            use_uppercase=False,
            use_lowercase=False,
            use_digits=True,
            use_symbols=False,
        ),
    ),
    "memorable": PresetTemplate(
        key="memorable",
        name="Memorable",
        description="Letters and digits only",
        config=PasswordConfig(length=12, use_symbols=False),
    ),
    "strong": PresetTemplate(
        key="strong",
        name="Strong",
        description="24 characters drawn from every class",
        config=PasswordConfig(length=24),
    ),
})


def get_template(key: str) -> PresetTemplate:
    normalized = key.strip().lower()
    try:
        return TEMPLATES[normalized]
    except KeyError:
        raise UnknownTemplateError(key) from None
