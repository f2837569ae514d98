"""
passcraft
Random password generation, strength estimation and named presets.
"""

from .charsets import CharacterClass, CHARACTER_SETS
from .generator import (
    PasswordConfig,
    InvalidConfigError,
    MIN_LENGTH,
    MAX_LENGTH,
    build_alphabet,
    generate,
    validate_config,
)
from .evaluator import StrengthResult, LABELS, estimate
from .templates import PresetTemplate, TEMPLATES, UnknownTemplateError, get_template

__version__ = "0.1.0"

__all__ = [
    "CharacterClass",
    "CHARACTER_SETS",
    "PasswordConfig",
    "InvalidConfigError",
    "MIN_LENGTH",
    "MAX_LENGTH",
    "build_alphabet",
    "generate",
    "validate_config",
    "StrengthResult",
    "LABELS",
    "estimate",
    "PresetTemplate",
    "TEMPLATES",
    "UnknownTemplateError",
    "get_template",
]
