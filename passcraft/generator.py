"""
passcraft.generator
Password generator backed by the OS CSPRNG (Python's secrets module).
"""

import logging
import secrets
from dataclasses import dataclass
from typing import List

from .charsets import CharacterClass, CHARACTER_SETS

logger = logging.getLogger(__name__)

MIN_LENGTH = 8
MAX_LENGTH = 128

# width of each random draw, matching a Uint32Array fill
_DRAW_BITS = 32


class InvalidConfigError(ValueError):
    """Raised when a PasswordConfig cannot be used to generate a password."""

    LENGTH_OUT_OF_RANGE = "length_out_of_range"
    NO_CHARACTER_CLASS = "no_character_class"

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class PasswordConfig:
    length: int = 16
    use_uppercase: bool = True
    use_lowercase: bool = True
    use_digits: bool = True
    use_symbols: bool = True

    def enabled_classes(self) -> List[CharacterClass]:
        flags = {
            CharacterClass.UPPERCASE: self.use_uppercase,
            CharacterClass.LOWERCASE: self.use_lowercase,
            CharacterClass.DIGITS: self.use_digits,
            CharacterClass.SYMBOLS: self.use_symbols,
        }
        return [cls for cls in CharacterClass if flags[cls]]


def validate_config(config: PasswordConfig) -> None:
    # an empty selection is reported whatever the length is
    if not config.enabled_classes():
        raise InvalidConfigError(
            "At least one character class must be selected",
            InvalidConfigError.NO_CHARACTER_CLASS,
        )
    length = config.length
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfigError(
            f"Password length must be an integer between {MIN_LENGTH}-{MAX_LENGTH}",
            InvalidConfigError.LENGTH_OUT_OF_RANGE,
        )
    if length < MIN_LENGTH or length > MAX_LENGTH:
        raise InvalidConfigError(
            f"Password length must be between {MIN_LENGTH}-{MAX_LENGTH}, got {length}",
            InvalidConfigError.LENGTH_OUT_OF_RANGE,
        )


def build_alphabet(config: PasswordConfig) -> str:
    """
    Concatenate the character sets of the enabled classes, in class order.
    """
    return "".join(CHARACTER_SETS[cls] for cls in config.enabled_classes())


def generate(config: PasswordConfig) -> str:
    """
    Generate a password of exactly config.length characters.

    Each character is alphabet[r % len(alphabet)] for an independent 32-bit
    draw r. The modulo leaves a bias below 2**-25 per character for the
    alphabet sizes used here; rejection sampling would remove it.
    """
    validate_config(config)
    alphabet = build_alphabet(config)
    size = len(alphabet)

    draws = [secrets.randbits(_DRAW_BITS) for _ in range(config.length)]
    password = "".join(alphabet[r % size] for r in draws)

    logger.debug("generated password: length=%d alphabet_size=%d", config.length, size)
    return password
