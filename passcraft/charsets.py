"""
passcraft.charsets
The four character classes a password can draw from.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CharacterClass(Enum):
    # member order is the order classes are appended to an alphabet
    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    DIGITS = "digits"
    SYMBOLS = "symbols"


UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

CHARACTER_SETS: Mapping[CharacterClass, str] = MappingProxyType({
    CharacterClass.UPPERCASE: UPPERCASE,
    CharacterClass.LOWERCASE: LOWERCASE,
    CharacterClass.DIGITS: DIGITS,
    CharacterClass.SYMBOLS: SYMBOLS,
})
