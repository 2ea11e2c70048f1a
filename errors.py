# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every fatal machine, configuration or input error."""


class FormatError(EnigmaError):
    """Malformed alphabet, cycle syntax or numeric field."""


class RangeError(EnigmaError, IndexError):
    """Index outside ``[0, size)``."""


class SymbolLookupError(EnigmaError, LookupError):
    """Symbol not present in the alphabet it was looked up in."""


class ConfigError(EnigmaError):
    """Inconsistent machine description or rotor assignment."""


class SettingError(EnigmaError):
    """Bad setting line: wrong lengths, repeated rotors, missing setting."""


__all__ = [
    "EnigmaError",
    "FormatError",
    "RangeError",
    "SymbolLookupError",
    "ConfigError",
    "SettingError",
]
