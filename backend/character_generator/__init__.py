"""
Embedded character generator module.

Provides a callable API for random character generation and a minimal CLI for manual use.
"""

from .generator import (  # noqa: F401
    CHARACTER_CLASSES,
    PRIMARY_STATS,
    STAT_TYPES,
    GeneratedCharacter,
    generate_character,
    generate_characters,
)
