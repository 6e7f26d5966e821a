"""
Species code enumeration for type-safe species handling.

This module provides a SpeciesCode enum that inherits from (int, Enum) so
members compare equal to the integer codes used in inventory data
(1=spruce, 2=pine, 3=birch), while providing validation and labels.

Usage:
    from pysiteindex.species import SpeciesCode

    species = SpeciesCode.SPRUCE
    print(int(species))  # 1

    species = SpeciesCode.from_code(3)
    print(species.label)  # "birch"

    if SpeciesCode.is_valid(2):
        print("Valid species code")
"""

from enum import Enum
from typing import Any

import numpy as np

from .exceptions import SpeciesNotFoundError


class SpeciesCode(int, Enum):
    """
    Species codes used by the Norwegian site index curves.

    Each member's value is the integer code found in plot records.
    """

    SPRUCE = 1
    """Norway spruce (Picea abies)."""

    PINE = 2
    """Scots pine (Pinus sylvestris)."""

    BIRCH = 3
    """Birch (Betula pubescens and Betula pendula)."""

    @classmethod
    def from_code(cls, code: Any) -> "SpeciesCode":
        """
        Convert an integer species code to a SpeciesCode enum member.

        Floats with an integral value (e.g. ``1.0``) are accepted.

        Args:
            code: Species code (1, 2 or 3)

        Returns:
            The corresponding SpeciesCode enum member

        Raises:
            SpeciesNotFoundError: If the code is not a supported species

        Example:
            >>> SpeciesCode.from_code(2)
            SpeciesCode.PINE
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, (bool, np.bool_)) or code is None:
            raise SpeciesNotFoundError(code)

        try:
            numeric = float(code)
        except (TypeError, ValueError):
            raise SpeciesNotFoundError(code) from None

        for member in cls:
            if member.value == numeric:
                return member

        raise SpeciesNotFoundError(code)

    @classmethod
    def is_valid(cls, code: Any) -> bool:
        """
        Check if a value is a valid species code.

        Example:
            >>> SpeciesCode.is_valid(1)
            True
            >>> SpeciesCode.is_valid(99)
            False
        """
        try:
            cls.from_code(code)
        except SpeciesNotFoundError:
            return False
        return True

    @classmethod
    def list_all_codes(cls) -> list[int]:
        """Get a sorted list of all valid integer species codes."""
        return sorted(member.value for member in cls)

    @property
    def label(self) -> str:
        """Lower-case common name, used as the key in coefficient files."""
        return self.name.lower()

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"SpeciesCode.{self.name}"


# =============================================================================
# Module-level convenience functions
# =============================================================================

def get_species_code(code: Any) -> SpeciesCode:
    """
    Convert a value to a SpeciesCode enum (convenience function).

    This is an alias for SpeciesCode.from_code().
    """
    return SpeciesCode.from_code(code)


def validate_species_code(code: Any) -> bool:
    """
    Check if a species code is valid (convenience function).

    This is an alias for SpeciesCode.is_valid().
    """
    return SpeciesCode.is_valid(code)


__all__ = [
    "SpeciesCode",
    "get_species_code",
    "validate_species_code",
]
