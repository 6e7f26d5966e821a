"""
Custom exceptions for pysiteindex.
Provides domain-specific error handling with informative messages.
"""
from typing import Any, Iterable


class SiteIndexError(Exception):
    """Base exception for all pysiteindex errors."""
    pass


class ConfigurationError(SiteIndexError):
    """Raised when there are configuration-related issues."""
    pass


class UnsupportedMethodError(ConfigurationError, ValueError):
    """Raised when a site index method token is not recognized."""
    def __init__(self, method: Any, supported: Iterable[str] = ()):
        self.method = method
        self.supported = list(supported)
        message = f"Unsupported site index method: {method!r}"
        if self.supported:
            message += f". Supported methods: {', '.join(self.supported)}"
        super().__init__(message)


class SpeciesNotFoundError(ConfigurationError, KeyError):
    """Raised when a species code is not one of the supported species."""
    def __init__(self, species_code: Any):
        self.species_code = species_code
        super().__init__(f"Species code {species_code!r} is not supported. "
                         f"Valid codes are 1 (spruce), 2 (pine) and 3 (birch)")

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return self.args[0]


class DataError(SiteIndexError):
    """Raised when there are data-related issues."""
    pass


class CoefficientFileNotFoundError(DataError):
    """Raised when a coefficient file is not found."""
    def __init__(self, file_path: str, file_type: str = "coefficient file"):
        self.file_path = file_path
        self.file_type = file_type
        super().__init__(f"Required {file_type} not found: {file_path}")


class InvalidDataError(DataError, ValueError):
    """Raised when data is malformed or invalid."""
    def __init__(self, data_description: str, reason: str):
        self.data_description = data_description
        self.reason = reason
        super().__init__(f"Invalid {data_description}: {reason}")


class ShapeMismatchError(InvalidDataError):
    """Raised when parallel input sequences differ in length."""
    def __init__(self, lengths: dict):
        self.lengths = dict(lengths)
        detail = ", ".join(f"{name}={size}" for name, size in self.lengths.items())
        super().__init__("input sequences", f"lengths differ ({detail})")


def validate_equal_length(**arrays) -> int:
    """Validate that all named arrays share one length.

    Args:
        **arrays: One-dimensional arrays keyed by parameter name

    Returns:
        The common length

    Raises:
        ShapeMismatchError: If any two lengths differ
    """
    lengths = {name: len(values) for name, values in arrays.items()}
    if len(set(lengths.values())) > 1:
        raise ShapeMismatchError(lengths)
    return next(iter(lengths.values()), 0)
