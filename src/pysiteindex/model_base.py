"""
Base class for parameterized site index models.

Provides common functionality for loading species-specific coefficients
from the coefficient file with caching and fallback support.

Usage:
    class ErikssonBirchModel(ParameterizedModel):
        EQUATION_KEY = 'ERIKSSON'
        FALLBACK_PARAMETERS = {
            'birch': {'b1': 394.0, 'b2': 1.387, 'k': 7.0}
        }
        DEFAULT_SPECIES = SpeciesCode.BIRCH
"""
from abc import ABC, abstractmethod
from typing import Dict, Any

import numpy as np

from .config_loader import DEFAULT_COEFFICIENT_FILE, get_config_loader
from .exceptions import CoefficientFileNotFoundError, ConfigurationError
from .species import SpeciesCode

# Breast height (m) and the reference age (years) of all supported curves
BREAST_HEIGHT = 1.3
REFERENCE_AGE = 40.0


class ParameterizedModel(ABC):
    """Base class for site index models with species-specific coefficients.

    Subclasses must define:
        EQUATION_KEY: str - Top-level key of the equation set in the coefficient file
        FALLBACK_PARAMETERS: dict - Fallback coefficients by species label
        DEFAULT_SPECIES: SpeciesCode - Species used when none is given

    Attributes:
        species: The species this model instance predicts for
        coefficients: The loaded coefficients for the species
    """

    COEFFICIENT_FILE: str = DEFAULT_COEFFICIENT_FILE
    EQUATION_KEY: str = None
    FALLBACK_PARAMETERS: Dict[str, Dict[str, Any]] = {}
    DEFAULT_SPECIES: SpeciesCode = SpeciesCode.SPRUCE
    SUPPORTED_SPECIES: tuple = tuple(SpeciesCode)

    def __init__(self, species=None):
        """Initialize the model with species-specific parameters.

        Args:
            species: SpeciesCode or integer code. Defaults to DEFAULT_SPECIES.

        Raises:
            SpeciesNotFoundError: If the code is not a known species
            ConfigurationError: If the model does not cover the species
        """
        if species is None:
            species = self.DEFAULT_SPECIES
        self.species = SpeciesCode.from_code(species)
        if self.species not in self.SUPPORTED_SPECIES:
            raise ConfigurationError(
                f"{self.__class__.__name__} does not support species '{self.species}'"
            )
        self.coefficients: Dict[str, Any] = {}
        self._load_parameters()

    def _load_parameters(self) -> None:
        """Load species coefficients, falling back to FALLBACK_PARAMETERS.

        Keys present in the coefficient file override the fallback values,
        so a partial file still yields a complete parameter set.
        """
        if self.EQUATION_KEY is None:
            raise NotImplementedError(
                f"{self.__class__.__name__} must define EQUATION_KEY class attribute"
            )

        coefficients = dict(self.FALLBACK_PARAMETERS.get(self.species.label, {}))
        try:
            coefficients.update(
                get_config_loader().get_species_coefficients(
                    self.EQUATION_KEY, self.species.label, self.COEFFICIENT_FILE
                )
            )
        except CoefficientFileNotFoundError:
            pass
        self.coefficients = coefficients

    def get_species_coefficients(self) -> Dict[str, Any]:
        """Get a copy of the coefficients for this species."""
        return self.coefficients.copy()

    def get_coefficient(self, key: str, default: Any = None) -> Any:
        """Get a specific coefficient value.

        Args:
            key: Coefficient key to retrieve
            default: Default value if key not found
        """
        return self.coefficients.get(key, default)

    @abstractmethod
    def predict(self, age, height_above_bh) -> np.ndarray:
        """Predict site index (m) from breast-height age and height above breast height.

        Implementations evaluate elementwise and must not raise on
        out-of-domain rows; such rows yield NaN or inf.
        """

    def site_index(self, age, top_height) -> np.ndarray:
        """Predict site index from breast-height age and total top height (m)."""
        top_height = np.asarray(top_height, dtype=float)
        return self.predict(age, top_height - BREAST_HEIGHT)

    def __repr__(self) -> str:
        """Return string representation of the model."""
        return f"{self.__class__.__name__}(species='{self.species}')"
