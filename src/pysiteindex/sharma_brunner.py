"""
Sharma-Brunner site index curves for Norway spruce and Scots pine.

Sharma, R. P., Brunner, A., Eid, T. & Øyen, B.-H. (2011). Modelling dominant
height growth from national forest inventory individual tree data with short
time series and large age errors. Forest Ecology and Management, 262(12),
2162-2175.

Generalized algebraic difference form with species parameters (b1, b2, b3):

    R  = 0.5 * (h - b1 + sqrt((h - b1)^2 + 4 * b2 * h * age^(-b3)))
    SI = (b1 + R) / (1 + (b2 / R) * 40^(-b3)) + 1.3
"""
import numpy as np

from .model_base import ParameterizedModel, BREAST_HEIGHT, REFERENCE_AGE
from .species import SpeciesCode

__all__ = [
    'SharmaBrunnerModel',
    'sharma_brunner_site_index',
]


class SharmaBrunnerModel(ParameterizedModel):
    """Sharma-Brunner GADA curve for spruce or pine."""

    EQUATION_KEY = 'SHARMA-BRUNNER'
    FALLBACK_PARAMETERS = {
        'spruce': {'b1': 18.9206, 'b2': 5175.18, 'b3': 1.1576},
        'pine': {'b1': 12.8361, 'b2': 3263.99, 'b3': 1.1758},
    }
    DEFAULT_SPECIES = SpeciesCode.SPRUCE
    SUPPORTED_SPECIES = (SpeciesCode.SPRUCE, SpeciesCode.PINE)

    def predict(self, age, height_above_bh) -> np.ndarray:
        """Predict site index.

        Args:
            age: Breast-height age (years)
            height_above_bh: Top height minus 1.3 m

        Returns:
            Site index (m) per element
        """
        age = np.asarray(age, dtype=float)
        h = np.asarray(height_above_bh, dtype=float)
        b1 = self.coefficients['b1']
        b2 = self.coefficients['b2']
        b3 = self.coefficients['b3']

        with np.errstate(all='ignore'):
            r = 0.5 * (h - b1 + np.sqrt((h - b1) ** 2 + 4.0 * b2 * h * age ** (-b3)))
            return (b1 + r) / (1.0 + (b2 / r) * REFERENCE_AGE ** (-b3)) + BREAST_HEIGHT


def sharma_brunner_site_index(age: float, top_height: float, species=SpeciesCode.SPRUCE) -> float:
    """Sharma-Brunner site index for a single spruce or pine stand.

    Args:
        age: Breast-height age (years)
        top_height: Top height (m)
        species: SpeciesCode.SPRUCE or SpeciesCode.PINE (or 1/2)

    Returns:
        Site index (m)
    """
    return float(SharmaBrunnerModel(species).site_index(age, top_height))
