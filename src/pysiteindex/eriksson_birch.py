"""
Birch site index curve from Eriksson (1997).

The same curve is used by both site index methods, so birch results are
independent of the method chosen for a batch.

    d1 = b1 / k^b2
    r1 = sqrt((h - d1)^2 + 4 * b1 * h / age^b2)
    SI = (h + d1 + r1) / (2 + 4 * b1 * 40^(-b2) / (h - d1 + r1)) + 1.3

where h is top height above breast height (m) and age is breast-height age.
"""
import numpy as np

from .model_base import ParameterizedModel, BREAST_HEIGHT, REFERENCE_AGE
from .species import SpeciesCode

__all__ = [
    'ErikssonBirchModel',
    'eriksson_birch_site_index',
]


class ErikssonBirchModel(ParameterizedModel):
    """Eriksson (1997) height growth curve for birch."""

    EQUATION_KEY = 'ERIKSSON'
    FALLBACK_PARAMETERS = {
        'birch': {'b1': 394.0, 'b2': 1.387, 'k': 7.0},
    }
    DEFAULT_SPECIES = SpeciesCode.BIRCH
    SUPPORTED_SPECIES = (SpeciesCode.BIRCH,)

    def predict(self, age, height_above_bh) -> np.ndarray:
        """Predict birch site index.

        Args:
            age: Breast-height age (years); must be positive for a real result
            height_above_bh: Top height minus 1.3 m

        Returns:
            Site index (m) per element
        """
        age = np.asarray(age, dtype=float)
        h = np.asarray(height_above_bh, dtype=float)
        b1 = self.coefficients['b1']
        b2 = self.coefficients['b2']
        k = self.coefficients['k']

        with np.errstate(all='ignore'):
            d1 = b1 / k ** b2
            r1 = np.sqrt((h - d1) ** 2 + 4.0 * b1 * h / age ** b2)
            return (h + d1 + r1) / (2.0 + 4.0 * b1 * REFERENCE_AGE ** (-b2) / (h - d1 + r1)) + BREAST_HEIGHT


def eriksson_birch_site_index(age: float, top_height: float) -> float:
    """Birch site index for a single stand.

    Args:
        age: Breast-height age (years)
        top_height: Top height (m)

    Returns:
        Site index (m); NaN or inf outside the curve's domain
    """
    return float(ErikssonBirchModel().site_index(age, top_height))
