"""
Site index calculation for mixed-species batches.

Every row carries its own species code while the equation set (method) is
chosen once per call. All three species curves of the chosen method are
evaluated over the whole batch and merged by species code, so each row's
result depends only on that row's inputs.

Rows without a site index are NaN in the output:
- species code other than 1 (spruce), 2 (pine) or 3 (birch)
- numeric domain failures such as age <= 0, fractional powers of a
  negative base or a zero denominator

SiteIndexCalculator.evaluate() additionally reports which of the two
cases applies to each row.
"""
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from typing import Any, Optional

import numpy as np
import pandas as pd

from .eriksson_birch import ErikssonBirchModel
from .exceptions import InvalidDataError, validate_equal_length
from .logging_config import get_logger, log_missing_rows
from .methods import SiteIndexMethod, MethodLike
from .model_base import ParameterizedModel, BREAST_HEIGHT
from .sharma_brunner import SharmaBrunnerModel
from .species import SpeciesCode
from .tveite_braastad import TveiteSpruceModel, BraastadPineModel

__all__ = [
    'RowStatus',
    'SiteIndexResult',
    'SiteIndexCalculator',
    'create_site_index_model',
    'clear_model_cache',
    'compute_site_index',
    'site_index_from_frame',
]

logger = get_logger(__name__)

# Model class per (method, species); birch is method-invariant
_MODEL_CLASSES = {
    SiteIndexMethod.SHARMA_BRUNNER: {
        SpeciesCode.SPRUCE: SharmaBrunnerModel,
        SpeciesCode.PINE: SharmaBrunnerModel,
        SpeciesCode.BIRCH: ErikssonBirchModel,
    },
    SiteIndexMethod.TVEITE_BRAASTAD: {
        SpeciesCode.SPRUCE: TveiteSpruceModel,
        SpeciesCode.PINE: BraastadPineModel,
        SpeciesCode.BIRCH: ErikssonBirchModel,
    },
}


class RowStatus(IntEnum):
    """Outcome of the site index calculation for one row."""

    OK = 0
    UNKNOWN_SPECIES = 1
    DOMAIN_ERROR = 2


@dataclass(frozen=True)
class SiteIndexResult:
    """Site index values with per-row status.

    Attributes:
        values: Site index (m) per row, NaN where missing
        status: RowStatus code per row
        method: Method the batch was computed with
    """

    values: np.ndarray
    status: np.ndarray
    method: SiteIndexMethod

    def __len__(self) -> int:
        return len(self.values)

    @property
    def missing(self) -> np.ndarray:
        """Boolean mask of rows without a site index."""
        return self.status != RowStatus.OK

    def count(self, status: RowStatus) -> int:
        """Number of rows with the given status."""
        return int(np.count_nonzero(self.status == status))

    def to_series(self, index=None, name: str = 'site_index') -> pd.Series:
        """Return the values as a pandas Series."""
        return pd.Series(self.values, index=index, name=name)


@lru_cache(maxsize=None)
def _cached_model(species: SpeciesCode, method: SiteIndexMethod) -> ParameterizedModel:
    return _MODEL_CLASSES[method][species](species)


def create_site_index_model(species, method: MethodLike = 'default') -> ParameterizedModel:
    """Factory function returning the curve used for a species under a method.

    Args:
        species: SpeciesCode or integer code (1, 2, 3)
        method: Site index method token or SiteIndexMethod

    Returns:
        Model instance; instances are cached and shared

    Raises:
        SpeciesNotFoundError: If the species code is not supported
        UnsupportedMethodError: If the method token is not recognized
    """
    return _cached_model(SpeciesCode.from_code(species), SiteIndexMethod.from_string(method))


def clear_model_cache() -> None:
    """Drop cached model instances so coefficients are reloaded."""
    _cached_model.cache_clear()


def _as_float_vector(name: str, values: Any) -> np.ndarray:
    """Coerce a scalar or sequence to a one-dimensional float array."""
    try:
        array = np.atleast_1d(np.asarray(values, dtype=float))
    except (TypeError, ValueError) as e:
        raise InvalidDataError(name, f"values must be numeric ({e})") from e
    if array.ndim != 1:
        raise InvalidDataError(name, f"expected a one-dimensional sequence, got shape {array.shape}")
    return array


def _species_vector(values: Any) -> np.ndarray:
    """Coerce species codes to floats; unusable entries (booleans included) become NaN."""
    dtype = getattr(values, 'dtype', None)
    if dtype is not None and getattr(dtype, 'kind', None) in ('i', 'u', 'f'):
        try:
            return _as_float_vector('species_code', values)
        except InvalidDataError:
            pass

    raw = np.atleast_1d(np.asarray(values, dtype=object))
    if raw.ndim != 1:
        raise InvalidDataError(
            'species_code', f"expected a one-dimensional sequence, got shape {raw.shape}"
        )
    if not any(isinstance(v, (bool, np.bool_)) for v in raw):
        try:
            return _as_float_vector('species_code', raw)
        except InvalidDataError:
            pass
    return np.array(
        [float(SpeciesCode.from_code(v)) if SpeciesCode.is_valid(v) else np.nan for v in raw],
        dtype=float,
    )


class SiteIndexCalculator:
    """Computes site index for parallel sequences of age, top height and species.

    The calculator holds no per-call state; ``method`` only sets the default
    used when compute() or evaluate() is called without one.

    Example:
        >>> calc = SiteIndexCalculator()
        >>> calc.compute([40, 60, 90], [20.0, 16.5, 19.0], [1, 2, 3])
        >>> calc.compute(40, 20.0, 1, method="TVEITE-BRAASTAD")
    """

    def __init__(self, method: MethodLike = 'default'):
        """Initialize the calculator.

        Args:
            method: Default method for calls that do not pass one

        Raises:
            UnsupportedMethodError: If the method token is not recognized
        """
        self.method = SiteIndexMethod.from_string(method)

    def evaluate(self, age, top_height, species_code,
                 method: Optional[MethodLike] = None) -> SiteIndexResult:
        """Compute site index together with a per-row status.

        Args:
            age: Breast-height age (years), scalar or sequence
            top_height: Top height (m), scalar or sequence
            species_code: Species codes (1=spruce, 2=pine, 3=birch)
            method: 'default', 'SHARMA-BRUNNER' or 'TVEITE-BRAASTAD'.
                Defaults to the calculator's method.

        Returns:
            SiteIndexResult aligned with the inputs

        Raises:
            UnsupportedMethodError: If the method token is not recognized
            ShapeMismatchError: If the inputs differ in length
            InvalidDataError: If age or top height is not numeric
        """
        method = self.method if method is None else SiteIndexMethod.from_string(method)

        age = _as_float_vector('age', age)
        top_height = _as_float_vector('top_height', top_height)
        species = _species_vector(species_code)
        n_rows = validate_equal_length(age=age, top_height=top_height, species_code=species)
        logger.debug("Computing site index for %d row(s) using %s", n_rows, method.value)

        h = top_height - BREAST_HEIGHT
        values = np.full(n_rows, np.nan)
        status = np.full(n_rows, RowStatus.UNKNOWN_SPECIES, dtype=np.int8)

        for sp in SpeciesCode:
            predicted = create_site_index_model(sp, method).predict(age, h)
            selected = species == sp.value
            values[selected] = predicted[selected]
            status[selected] = RowStatus.OK

        with np.errstate(invalid='ignore'):
            usable = np.isfinite(age) & np.isfinite(top_height) & (age > 0) & np.isfinite(values)
        domain_error = (status == RowStatus.OK) & ~usable
        values[domain_error] = np.nan
        status[domain_error] = RowStatus.DOMAIN_ERROR

        result = SiteIndexResult(values=values, status=status, method=method)
        log_missing_rows(logger, method.value, "unknown species code",
                         result.count(RowStatus.UNKNOWN_SPECIES))
        log_missing_rows(logger, method.value, "outside curve domain",
                         result.count(RowStatus.DOMAIN_ERROR))
        return result

    def compute(self, age, top_height, species_code,
                method: Optional[MethodLike] = None) -> np.ndarray:
        """Compute site index (m) per row.

        Same arguments as evaluate().

        Returns:
            Float array aligned with the inputs, NaN for rows without a site index
        """
        return self.evaluate(age, top_height, species_code, method).values

    def __repr__(self) -> str:
        return f"SiteIndexCalculator(method='{self.method.value}')"


_default_calculator = SiteIndexCalculator()


def compute_site_index(age, top_height, species_code, method: MethodLike = 'default') -> np.ndarray:
    """Convenience function computing site index with the given method.

    Args:
        age: Breast-height age (years)
        top_height: Top height (m)
        species_code: Species codes (1=spruce, 2=pine, 3=birch)
        method: 'default', 'SHARMA-BRUNNER' or 'TVEITE-BRAASTAD'

    Returns:
        Float array aligned with the inputs, NaN for rows without a site index
    """
    return _default_calculator.compute(age, top_height, species_code, method)


def site_index_from_frame(frame: pd.DataFrame, age: str = 'age', top_height: str = 'top_height',
                          species: str = 'species', method: MethodLike = 'default') -> pd.Series:
    """Compute site index for the rows of a DataFrame.

    Args:
        frame: Plot or stand records
        age: Column holding breast-height age
        top_height: Column holding top height (m)
        species: Column holding species codes
        method: 'default', 'SHARMA-BRUNNER' or 'TVEITE-BRAASTAD'

    Returns:
        Series named 'site_index' sharing the frame's index

    Raises:
        InvalidDataError: If a column is missing
    """
    method = SiteIndexMethod.from_string(method)
    missing = [column for column in (age, top_height, species) if column not in frame.columns]
    if missing:
        raise InvalidDataError("data frame", f"missing column(s): {', '.join(missing)}")

    try:
        ages = frame[age].to_numpy(dtype=float, na_value=np.nan)
        heights = frame[top_height].to_numpy(dtype=float, na_value=np.nan)
    except (TypeError, ValueError) as e:
        raise InvalidDataError("data frame", f"age and top height must be numeric ({e})") from e

    result = _default_calculator.evaluate(ages, heights, frame[species].to_numpy(), method)
    return result.to_series(index=frame.index)
