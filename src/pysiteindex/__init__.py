"""
pysiteindex: Norwegian site index curves for Python

Computes site index (top height in metres at breast-height age 40) for
Norway spruce, Scots pine and birch from breast-height age and top height,
using either the Sharma-Brunner (default) or the Tveite-Braastad curves.
Birch always uses Eriksson (1997).

Quick Start:
    >>> from pysiteindex import compute_site_index
    >>> compute_site_index(age=[40, 40, 40], top_height=[20, 18, 15], species_code=[1, 2, 3])
    >>> compute_site_index(65, 21.4, 1, method="TVEITE-BRAASTAD")
"""

# =============================================================================
# Package Metadata
# =============================================================================
__version__ = "0.1.0"
__author__ = "pysiteindex Development Team"

# =============================================================================
# Core API
# =============================================================================
from .site_index import (
    SiteIndexCalculator,
    SiteIndexResult,
    RowStatus,
    compute_site_index,
    site_index_from_frame,
    create_site_index_model,
    clear_model_cache,
)

# =============================================================================
# Species and Methods
# =============================================================================
from .species import SpeciesCode, get_species_code, validate_species_code
from .methods import SiteIndexMethod

# =============================================================================
# Site Index Curves
# =============================================================================
from .sharma_brunner import SharmaBrunnerModel, sharma_brunner_site_index
from .tveite_braastad import (
    TveiteSpruceModel,
    BraastadPineModel,
    tveite_spruce_site_index,
    braastad_pine_site_index,
)
from .eriksson_birch import ErikssonBirchModel, eriksson_birch_site_index

# =============================================================================
# Configuration and Logging
# =============================================================================
from .config_loader import ConfigLoader, get_config_loader, load_coefficient_file
from .logging_config import get_logger, setup_logging

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    SiteIndexError,
    ConfigurationError,
    UnsupportedMethodError,
    SpeciesNotFoundError,
    DataError,
    CoefficientFileNotFoundError,
    InvalidDataError,
    ShapeMismatchError,
)

# =============================================================================
# Base Classes (for extension)
# =============================================================================
from .model_base import ParameterizedModel, BREAST_HEIGHT, REFERENCE_AGE

# =============================================================================
# Public API Definition
# =============================================================================
__all__ = [
    # Package Metadata
    "__version__",
    "__author__",
    # Core API
    "SiteIndexCalculator",
    "SiteIndexResult",
    "RowStatus",
    "compute_site_index",
    "site_index_from_frame",
    "create_site_index_model",
    "clear_model_cache",
    # Species and Methods
    "SpeciesCode",
    "get_species_code",
    "validate_species_code",
    "SiteIndexMethod",
    # Site Index Curves
    "SharmaBrunnerModel",
    "sharma_brunner_site_index",
    "TveiteSpruceModel",
    "BraastadPineModel",
    "tveite_spruce_site_index",
    "braastad_pine_site_index",
    "ErikssonBirchModel",
    "eriksson_birch_site_index",
    # Configuration and Logging
    "ConfigLoader",
    "get_config_loader",
    "load_coefficient_file",
    "get_logger",
    "setup_logging",
    # Exceptions
    "SiteIndexError",
    "ConfigurationError",
    "UnsupportedMethodError",
    "SpeciesNotFoundError",
    "DataError",
    "CoefficientFileNotFoundError",
    "InvalidDataError",
    "ShapeMismatchError",
    # Base Classes
    "ParameterizedModel",
    "BREAST_HEIGHT",
    "REFERENCE_AGE",
]
