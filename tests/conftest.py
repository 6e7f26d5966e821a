"""
Shared pytest fixtures for pysiteindex tests.
"""
import pytest

from pysiteindex.config_loader import get_config_loader
from pysiteindex.site_index import clear_model_cache


@pytest.fixture(autouse=True)
def clear_caches():
    """Clear coefficient and model caches around each test."""
    get_config_loader().clear_coefficient_cache()
    clear_model_cache()
    yield
    get_config_loader().clear_coefficient_cache()
    clear_model_cache()


# =============================================================================
# Stand Fixtures
# =============================================================================

@pytest.fixture
def mixed_batch():
    """One spruce, one pine and one birch stand at reference age 40."""
    return {
        'age': [40.0, 40.0, 40.0],
        'top_height': [20.0, 18.0, 15.0],
        'species_code': [1, 2, 3],
    }


@pytest.fixture
def varied_batch():
    """Stands of all species over a range of ages and heights."""
    return {
        'age': [25.0, 60.0, 35.0, 110.0, 130.0, 70.0, 45.0, 90.0],
        'top_height': [9.5, 22.0, 11.0, 27.5, 19.0, 17.5, 14.0, 24.0],
        'species_code': [1, 1, 2, 1, 2, 3, 3, 2],
    }
