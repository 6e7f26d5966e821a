"""Tests for the Eriksson (1997) birch curve."""
import numpy as np
import pytest

from pysiteindex import ErikssonBirchModel, eriksson_birch_site_index, ConfigurationError
from tests import reference_formulas as ref


class TestErikssonBirch:

    def test_coefficients(self):
        model = ErikssonBirchModel()
        assert model.get_species_coefficients() == pytest.approx({'b1': 394.0, 'b2': 1.387, 'k': 7.0})

    @pytest.mark.parametrize("age,top_height", [
        (10, 4.0), (25, 9.0), (40, 15.0), (60, 19.0), (90, 22.0),
    ])
    def test_matches_reference(self, age, top_height):
        assert eriksson_birch_site_index(age, top_height) == pytest.approx(
            ref.eriksson_birch(age, top_height), rel=1e-9
        )

    @pytest.mark.parametrize("top_height", [6.0, 12.0, 18.0, 24.0])
    def test_reference_age_returns_top_height(self, top_height):
        assert eriksson_birch_site_index(40, top_height) == pytest.approx(top_height, abs=1e-9)

    def test_negative_age_is_nan(self):
        assert np.isnan(ErikssonBirchModel().predict(-10.0, 12.0))

    def test_only_birch_supported(self):
        with pytest.raises(ConfigurationError):
            ErikssonBirchModel(1)
