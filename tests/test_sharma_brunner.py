"""Tests for the Sharma-Brunner spruce and pine curves."""
import numpy as np
import pytest

from pysiteindex import (
    SharmaBrunnerModel,
    SpeciesCode,
    sharma_brunner_site_index,
    ConfigurationError,
    SpeciesNotFoundError,
)
from tests import reference_formulas as ref


class TestSharmaBrunnerModel:
    """Coefficients and closed-form predictions."""

    def test_spruce_coefficients(self):
        model = SharmaBrunnerModel(SpeciesCode.SPRUCE)
        assert model.get_coefficient('b1') == pytest.approx(18.9206)
        assert model.get_coefficient('b2') == pytest.approx(5175.18)
        assert model.get_coefficient('b3') == pytest.approx(1.1576)

    def test_pine_coefficients(self):
        model = SharmaBrunnerModel(2)
        assert model.get_species_coefficients() == pytest.approx(
            {'b1': 12.8361, 'b2': 3263.99, 'b3': 1.1758}
        )

    def test_default_species_is_spruce(self):
        assert SharmaBrunnerModel().species is SpeciesCode.SPRUCE

    def test_birch_not_supported(self):
        with pytest.raises(ConfigurationError):
            SharmaBrunnerModel(SpeciesCode.BIRCH)

    def test_unknown_species_code(self):
        with pytest.raises(SpeciesNotFoundError):
            SharmaBrunnerModel(5)

    @pytest.mark.parametrize("age,top_height", [
        (15, 5.0), (30, 12.5), (40, 20.0), (65, 24.0), (100, 28.0), (150, 30.0),
    ])
    def test_spruce_matches_reference(self, age, top_height):
        assert sharma_brunner_site_index(age, top_height, 1) == pytest.approx(
            ref.sharma_brunner_spruce(age, top_height), rel=1e-9
        )

    @pytest.mark.parametrize("age,top_height", [
        (15, 4.0), (30, 10.0), (40, 14.0), (80, 18.5), (140, 21.0),
    ])
    def test_pine_matches_reference(self, age, top_height):
        assert sharma_brunner_site_index(age, top_height, SpeciesCode.PINE) == pytest.approx(
            ref.sharma_brunner_pine(age, top_height), rel=1e-9
        )

    @pytest.mark.parametrize("species", [SpeciesCode.SPRUCE, SpeciesCode.PINE])
    @pytest.mark.parametrize("top_height", [8.0, 14.0, 22.0, 30.0])
    def test_reference_age_returns_top_height(self, species, top_height):
        """At breast-height age 40 site index equals top height."""
        assert sharma_brunner_site_index(40, top_height, species) == pytest.approx(top_height, abs=1e-9)

    def test_older_stand_of_same_height_has_lower_site_index(self):
        model = SharmaBrunnerModel(SpeciesCode.SPRUCE)
        values = model.site_index(np.array([30.0, 60.0, 90.0]), np.array([18.0, 18.0, 18.0]))
        assert values[0] > values[1] > values[2]

    def test_vectorized_prediction_shape(self):
        model = SharmaBrunnerModel(SpeciesCode.PINE)
        values = model.predict(np.linspace(20, 120, 11), np.full(11, 15.0))
        assert values.shape == (11,)
        assert np.isfinite(values).all()

    def test_zero_age_is_not_finite(self):
        value = SharmaBrunnerModel().predict(0.0, 18.7)
        assert not np.isfinite(value)

    def test_repr(self):
        assert repr(SharmaBrunnerModel(2)) == "SharmaBrunnerModel(species='pine')"
