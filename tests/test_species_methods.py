"""Tests for the SpeciesCode and SiteIndexMethod enumerations."""
import numpy as np
import pytest

from pysiteindex import (
    SpeciesCode,
    SiteIndexMethod,
    compute_site_index,
    get_species_code,
    validate_species_code,
    SpeciesNotFoundError,
    UnsupportedMethodError,
)


# ============================================================================
# Species Codes
# ============================================================================

class TestSpeciesCode:

    @pytest.mark.parametrize("code,expected", [
        (1, SpeciesCode.SPRUCE),
        (2, SpeciesCode.PINE),
        (3, SpeciesCode.BIRCH),
        (3.0, SpeciesCode.BIRCH),
        ("2", SpeciesCode.PINE),
        (SpeciesCode.SPRUCE, SpeciesCode.SPRUCE),
    ])
    def test_from_code(self, code, expected):
        assert SpeciesCode.from_code(code) is expected

    @pytest.mark.parametrize("code", [0, 4, 99, 1.5, None, True, np.True_, "spruce", float("nan")])
    def test_invalid_codes(self, code):
        assert not SpeciesCode.is_valid(code)
        with pytest.raises(SpeciesNotFoundError):
            SpeciesCode.from_code(code)

    def test_species_not_found_is_key_error(self):
        with pytest.raises(KeyError):
            get_species_code(42)

    def test_members_compare_equal_to_integers(self):
        assert SpeciesCode.SPRUCE == 1
        assert SpeciesCode.BIRCH == 3

    def test_labels(self):
        assert [sp.label for sp in SpeciesCode] == ['spruce', 'pine', 'birch']
        assert str(SpeciesCode.PINE) == 'pine'

    def test_list_all_codes(self):
        assert SpeciesCode.list_all_codes() == [1, 2, 3]

    def test_validate_species_code(self):
        assert validate_species_code(1)
        assert not validate_species_code(7)

    def test_error_message_lists_valid_codes(self):
        with pytest.raises(SpeciesNotFoundError) as exc_info:
            SpeciesCode.from_code(8)
        assert "1 (spruce)" in str(exc_info.value)
        assert exc_info.value.species_code == 8


# ============================================================================
# Methods
# ============================================================================

class TestSiteIndexMethod:

    @pytest.mark.parametrize("token,expected", [
        ("default", SiteIndexMethod.SHARMA_BRUNNER),
        ("DEFAULT", SiteIndexMethod.SHARMA_BRUNNER),
        ("SHARMA-BRUNNER", SiteIndexMethod.SHARMA_BRUNNER),
        ("TVEITE-BRAASTAD", SiteIndexMethod.TVEITE_BRAASTAD),
        (SiteIndexMethod.TVEITE_BRAASTAD, SiteIndexMethod.TVEITE_BRAASTAD),
    ])
    def test_from_string(self, token, expected):
        assert SiteIndexMethod.from_string(token) is expected

    @pytest.mark.parametrize("token", [
        "FOO", "", "SHARMA", "BRAASTAD", None, 1,
        "tveite-braastad", " Sharma-Brunner ", "tveite_braastad", "tveite braastad",
        " default",
    ])
    def test_unsupported_tokens(self, token):
        with pytest.raises(UnsupportedMethodError):
            SiteIndexMethod.from_string(token)

    def test_unsupported_method_lists_tokens(self):
        with pytest.raises(UnsupportedMethodError) as exc_info:
            SiteIndexMethod.from_string("FOO")
        assert exc_info.value.method == "FOO"
        assert "TVEITE-BRAASTAD" in str(exc_info.value)

    def test_default(self):
        assert SiteIndexMethod.default() is SiteIndexMethod.SHARMA_BRUNNER

    def test_members_are_strings(self):
        assert SiteIndexMethod.TVEITE_BRAASTAD == "TVEITE-BRAASTAD"
        assert str(SiteIndexMethod.SHARMA_BRUNNER) == "SHARMA-BRUNNER"

    def test_list_tokens(self):
        assert SiteIndexMethod.list_tokens() == ["default", "SHARMA-BRUNNER", "TVEITE-BRAASTAD"]

    def test_compute_rejects_near_miss_method_name(self):
        with pytest.raises(ValueError):
            compute_site_index(40, 20, 1, method="tveite braastad")
