"""Tests for clustering options."""

import dataclasses

import numpy as np
import pytest

from graph_spectral import (
    AUTOMATIC_CLUSTERS,
    ClusteringOptions,
    InvalidOptionError,
    LaplacianKind,
    resolve_options,
)


class TestLaplacianKind:
    """Tests for strategy parsing."""

    def test_parse_strings(self):
        """Known strings map to members."""
        assert LaplacianKind.parse("connected") is LaplacianKind.CONNECTED
        assert LaplacianKind.parse("distance") is LaplacianKind.DISTANCE

    def test_parse_case_insensitive(self):
        """Upper case is accepted."""
        assert LaplacianKind.parse("DISTANCE") is LaplacianKind.DISTANCE

    def test_parse_member(self):
        """Members pass through."""
        assert LaplacianKind.parse(LaplacianKind.CONNECTED) is LaplacianKind.CONNECTED

    def test_parse_unknown(self):
        """Typos are rejected."""
        with pytest.raises(InvalidOptionError, match="expected one of 'connected', 'distance'"):
            LaplacianKind.parse("distnace")

    def test_string_equality(self):
        """Members compare equal to their string value."""
        assert LaplacianKind.CONNECTED == "connected"


class TestClusteringOptions:
    """Tests for the options dataclass."""

    def test_defaults(self):
        """Defaults match the documented values."""
        options = ClusteringOptions()
        assert options.laplacian_matrix is LaplacianKind.CONNECTED
        assert options.requested_nb_clusters == AUTOMATIC_CLUSTERS
        assert options.max_clusters == 8
        assert options.automatic

    def test_string_strategy(self):
        """Strategy strings are converted."""
        options = ClusteringOptions(laplacian_matrix="distance")
        assert options.laplacian_matrix is LaplacianKind.DISTANCE

    def test_fixed_count(self):
        """A positive count disables automatic selection."""
        options = ClusteringOptions(requested_nb_clusters=3)
        assert not options.automatic

    def test_integer_like_values(self):
        """Integral floats, numpy ints and digit strings are accepted."""
        options = ClusteringOptions(requested_nb_clusters=2.0, max_clusters=np.int64(4))
        assert options.requested_nb_clusters == 2
        assert options.max_clusters == 4
        assert ClusteringOptions(max_clusters="5").max_clusters == 5

    @pytest.mark.parametrize("value", [0, -2, -10])
    def test_invalid_requested(self, value):
        """Counts other than -1 must be positive."""
        with pytest.raises(InvalidOptionError, match="requested_nb_clusters"):
            ClusteringOptions(requested_nb_clusters=value)

    @pytest.mark.parametrize("value", [0, -1])
    def test_invalid_max(self, value):
        """max_clusters must be positive."""
        with pytest.raises(InvalidOptionError, match="max_clusters"):
            ClusteringOptions(max_clusters=value)

    @pytest.mark.parametrize("value", [True, 2.5, "two", None])
    def test_non_integer(self, value):
        """Non-integer counts are rejected."""
        with pytest.raises(InvalidOptionError, match="must be an integer"):
            ClusteringOptions(requested_nb_clusters=value)

    def test_frozen(self):
        """Options cannot be modified after construction."""
        options = ClusteringOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.max_clusters = 3

    def test_replace(self):
        """replace() returns a validated copy."""
        options = ClusteringOptions().replace(max_clusters=3)
        assert options.max_clusters == 3
        with pytest.raises(InvalidOptionError):
            options.replace(laplacian_matrix="bogus")

    def test_invalid_option_is_value_error(self):
        """Option errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            ClusteringOptions(max_clusters=0)


class TestResolveOptions:
    """Tests for merging overrides onto defaults."""

    def test_none(self):
        """None gives the defaults."""
        assert resolve_options(None) == ClusteringOptions()

    def test_passthrough(self):
        """ClusteringOptions are returned unchanged."""
        options = ClusteringOptions(max_clusters=2)
        assert resolve_options(options) is options

    def test_camel_case_keys(self):
        """Option-map keys are recognized."""
        options = resolve_options(
            {"laplacianMatrix": "distance", "requestedNbClusters": 4, "maxClusters": 6}
        )
        assert options == ClusteringOptions(
            laplacian_matrix=LaplacianKind.DISTANCE, requested_nb_clusters=4, max_clusters=6
        )

    def test_snake_case_keys(self):
        """Field names are recognized."""
        options = resolve_options({"max_clusters": 3})
        assert options.max_clusters == 3
        assert options.requested_nb_clusters == AUTOMATIC_CLUSTERS

    def test_partial_override(self):
        """Missing keys keep their defaults."""
        options = resolve_options({"requestedNbClusters": 2})
        assert options.laplacian_matrix is LaplacianKind.CONNECTED
        assert options.max_clusters == 8

    def test_unknown_keys_ignored(self):
        """Unrecognized keys are dropped."""
        assert resolve_options({"colour": "red", "verbose": True}) == ClusteringOptions()

    def test_invalid_value(self):
        """Recognized keys are validated."""
        with pytest.raises(InvalidOptionError):
            resolve_options({"laplacianMatrix": "weighted"})
