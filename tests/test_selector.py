"""
Tests for ensemble source selection.
"""

import pytest
from src.streamflow_daily.processing.selector import SourceSelector


POINT = [("2024-06-10T00:00:00Z", 10.0)]


class TestSourceSelector:
    """Test cases for SourceSelector."""

    @pytest.fixture
    def selector(self):
        """Create selector instance."""
        return SourceSelector()

    def test_mean_preferred_over_members(self, selector, make_series):
        """A non-empty mean always wins."""
        bundle = {
            "member01": make_series("CFS", POINT),
            "mean": make_series("CFS", POINT),
            "member02": make_series("CFS", POINT),
        }
        selected = selector.select(bundle)
        assert selected.key == "mean"
        assert selected.series is bundle["mean"]

    def test_empty_mean_falls_back_to_smallest_member(self, selector, make_series):
        """member02 sorts before member10."""
        bundle = {
            "mean": make_series("CFS", []),
            "member10": make_series("CFS", POINT),
            "member02": make_series("CFS", POINT),
        }
        assert selector.select(bundle).key == "member02"

    def test_absent_mean_falls_back_to_members(self, selector, make_series):
        bundle = {
            "member10": make_series("CFS", POINT),
            "member02": make_series("CFS", POINT),
        }
        assert selector.select(bundle).key == "member02"

    def test_empty_members_are_skipped(self, selector, make_series):
        bundle = {
            "member01": make_series("CFS", []),
            "member02": make_series("CFS", []),
            "member03": make_series("CFS", POINT),
        }
        assert selector.select(bundle).key == "member03"

    def test_non_member_keys_are_ignored(self, selector, make_series):
        """Only 'mean' and member keys are candidates."""
        bundle = {"blend": make_series("CFS", POINT)}
        assert selector.select(bundle) is None

    def test_all_empty_returns_none(self, selector, make_series):
        bundle = {
            "mean": make_series("CFS", []),
            "member01": make_series("CFS", []),
        }
        assert selector.select(bundle) is None

    def test_empty_bundle_returns_none(self, selector):
        assert selector.select({}) is None

    def test_selection_is_deterministic(self, selector, make_series):
        """Insertion order of the bundle does not change the result."""
        forward = {f"member{i:02d}": make_series("CFS", POINT) for i in range(1, 6)}
        backward = dict(reversed(list(forward.items())))
        assert selector.select(forward).key == selector.select(backward).key == "member01"
