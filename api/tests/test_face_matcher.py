"""
Unit tests for the kiosk face matcher.

Covers nearest-descriptor selection, the threshold, and the demo driver
fallback used when nobody enrolled is close enough.
"""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from services.face_matcher import FaceMatcher, confidence_percent, euclidean_distance


def descriptor(first: float, length: int = 128):
    """Descriptor whose distance from the zero vector is ``first``"""
    return [first] + [0.0] * (length - 1)


class TestFaceMatcher:
    """Test suite for FaceMatcher.find_best_match."""

    @pytest.fixture
    def matcher(self):
        return FaceMatcher(threshold=0.5, demo_distance=0.35)

    @pytest.fixture
    def query(self):
        return descriptor(0.0)

    def test_closest_qualifying_driver_wins(self, matcher, query):
        drivers = [
            {"id": "FAR", "face_descriptor": descriptor(0.6)},
            {"id": "NEAR", "face_descriptor": descriptor(0.3)},
        ]

        result = matcher.find_best_match(query, drivers)

        assert result.driver["id"] == "NEAR"
        assert result.distance == pytest.approx(0.3)

    def test_empty_driver_list_returns_none(self, matcher, query):
        assert matcher.find_best_match(query, []) is None

    def test_falls_back_to_first_driver(self, matcher, query):
        drivers = [
            {"id": "GJ001", "face_descriptor": None},
            {"id": "GJ002", "face_descriptor": descriptor(0.9)},
        ]

        result = matcher.find_best_match(query, drivers)

        assert result.driver["id"] == "GJ001"
        assert result.distance == 0.35

    def test_falls_back_to_selected_demo_driver(self, matcher, query):
        drivers = [{"id": "GJ001"}, {"id": "GJ002"}, {"id": "GJ003"}]

        result = matcher.find_best_match(query, drivers, demo_driver_id="GJ003")

        assert result.driver["id"] == "GJ003"
        assert result.distance == 0.35

    def test_unknown_demo_driver_uses_first(self, matcher, query):
        drivers = [{"id": "GJ001"}, {"id": "GJ002"}]

        result = matcher.find_best_match(query, drivers, demo_driver_id="MISSING")

        assert result.driver["id"] == "GJ001"

    def test_real_match_beats_demo_selection(self, matcher, query):
        drivers = [
            {"id": "GJ001", "face_descriptor": None},
            {"id": "GJ002", "face_descriptor": descriptor(0.2)},
        ]

        result = matcher.find_best_match(query, drivers, demo_driver_id="GJ001")

        assert result.driver["id"] == "GJ002"
        assert result.distance == pytest.approx(0.2)

    def test_distance_at_threshold_does_not_qualify(self, matcher, query):
        drivers = [
            {"id": "GJ001", "face_descriptor": None},
            {"id": "EDGE", "face_descriptor": descriptor(0.5)},
        ]

        result = matcher.find_best_match(query, drivers)

        assert result.driver["id"] == "GJ001"
        assert result.distance == 0.35

    def test_first_driver_wins_ties(self, matcher, query):
        drivers = [
            {"id": "A", "face_descriptor": descriptor(0.25)},
            {"id": "B", "face_descriptor": descriptor(-0.25)},
        ]

        result = matcher.find_best_match(query, drivers)

        assert result.driver["id"] == "A"

    def test_mismatched_descriptor_length_is_skipped(self, matcher, query):
        drivers = [
            {"id": "SHORT", "face_descriptor": [0.0, 0.0]},
            {"id": "OK", "face_descriptor": descriptor(0.1)},
        ]

        result = matcher.find_best_match(query, drivers)

        assert result.driver["id"] == "OK"

    def test_defaults_come_from_settings(self):
        matcher = FaceMatcher()

        assert matcher.threshold == 0.5
        assert matcher.demo_distance == 0.35


def test_euclidean_distance():
    assert euclidean_distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


@pytest.mark.parametrize("distance,expected", [
    (0.35, 65.0),
    (0.0, 100.0),
    (1.4, 0.0),
    (-0.2, 100.0),
])
def test_confidence_percent(distance, expected):
    assert confidence_percent(distance) == pytest.approx(expected)
