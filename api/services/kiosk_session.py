"""
Operator-side state for the face scan kiosk.

Holds everything the kiosk screen works with (reference data, the logged in
officer, the matched driver, notifications) and drives the scan loop that
feeds live descriptors to the face matcher.
"""

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

import requests
from pydantic import BaseModel, Field

from config import settings
from services.challan_service import PaymentReceipt, render_challan, simulate_payment
from services.face_matcher import FaceMatcher, MatchResult
from services.rto_client import RtoApiClient

logger = logging.getLogger(__name__)

DescriptorSource = Callable[[], Optional[Sequence[float]]]


class KioskError(Exception):
    """An operator action cannot be completed in the current kiosk state."""


class Notification(BaseModel):
    title: str
    message: str
    type: str = "info"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class IssuedChallan(BaseModel):
    memo: Dict
    challan_text: str


class KioskSession:
    """Explicit application state for one kiosk.

    Reference data is loaded once through the API client. A failed load is
    logged and leaves that collection empty so the kiosk stays usable.
    """

    def __init__(self, client: RtoApiClient = None, matcher: FaceMatcher = None):
        self.client = client or RtoApiClient()
        self.matcher = matcher or FaceMatcher()

        # Reference data
        self.drivers: List[Dict] = []
        self.violations: List[Dict] = []
        self.locations: Dict = {}
        self.cameras: Dict = {}

        # Operator state
        self.officer: Optional[Dict] = None
        self.current_city: Optional[str] = None
        self.demo_driver_id: Optional[str] = None

        # Scan state
        self.current_driver: Optional[Dict] = None
        self.current_distance: Optional[float] = None
        self.face_detected = False

        self.notifications: List[Notification] = []
        self._driver_cache: Dict[str, Dict] = {}

    # ------------------------------------------------------------------
    # Reference data

    def _fetch(self, label: str, fetch: Callable, default):
        try:
            return fetch()
        except requests.exceptions.RequestException as e:
            logger.error(f"Failed to load {label}: {e}")
            return default

    def load_reference_data(self) -> None:
        """Load drivers, violations, locations and cameras from the API."""
        self.drivers = self._fetch("drivers", self.client.get_drivers_basic, [])
        self.violations = self._fetch("violations", self.client.get_violations, [])
        self.locations = self._fetch("locations", self.client.get_locations, {})
        self.cameras = self._fetch("cameras", self.client.get_cameras, {})
        logger.info(
            f"Kiosk loaded {len(self.drivers)} drivers and {len(self.violations)} violations"
        )

    def drivers_in_city(self, city: str) -> List[Dict]:
        """Drivers offered in the demo driver dropdown for a city."""
        return [d for d in self.drivers if d.get("city") == city]

    def select_city(self, city: str) -> None:
        self.current_city = city

    def select_demo_driver(self, driver_id: Optional[str]) -> None:
        self.demo_driver_id = driver_id or None

    # ------------------------------------------------------------------
    # Officer

    def login(self, officer_id: str, password: str) -> bool:
        """Log an officer in; returns False on rejected credentials."""
        try:
            response = self.client.login(officer_id, password)
        except requests.exceptions.HTTPError as e:
            logger.warning(f"Login rejected for {officer_id}: {e}")
            return False
        officer = response.get("officer")
        if not response.get("success") or not officer:
            return False
        self.officer = officer
        return True

    def logout(self) -> None:
        self.officer = None

    # ------------------------------------------------------------------
    # Scanning

    def _full_driver(self, driver: Dict) -> Dict:
        driver_id = driver.get("id")
        if driver_id in self._driver_cache:
            return self._driver_cache[driver_id]
        try:
            record = self.client.get_driver(driver_id)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Could not load driver {driver_id}, showing basic record: {e}")
            return driver
        if record is None:
            return driver
        self._driver_cache[driver_id] = record
        return record

    def process_descriptor(self, descriptor: Optional[Sequence[float]]) -> Optional[MatchResult]:
        """Handle one scan tick.

        Args:
            descriptor: Descriptor of the first detected face, or None when
                no face is in frame

        Returns:
            MatchResult for the displayed driver, or None
        """
        if descriptor is None:
            self.face_detected = False
            return None

        match = self.matcher.find_best_match(descriptor, self.drivers, self.demo_driver_id)
        if match is None:
            self.current_driver = None
            self.current_distance = None
            self.face_detected = False
            return None

        self.current_driver = self._full_driver(match.driver)
        self.current_distance = match.distance
        self.face_detected = True
        return match

    def run_scan_loop(
        self,
        descriptor_source: DescriptorSource,
        stop_event: threading.Event,
        interval: Optional[float] = None,
        max_ticks: Optional[int] = None
    ) -> int:
        """Poll the descriptor source until ``stop_event`` is set.

        Ticks run one after another, so a slow inference call delays the next
        tick instead of overlapping it. Errors in a tick are logged and the
        loop carries on.

        Returns:
            int: Number of ticks executed
        """
        interval = settings.scan_interval_ms / 1000.0 if interval is None else interval
        ticks = 0
        while not stop_event.is_set():
            started = time.monotonic()
            try:
                self.process_descriptor(descriptor_source())
            except Exception as e:
                logger.warning(f"Scan tick failed: {e}")
            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break
            elapsed = time.monotonic() - started
            stop_event.wait(max(0.0, interval - elapsed))
        return ticks

    # ------------------------------------------------------------------
    # Memos

    def add_notification(self, title: str, message: str, type: str = "info") -> Notification:
        notification = Notification(title=title, message=message, type=type)
        self.notifications.insert(0, notification)
        logger.info(f"NOTIFICATION: {title} - {message}")
        return notification

    def issue_memo(self, violation_ids: List[str], location: Optional[str] = None,
                   payment_status: Optional[str] = None) -> IssuedChallan:
        """Issue an e-challan for the matched driver.

        Raises:
            KioskError: No driver matched, no officer logged in, or no
                (known) violations selected
        """
        if not self.current_driver:
            raise KioskError("No driver detected. Please select a driver first.")
        if not self.officer:
            raise KioskError("Officer must be logged in to issue a memo.")
        if not violation_ids:
            raise KioskError("Select at least one violation.")

        catalog = {v["id"]: v for v in self.violations}
        unknown = [vid for vid in violation_ids if vid not in catalog]
        if unknown:
            raise KioskError(f"Unknown violations: {', '.join(unknown)}")
        selected = [catalog[vid] for vid in violation_ids]

        response = self.client.create_memo(
            driver_id=self.current_driver["id"],
            officer_id=self.officer["id"],
            officer_name=self.officer.get("name"),
            location=location or self.current_city,
            violations=selected,
            payment_status=payment_status,
        )
        memo = response["memo"]

        challan_text = render_challan(
            self.current_driver,
            selected,
            issued_at=datetime.fromisoformat(memo["date"]),
            challan_no=memo["id"],
        )

        name = self.current_driver.get("name")
        self.add_notification("Email Sent", f"Notice sent to {name}", "success")
        self.add_notification("SMS Sent", f"SMS sent to {self.current_driver.get('phone') or name}", "success")
        return IssuedChallan(memo=memo, challan_text=challan_text)

    def pay_challan(self, challan_no: str, amount: int, method: str) -> PaymentReceipt:
        """Run the simulated payment gateway for an issued challan."""
        receipt = simulate_payment(challan_no, amount, method)
        self.add_notification("Payment Successful", "Transaction completed successfully", "success")
        return receipt

    def driver_history(self) -> List[Dict]:
        """Memos previously issued to the matched driver."""
        if not self.current_driver:
            return []
        return self._fetch(
            "driver history",
            lambda: self.client.get_driver_memos(self.current_driver["id"]),
            []
        )
