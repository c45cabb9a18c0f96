"""
HTTP client for the RTO Face Scan API.

Used by the kiosk session to load reference data and issue memos.
"""

import logging
from typing import Dict, List, Optional

import requests

from config import settings

logger = logging.getLogger(__name__)


class RtoApiClient:
    """Client for the RTO record store REST API.

    Requests are made once; errors are raised to the caller.
    """

    def __init__(self, base_url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None):
        """Initialize the client.

        Args:
            base_url: API root including the ``/api`` prefix. Defaults to API_BASE_URL
            api_key: Value for the X-API-Key header. Defaults to API_KEY
            timeout: Request timeout in seconds
        """
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.api_key
        self.timeout = timeout or settings.request_timeout

        self.headers = {"Content-Type": "application/json"}
        if self.api_key:
            self.headers["X-API-Key"] = self.api_key

        self.session = requests.Session()

    def _make_request(self, method: str, endpoint: str, payload: Optional[Dict] = None):
        """Make a request to the API.

        Args:
            method: HTTP method
            endpoint: Endpoint path below the API root
            payload: JSON body for POST requests

        Returns:
            Parsed JSON response

        Raises:
            requests.exceptions.RequestException: On network or HTTP errors
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"{method} {endpoint}")

        try:
            response = self.session.request(
                method, url, headers=self.headers, json=payload, timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.exceptions.HTTPError as e:
            logger.error(f"API error on {endpoint}: {e}")
            raise
        except requests.exceptions.RequestException as e:
            logger.error(f"Request to {endpoint} failed: {e}")
            raise

    def login(self, officer_id: str, password: str) -> Dict:
        """Authenticate an officer; returns the response with the officer profile."""
        return self._make_request("POST", "/login", {"officer_id": officer_id, "password": password})

    def get_violations(self) -> List[Dict]:
        return self._make_request("GET", "/violations")

    def get_driver(self, driver_id: str) -> Optional[Dict]:
        """Full driver record, or None when the driver does not exist."""
        try:
            return self._make_request("GET", f"/drivers/{driver_id}")
        except requests.exceptions.HTTPError as e:
            if e.response is not None and e.response.status_code == 404:
                logger.warning(f"Driver not found: {driver_id}")
                return None
            raise

    def get_drivers_basic(self) -> List[Dict]:
        return self._make_request("GET", "/drivers-basic")

    def create_memo(self, driver_id: str, officer_id: str, violations: List[Dict],
                    location: Optional[str] = None, officer_name: Optional[str] = None,
                    payment_status: Optional[str] = None) -> Dict:
        """Issue a memo. The server computes the total fine."""
        payload = {
            "driver_id": driver_id,
            "officer_id": officer_id,
            "officer_name": officer_name,
            "location": location,
            "violations": violations,
        }
        if payment_status:
            payload["payment_status"] = payment_status
        return self._make_request("POST", "/memos", payload)

    def get_driver_memos(self, driver_id: str) -> List[Dict]:
        return self._make_request("GET", f"/memos/driver/{driver_id}")

    def get_locations(self) -> Dict:
        return self._make_request("GET", "/locations")

    def get_cameras(self) -> Dict:
        return self._make_request("GET", "/cameras")

    def get_analytics(self, refresh: bool = False) -> Dict:
        return self._make_request("GET", "/analytics/refresh" if refresh else "/analytics")
