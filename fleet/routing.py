"""Routing collaborators: fetch a raw route payload for two coordinates."""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import RoutingUnavailable

logger = logging.getLogger(__name__)

OSRM_PUBLIC_URL = "http://router.project-osrm.org"
DEFAULT_TIMEOUT = 10.0


class RoutingClient(Protocol):
    """Anything that can turn two "lat,lon" strings into a route payload."""

    def fetch_route(self, start: str, end: str) -> Union[str, bytes]:
        ...


def _osrm_waypoint(coordinate: str) -> str:
    """Convert a "lat,lon" string to OSRM's "lon,lat" waypoint order."""
    try:
        lat, lon = (part.strip() for part in coordinate.split(","))
    except ValueError:
        raise ValueError(f"Expected 'lat,lon' coordinate, got {coordinate!r}") from None
    return f"{lon},{lat}"


class OsrmRoutingClient:
    """
    Driving routes from an OSRM HTTP server.

    Every request is bounded by ``timeout`` seconds. With ``retries`` > 0,
    connection errors and 5xx responses are retried with exponential backoff
    before giving up.
    """

    def __init__(
        self,
        base_url: str = OSRM_PUBLIC_URL,
        profile: str = "driving",
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = 0,
        backoff_factor: float = 0.3,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.timeout = timeout
        self.retries = retries
        self.backoff_factor = backoff_factor
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with retry logic."""
        session = requests.Session()
        retry = Retry(
            total=self.retries,
            read=self.retries,
            connect=self.retries,
            backoff_factor=self.backoff_factor,
            status_forcelist=(500, 502, 503, 504),
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def route_url(self, start: str, end: str) -> str:
        return (
            f"{self.base_url}/route/v1/{self.profile}/"
            f"{_osrm_waypoint(start)};{_osrm_waypoint(end)}"
        )

    def fetch_route(self, start: str, end: str) -> bytes:
        """
        Request a route and return the raw response body bytes.

        Raises:
            RoutingUnavailable: connection failure, timeout or HTTP error status
        """
        url = self.route_url(start, end)
        logger.info("Requesting route %s -> %s", start, end)
        try:
            response = self.session.get(
                url, params={"overview": "full"}, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as err:
            logger.warning("Routing request to %s failed: %s", url, err)
            raise RoutingUnavailable(f"Routing service request failed: {err}") from err
        return response.content


@dataclass
class RoutingSettings:
    """Connection settings for the routing service."""

    base_url: str = OSRM_PUBLIC_URL
    profile: str = "driving"
    timeout_seconds: float = DEFAULT_TIMEOUT
    retries: int = 0
    backoff_factor: float = 0.3

    def build_client(self) -> OsrmRoutingClient:
        return OsrmRoutingClient(
            base_url=self.base_url,
            profile=self.profile,
            timeout=self.timeout_seconds,
            retries=self.retries,
            backoff_factor=self.backoff_factor,
        )
