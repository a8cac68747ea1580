import logging
from datetime import datetime
from urllib.parse import quote

import requests

from config.settings import DiseaseApiSettings
from epidemic.application.port.disease_data_port import CountrySourcePort, HistorySourcePort
from epidemic.domain.comparison import SeriesMetric
from epidemic.domain.continent_record import ContinentRecord
from epidemic.domain.country_record import CountryRecord
from epidemic.domain.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

# Timeline keys look like "1/22/20".
TIMELINE_DATE_FORMAT = "%m/%d/%y"
# The history endpoint returns only the last 30 days unless asked for the full range.
HISTORY_PARAMS = {"lastdays": "all"}


class DiseaseApiClient(CountrySourcePort, HistorySourcePort):
    """
    Client for the disease.sh style statistics API.

    Every call is a single blocking request bounded by ``settings.timeout``; failures
    surface as UpstreamUnavailableError without retrying.
    """

    def __init__(self, settings: DiseaseApiSettings, session: requests.Session | None = None):
        self.settings = settings
        # Without an injected session each call goes through requests.get, which opens its own.
        self.session = session

    def fetch_countries(self) -> list[CountryRecord]:
        payload = self._get_json(self.settings.countries_url)
        if not isinstance(payload, list):
            raise UpstreamUnavailableError("Country list response is not a JSON array")
        try:
            return [CountryRecord.from_payload(item) for item in payload]
        except (TypeError, ValueError, AttributeError) as exc:
            raise UpstreamUnavailableError(f"Country list decode failed: {exc}") from exc

    def fetch_continents(self) -> list[ContinentRecord]:
        payload = self._get_json(self.settings.continent_url)
        if not isinstance(payload, list):
            raise UpstreamUnavailableError("Continent response is not a JSON array")
        try:
            return [ContinentRecord.from_payload(item) for item in payload]
        except (TypeError, ValueError, AttributeError) as exc:
            raise UpstreamUnavailableError(f"Continent decode failed: {exc}") from exc

    def fetch_series(self, country: str, metric: SeriesMetric) -> list[int]:
        if not country:
            return []
        url = f"{self.settings.history_url.rstrip('/')}/{quote(country)}"
        payload = self._get_json(url, params=HISTORY_PARAMS, allow_not_found=True)
        if payload is None:
            return []
        timeline = payload.get("timeline") if isinstance(payload, dict) else None
        if not isinstance(timeline, dict):
            raise UpstreamUnavailableError(f"History for {country!r} has no timeline")
        return self._ordered_values(timeline.get(metric.value) or {})

    def _get_json(self, url: str, params: dict | None = None, allow_not_found: bool = False):
        http = self.session or requests
        try:
            response = http.get(url, params=params, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            raise UpstreamUnavailableError(f"Request to {url} failed: {exc}") from exc

        if allow_not_found and response.status_code == 404:
            logger.info("upstream has no data at %s", url)
            return None
        try:
            response.raise_for_status()
            return response.json()
        except requests.HTTPError as exc:
            raise UpstreamUnavailableError(f"Upstream returned {response.status_code} for {url}") from exc
        except ValueError as exc:
            raise UpstreamUnavailableError(f"Upstream sent invalid JSON for {url}: {exc}") from exc

    @staticmethod
    def _ordered_values(points: dict) -> list[int]:
        try:
            dated = sorted(
                (datetime.strptime(day, TIMELINE_DATE_FORMAT), int(value or 0))
                for day, value in points.items()
            )
        except (TypeError, ValueError) as exc:
            raise UpstreamUnavailableError(f"History timeline decode failed: {exc}") from exc
        return [value for _, value in dated]
