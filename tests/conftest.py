from contextlib import contextmanager

import pytest

from config.settings import CacheSettings
from epidemic.application.port.cache_store_port import CacheConnectionPort, CacheStorePort
from epidemic.application.port.disease_data_port import CountrySourcePort, HistorySourcePort
from epidemic.domain.country_record import CountryRecord
from epidemic.domain.errors import CacheUnavailableError


class InMemoryCacheConnection(CacheConnectionPort):
    def __init__(self):
        self.values: dict[str, bytes] = {}
        self.ttls: dict[str, int | None] = {}
        self.fail_get = False
        self.fail_set = False

    def get(self, key: str) -> bytes | None:
        if self.fail_get:
            raise CacheUnavailableError("connection refused")
        return self.values.get(key)

    def set(self, key: str, payload: bytes, ttl_seconds: int | None = None) -> None:
        if self.fail_set:
            raise CacheUnavailableError("connection reset")
        self.values[key] = payload
        self.ttls[key] = ttl_seconds


class InMemoryCacheStore(CacheStorePort):
    def __init__(self):
        self.connection = InMemoryCacheConnection()
        self.opened = 0
        self.released = 0

    @contextmanager
    def connect(self):
        self.opened += 1
        try:
            yield self.connection
        finally:
            self.released += 1


class StubDiseaseSource(CountrySourcePort, HistorySourcePort):
    def __init__(self):
        self.countries: list[CountryRecord] = []
        self.continents = []
        self.series: dict[tuple[str, str], list[int]] = {}
        self.error: Exception | None = None
        self.country_calls = 0

    def fetch_countries(self):
        self.country_calls += 1
        if self.error:
            raise self.error
        return list(self.countries)

    def fetch_continents(self):
        if self.error:
            raise self.error
        return list(self.continents)

    def fetch_series(self, country, metric):
        if self.error:
            raise self.error
        return list(self.series.get((country, metric.value), []))


@pytest.fixture
def cache_store():
    return InMemoryCacheStore()


@pytest.fixture
def source():
    return StubDiseaseSource()


@pytest.fixture
def cache_settings():
    return CacheSettings(snapshot_key="total", continent_key="continent", ttl_seconds=0)


@pytest.fixture
def sample_countries():
    return [
        CountryRecord(country="World", cases=1500, today_cases=90, deaths=80, today_deaths=9),
        CountryRecord(country="Greece", cases=1061, today_cases=0, deaths=37, today_deaths=5,
                      recovered=52, active=972, critical=66, cases_per_one_million=102),
        CountryRecord(country="Italy", cases=400, today_cases=80, deaths=40, today_deaths=4,
                      recovered=20, active=340, critical=30, cases_per_one_million=2061.5),
        CountryRecord(country="Spain", cases=39, today_cases=10, deaths=3, today_deaths=0,
                      recovered=2, active=34, critical=0, cases_per_one_million=0.6),
    ]
