from abc import ABC, abstractmethod

from epidemic.domain.comparison import SeriesMetric
from epidemic.domain.continent_record import ContinentRecord
from epidemic.domain.country_record import CountryRecord


class CountrySourcePort(ABC):
    @abstractmethod
    def fetch_countries(self) -> list[CountryRecord]:
        raise NotImplementedError

    @abstractmethod
    def fetch_continents(self) -> list[ContinentRecord]:
        raise NotImplementedError


class HistorySourcePort(ABC):
    @abstractmethod
    def fetch_series(self, country: str, metric: SeriesMetric) -> list[int]:
        """
        Cumulative counts per day starting 2020-01-22. Unknown countries yield an empty list.
        """
        raise NotImplementedError
