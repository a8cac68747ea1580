import logging
from typing import Callable, Sequence

from epidemic.application.port.disease_data_port import HistorySourcePort
from epidemic.domain.comparison import CompareMode, ComparisonResult, CountrySeries, SeriesMetric
from epidemic.domain.percentage import percent_of

logger = logging.getLogger(__name__)


def unchanged(series: Sequence[int]) -> list[int]:
    return list(series)


def from_first_event(series: Sequence[int]) -> list[int]:
    """Drops the leading zero days. A series that never leaves zero becomes empty."""
    for index, value in enumerate(series):
        if value != 0:
            return list(series[index:])
    return []


def per_day_delta(series: Sequence[int]) -> list[int]:
    if len(series) < 2:
        return list(series)
    return [series[0]] + [series[i] - series[i - 1] for i in range(1, len(series))]


def percentage_delta(series: Sequence[int]) -> list[int]:
    """
    Day-over-day growth in percent, measured from the first non-zero day.
    The first entry has no previous day and is 0.
    """
    trimmed = from_first_event(series)
    if not trimmed:
        return []
    growth = [0]
    for i in range(1, len(trimmed)):
        growth.append(percent_of(trimmed[i] - trimmed[i - 1], trimmed[i - 1], f"day {i - 1}"))
    return growth


# Modes are calendar aligned (index 0 is 2020-01-22) except firstdeath and percent,
# which start each country at its own first non-zero day.
COMPARE_PLANS: dict[CompareMode, tuple[SeriesMetric, Callable[[Sequence[int]], list[int]]]] = {
    CompareMode.RAW: (SeriesMetric.DEATHS, unchanged),
    CompareMode.FROM_FIRST_EVENT: (SeriesMetric.DEATHS, from_first_event),
    CompareMode.PER_DAY: (SeriesMetric.DEATHS, per_day_delta),
    CompareMode.PERCENTAGE: (SeriesMetric.DEATHS, percentage_delta),
    CompareMode.RECOVERY: (SeriesMetric.RECOVERED, unchanged),
    CompareMode.CASES: (SeriesMetric.CASES, unchanged),
    CompareMode.UNIQUE_CASES: (SeriesMetric.CASES, per_day_delta),
}


class ComparisonUseCase:
    def __init__(self, history: HistorySourcePort):
        self.history = history

    def compare(self, mode: CompareMode, country_one: str, country_two: str) -> ComparisonResult:
        metric, transform = COMPARE_PLANS[mode]
        return ComparisonResult(
            country_one=self._build_series(country_one, metric, transform),
            country_two=self._build_series(country_two, metric, transform),
        )

    def _build_series(
        self, country: str, metric: SeriesMetric, transform: Callable[[Sequence[int]], list[int]]
    ) -> CountrySeries:
        raw = self.history.fetch_series(country, metric)
        if not raw:
            logger.info("no %s history for %r", metric.value, country)
            return CountrySeries(country=country, data=[])
        return CountrySeries(country=country, data=transform(raw))
