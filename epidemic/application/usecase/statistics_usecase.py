from typing import Callable

from epidemic.application.usecase.dataset_usecase import DatasetUseCase
from epidemic.domain.country_record import CountryRecord
from epidemic.domain.errors import CountryNotFoundError
from epidemic.domain.percentage import percent_of
from epidemic.domain.sort_field import SortField
from epidemic.domain.total_stats import CountryStats, TotalStats

# Server-side aggregate row; summing it would double count every country.
WORLD_ROW = "World"

SORT_KEYS: dict[SortField, Callable[[CountryRecord], tuple]] = {
    SortField.CASES: lambda r: (r.cases, r.deaths),
    SortField.DEATHS: lambda r: (r.deaths, r.cases),
    SortField.TODAY_CASES: lambda r: (r.today_cases,),
    SortField.TODAY_DEATHS: lambda r: (r.today_deaths,),
    SortField.RECOVERED: lambda r: (r.recovered,),
    SortField.ACTIVE: lambda r: (r.active,),
    SortField.CRITICAL: lambda r: (r.critical,),
    SortField.CASES_PER_ONE_MILLION: lambda r: (r.cases_per_one_million,),
}


class StatisticsUseCase:
    def __init__(self, dataset: DatasetUseCase):
        # Per-request derivations over the cached country snapshot.
        self.dataset = dataset

    def get_all_countries(self) -> list[CountryRecord]:
        return self.dataset.get_all_countries()

    def get_country_names(self) -> list[str]:
        return [record.country for record in self.dataset.get_all_countries()]

    def get_country(self, name: str) -> CountryRecord:
        for record in self.dataset.get_all_countries():
            if record.country == name:
                return record
        raise CountryNotFoundError(name)

    def sort_by(self, field: SortField | str | None) -> list[CountryRecord]:
        """
        Descending, stable sort. ``cases`` and ``deaths`` break ties on each other;
        the other fields keep upstream order among equal values.
        """
        if not isinstance(field, SortField):
            field = SortField.parse(field)
        records = self.dataset.get_all_countries()
        key = SORT_KEYS.get(field)
        if key is None:
            return records
        return sorted(records, key=key, reverse=True)

    def get_total_stats(self) -> TotalStats:
        total_cases = total_deaths = today_cases = today_deaths = 0
        for record in self.dataset.get_all_countries():
            if record.country == WORLD_ROW:
                continue
            total_cases += record.cases
            total_deaths += record.deaths
            today_cases += record.today_cases
            today_deaths += record.today_deaths

        return TotalStats(
            total_cases=total_cases,
            total_deaths=total_deaths,
            today_total_cases=today_cases,
            today_total_deaths=today_deaths,
            today_per_cent_of_total_cases=percent_of(today_cases, total_cases, "total cases"),
            today_per_cent_of_total_deaths=percent_of(today_deaths, total_deaths, "total deaths"),
        )

    def percentage_per_country(self, name: str) -> CountryStats:
        record = self.get_country(name)
        return CountryStats(
            country=record.country,
            today_per_cent_of_total_cases=percent_of(record.today_cases, record.cases, f"{name} cases"),
            today_per_cent_of_total_deaths=percent_of(record.today_deaths, record.deaths, f"{name} deaths"),
        )
