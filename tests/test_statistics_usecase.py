import pytest

from epidemic.application.usecase.dataset_usecase import DatasetUseCase
from epidemic.application.usecase.statistics_usecase import StatisticsUseCase
from epidemic.domain.country_record import CountryRecord
from epidemic.domain.errors import ArithmeticDomainError, CountryNotFoundError
from epidemic.domain.percentage import percent_of
from epidemic.domain.sort_field import SortField


@pytest.fixture
def make_usecase(cache_store, source, cache_settings):
    def _make(countries):
        source.countries = countries
        return StatisticsUseCase(DatasetUseCase(cache_store, source, cache_settings))

    return _make


def names(records):
    return [record.country for record in records]


def test_get_country_exact_match(make_usecase, sample_countries):
    usecase = make_usecase(sample_countries)

    assert usecase.get_country("Italy") == sample_countries[2]


def test_get_country_is_case_sensitive(make_usecase, sample_countries):
    usecase = make_usecase(sample_countries)

    with pytest.raises(CountryNotFoundError):
        usecase.get_country("italy")


def test_get_country_missing_raises_instead_of_zero_record(make_usecase, sample_countries):
    usecase = make_usecase(sample_countries)

    with pytest.raises(CountryNotFoundError) as excinfo:
        usecase.get_country("Atlantis")

    assert excinfo.value.country == "Atlantis"


def test_country_names_keep_upstream_order(make_usecase, sample_countries):
    assert make_usecase(sample_countries).get_country_names() == ["World", "Greece", "Italy", "Spain"]


def test_sort_by_deaths_breaks_ties_on_cases(make_usecase):
    usecase = make_usecase([
        CountryRecord(country="A", deaths=10, cases=5),
        CountryRecord(country="B", deaths=10, cases=20),
        CountryRecord(country="C", deaths=30, cases=1),
    ])

    assert names(usecase.sort_by(SortField.DEATHS)) == ["C", "B", "A"]


def test_sort_by_cases_breaks_ties_on_deaths(make_usecase):
    usecase = make_usecase([
        CountryRecord(country="A", cases=50, deaths=1),
        CountryRecord(country="B", cases=50, deaths=7),
        CountryRecord(country="C", cases=10, deaths=99),
    ])

    assert names(usecase.sort_by("cases")) == ["B", "A", "C"]


def test_sort_without_tie_break_is_stable(make_usecase):
    usecase = make_usecase([
        CountryRecord(country="A", critical=3, cases=1),
        CountryRecord(country="B", critical=9, cases=1),
        CountryRecord(country="C", critical=3, cases=100),
        CountryRecord(country="D", critical=3, cases=50),
    ])

    assert names(usecase.sort_by("critical")) == ["B", "A", "C", "D"]


@pytest.mark.parametrize(
    "field, expected",
    [
        ("todayCases", ["World", "Italy", "Spain", "Greece"]),
        ("todayDeaths", ["World", "Greece", "Italy", "Spain"]),
        ("recovered", ["Greece", "Italy", "Spain", "World"]),
        ("active", ["Greece", "Italy", "Spain", "World"]),
        ("casesPerOneMillion", ["Italy", "Greece", "Spain", "World"]),
    ],
)
def test_sort_by_single_fields(make_usecase, sample_countries, field, expected):
    assert names(make_usecase(sample_countries).sort_by(field)) == expected


@pytest.mark.parametrize("field", [None, "", "population", "default"])
def test_unknown_sort_field_returns_upstream_order(make_usecase, sample_countries, field):
    assert make_usecase(sample_countries).sort_by(field) == sample_countries


def test_total_stats_exclude_world_row(make_usecase):
    usecase = make_usecase([
        CountryRecord(country="World", cases=100, deaths=10, today_cases=10, today_deaths=1),
        CountryRecord(country="X", cases=40, deaths=4, today_cases=4, today_deaths=1),
        CountryRecord(country="Y", cases=60, deaths=6, today_cases=3, today_deaths=0),
    ])

    stats = usecase.get_total_stats()

    assert stats.total_cases == 100
    assert stats.total_deaths == 10
    assert stats.today_total_cases == 7
    assert stats.today_total_deaths == 1
    assert stats.today_per_cent_of_total_cases == 7
    assert stats.today_per_cent_of_total_deaths == 10


def test_total_stats_zero_deaths_is_domain_error(make_usecase):
    usecase = make_usecase([CountryRecord(country="X", cases=10, today_cases=1, deaths=0)])

    with pytest.raises(ArithmeticDomainError):
        usecase.get_total_stats()


def test_percentage_per_country_truncates(make_usecase):
    usecase = make_usecase([CountryRecord(country="X", cases=7, today_cases=1, deaths=3, today_deaths=2)])

    stats = usecase.percentage_per_country("X")

    assert stats.country == "X"
    assert stats.today_per_cent_of_total_cases == 14
    assert stats.today_per_cent_of_total_deaths == 66


def test_percentage_per_country_without_cases_is_domain_error(make_usecase):
    usecase = make_usecase([CountryRecord(country="X", cases=0, deaths=0)])

    with pytest.raises(ArithmeticDomainError):
        usecase.percentage_per_country("X")


def test_percentage_per_country_unknown_country(make_usecase, sample_countries):
    with pytest.raises(CountryNotFoundError):
        make_usecase(sample_countries).percentage_per_country("Atlantis")


@pytest.mark.parametrize(
    "part, total, expected",
    [(1, 7, 14), (0, 5, 0), (-1, 7, -14), (3, 3, 100), (5, -3, -166)],
)
def test_percent_of_truncates_toward_zero(part, total, expected):
    assert percent_of(part, total) == expected
