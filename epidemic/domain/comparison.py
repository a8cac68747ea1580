from dataclasses import dataclass, field
from enum import Enum


class SeriesMetric(str, Enum):
    CASES = "cases"
    DEATHS = "deaths"
    RECOVERED = "recovered"


class CompareMode(str, Enum):
    RAW = "raw"
    FROM_FIRST_EVENT = "firstdeath"
    PER_DAY = "perday"
    PERCENTAGE = "percent"
    RECOVERY = "recovery"
    CASES = "cases"
    UNIQUE_CASES = "cases/unique"


@dataclass
class CountrySeries:
    country: str
    data: list[int] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"country": self.country, "data": list(self.data)}


@dataclass
class ComparisonResult:
    country_one: CountrySeries
    country_two: CountrySeries

    def to_dict(self) -> dict:
        return {
            "countryOne": self.country_one.to_dict(),
            "countryTwo": self.country_two.to_dict(),
        }
