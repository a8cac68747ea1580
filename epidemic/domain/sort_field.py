from enum import Enum


class SortField(str, Enum):
    CASES = "cases"
    DEATHS = "deaths"
    TODAY_CASES = "todayCases"
    TODAY_DEATHS = "todayDeaths"
    RECOVERED = "recovered"
    ACTIVE = "active"
    CRITICAL = "critical"
    CASES_PER_ONE_MILLION = "casesPerOneMillion"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: str | None) -> "SortField":
        """Unknown or missing selectors fall back to DEFAULT (upstream order)."""
        if not value:
            return cls.DEFAULT
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT
