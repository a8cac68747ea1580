from dataclasses import dataclass


@dataclass(frozen=True)
class CountryRecord:
    country: str
    cases: int = 0
    today_cases: int = 0
    deaths: int = 0
    today_deaths: int = 0
    recovered: int = 0
    active: int = 0
    critical: int = 0
    cases_per_one_million: float = 0.0

    @classmethod
    def from_payload(cls, payload: dict) -> "CountryRecord":
        # The upstream API reports unknown counts as null.
        return cls(
            country=payload.get("country") or "",
            cases=int(payload.get("cases") or 0),
            today_cases=int(payload.get("todayCases") or 0),
            deaths=int(payload.get("deaths") or 0),
            today_deaths=int(payload.get("todayDeaths") or 0),
            recovered=int(payload.get("recovered") or 0),
            active=int(payload.get("active") or 0),
            critical=int(payload.get("critical") or 0),
            cases_per_one_million=float(payload.get("casesPerOneMillion") or 0),
        )

    def to_dict(self) -> dict:
        return {
            "country": self.country,
            "cases": self.cases,
            "todayCases": self.today_cases,
            "deaths": self.deaths,
            "todayDeaths": self.today_deaths,
            "recovered": self.recovered,
            "active": self.active,
            "critical": self.critical,
            "casesPerOneMillion": self.cases_per_one_million,
        }
