from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContinentRecord:
    continent: str
    cases: int = 0
    today_cases: int = 0
    deaths: int = 0
    today_deaths: int = 0
    recovered: int = 0
    active: int = 0
    critical: int = 0
    countries: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_payload(cls, payload: dict) -> "ContinentRecord":
        return cls(
            continent=payload.get("continent") or "",
            cases=int(payload.get("cases") or 0),
            today_cases=int(payload.get("todayCases") or 0),
            deaths=int(payload.get("deaths") or 0),
            today_deaths=int(payload.get("todayDeaths") or 0),
            recovered=int(payload.get("recovered") or 0),
            active=int(payload.get("active") or 0),
            critical=int(payload.get("critical") or 0),
            countries=tuple(payload.get("countries") or ()),
        )

    def to_dict(self) -> dict:
        return {
            "continent": self.continent,
            "cases": self.cases,
            "todayCases": self.today_cases,
            "deaths": self.deaths,
            "todayDeaths": self.today_deaths,
            "recovered": self.recovered,
            "active": self.active,
            "critical": self.critical,
            "countries": list(self.countries),
        }
