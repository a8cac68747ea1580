from dataclasses import dataclass


@dataclass(frozen=True)
class TotalStats:
    total_cases: int
    total_deaths: int
    today_total_cases: int
    today_total_deaths: int
    today_per_cent_of_total_cases: int
    today_per_cent_of_total_deaths: int

    def to_dict(self) -> dict:
        return {
            "todayPerCentOfTotalCases": self.today_per_cent_of_total_cases,
            "todayPerCentOfTotalDeaths": self.today_per_cent_of_total_deaths,
            "totalCases": self.total_cases,
            "totalDeaths": self.total_deaths,
            "todayTotalCases": self.today_total_cases,
            "todayTotalDeaths": self.today_total_deaths,
        }


@dataclass(frozen=True)
class CountryStats:
    country: str
    today_per_cent_of_total_cases: int
    today_per_cent_of_total_deaths: int

    def to_dict(self) -> dict:
        return {
            "country": self.country,
            "todayPerCentOfTotalCases": self.today_per_cent_of_total_cases,
            "todayPerCentOfTotalDeaths": self.today_per_cent_of_total_deaths,
        }
