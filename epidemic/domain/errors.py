class EpidemicStatsError(Exception):
    kind = "InternalError"

    def to_dict(self) -> dict:
        return {"error": self.kind, "message": str(self)}


class CacheUnavailableError(EpidemicStatsError):
    kind = "CacheUnavailable"


class CacheCorruptError(EpidemicStatsError):
    """Cached payload could not be decoded. Callers recover by treating it as a miss."""

    kind = "CacheCorrupt"


class UpstreamUnavailableError(EpidemicStatsError):
    kind = "UpstreamUnavailable"


class ArithmeticDomainError(EpidemicStatsError):
    """A percentage was requested over a zero total."""

    kind = "ArithmeticDomainError"


class CountryNotFoundError(EpidemicStatsError):
    kind = "NotFound"

    def __init__(self, country: str):
        super().__init__(f"Country not found: {country!r}")
        self.country = country
