import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


@dataclass
class RedisSettings:
    url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    max_connections: int = int(os.getenv("REDIS_MAX_CONNECTIONS", "10"))
    socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "2.0"))


@dataclass
class DiseaseApiSettings:
    countries_url: str = os.getenv("DISEASE_API_URL", "https://disease.sh/v3/covid-19/countries?sort=country")
    history_url: str = os.getenv("DISEASE_API_HISTORY_URL", "https://disease.sh/v3/covid-19/historical")
    continent_url: str = os.getenv("DISEASE_API_CONTINENT_URL", "https://disease.sh/v3/covid-19/continents")
    timeout: float = float(os.getenv("DISEASE_API_TIMEOUT", "10"))


@dataclass
class CacheSettings:
    snapshot_key: str = os.getenv("CACHE_SNAPSHOT_KEY", "total")
    continent_key: str = os.getenv("CACHE_CONTINENT_KEY", "continent")
    # 0 leaves expiry to the Redis server configuration.
    ttl_seconds: int = int(os.getenv("CACHE_TTL_SECONDS", "0"))


@dataclass
class ServerSettings:
    host: str = os.getenv("APP_HOST", "0.0.0.0")
    port: int = int(os.getenv("APP_PORT", "8000"))
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@dataclass
class AppSettings:
    redis: RedisSettings = field(default_factory=RedisSettings)
    disease_api: DiseaseApiSettings = field(default_factory=DiseaseApiSettings)
    cache: CacheSettings = field(default_factory=CacheSettings)
    server: ServerSettings = field(default_factory=ServerSettings)
