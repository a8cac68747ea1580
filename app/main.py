import logging
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from config.redis_config import create_redis_pool
from config.settings import AppSettings
from epidemic.adapter.input.web.compare_router import compare_router
from epidemic.adapter.input.web.country_router import country_router
from epidemic.application.port.cache_store_port import CacheStorePort
from epidemic.application.port.disease_data_port import CountrySourcePort, HistorySourcePort
from epidemic.application.usecase.comparison_usecase import ComparisonUseCase
from epidemic.application.usecase.dataset_usecase import DatasetUseCase
from epidemic.application.usecase.statistics_usecase import StatisticsUseCase
from epidemic.infrastructure.cache.redis_cache_store import RedisCacheStore
from epidemic.infrastructure.client.disease_api_client import DiseaseApiClient

load_dotenv()

logger = logging.getLogger("epidemic.access")


def create_app(
    settings: AppSettings | None = None,
    cache_store: CacheStorePort | None = None,
    source: CountrySourcePort | None = None,
    history: HistorySourcePort | None = None,
) -> FastAPI:
    """
    Wires settings, the Redis store and the upstream API client into the use cases.
    Tests pass their own cache store and sources.
    """
    settings = settings or AppSettings()
    cache_store = cache_store or RedisCacheStore(create_redis_pool(settings.redis))
    if source is None or history is None:
        client = DiseaseApiClient(settings.disease_api)
        source = source or client
        history = history or client

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            yield
        finally:
            closer = getattr(cache_store, "close", None)
            if closer:
                closer()

    app = FastAPI(title="Epidemic Statistics API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.dataset_usecase = DatasetUseCase(cache_store, source, settings.cache)
    app.state.statistics_usecase = StatisticsUseCase(app.state.dataset_usecase)
    app.state.comparison_usecase = ComparisonUseCase(history)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start
        logger.info(
            "%s %s -> %d in %.3fs", request.method, request.url.path, response.status_code, elapsed
        )
        return response

    app.include_router(country_router)
    app.include_router(compare_router, prefix="/compare")

    @app.get("/health")
    def health_check() -> dict[str, str]:
        return {"status": "ok"}

    return app


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


app_settings = AppSettings()
configure_logging(app_settings.server.log_level)
app = create_app(app_settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app_settings.server.host, port=app_settings.server.port)
