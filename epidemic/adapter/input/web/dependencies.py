from fastapi import HTTPException, Request

from epidemic.application.usecase.comparison_usecase import ComparisonUseCase
from epidemic.application.usecase.dataset_usecase import DatasetUseCase
from epidemic.application.usecase.statistics_usecase import StatisticsUseCase
from epidemic.domain.errors import (
    ArithmeticDomainError,
    CacheUnavailableError,
    CountryNotFoundError,
    EpidemicStatsError,
    UpstreamUnavailableError,
)

ERROR_STATUS = {
    CountryNotFoundError: 404,
    ArithmeticDomainError: 422,
    UpstreamUnavailableError: 502,
    CacheUnavailableError: 503,
}


def get_dataset_usecase(request: Request) -> DatasetUseCase:
    return request.app.state.dataset_usecase


def get_statistics_usecase(request: Request) -> StatisticsUseCase:
    return request.app.state.statistics_usecase


def get_comparison_usecase(request: Request) -> ComparisonUseCase:
    return request.app.state.comparison_usecase


def to_http_exception(exc: EpidemicStatsError) -> HTTPException:
    status_code = ERROR_STATUS.get(type(exc), 500)
    return HTTPException(status_code=status_code, detail=exc.to_dict())
