from fastapi import APIRouter, Depends

from epidemic.adapter.input.web.dependencies import (
    get_dataset_usecase,
    get_statistics_usecase,
    to_http_exception,
)
from epidemic.adapter.input.web.request.stats_requests import CountryRequest, SortRequest
from epidemic.application.usecase.dataset_usecase import DatasetUseCase
from epidemic.application.usecase.statistics_usecase import StatisticsUseCase
from epidemic.domain.errors import EpidemicStatsError

country_router = APIRouter(tags=["countries"])


@country_router.post("/country")
def get_country(request: CountryRequest, usecase: StatisticsUseCase = Depends(get_statistics_usecase)):
    """
    Returns one country's record, matched by exact name.
    """
    try:
        record = usecase.get_country(request.country)
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return record.to_dict()


@country_router.get("/countries")
def list_country_names(usecase: StatisticsUseCase = Depends(get_statistics_usecase)):
    try:
        names = usecase.get_country_names()
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return {"countries": names}


@country_router.get("/countries/all")
def list_countries(usecase: StatisticsUseCase = Depends(get_statistics_usecase)):
    try:
        records = usecase.get_all_countries()
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return {"data": [record.to_dict() for record in records]}


@country_router.post("/sort")
def sort_countries(request: SortRequest, usecase: StatisticsUseCase = Depends(get_statistics_usecase)):
    """
    Countries in descending order of the requested field. Unknown fields return upstream order.
    """
    try:
        records = usecase.sort_by(request.type)
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return {"data": [record.to_dict() for record in records]}


@country_router.post("/stats")
def country_statistics(request: CountryRequest, usecase: StatisticsUseCase = Depends(get_statistics_usecase)):
    try:
        stats = usecase.percentage_per_country(request.country)
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return stats.to_dict()


@country_router.get("/total")
def total_statistics(usecase: StatisticsUseCase = Depends(get_statistics_usecase)):
    """
    Worldwide totals, summed per country without the upstream "World" row.
    """
    try:
        stats = usecase.get_total_stats()
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return stats.to_dict()


@country_router.get("/continents")
def list_continents(usecase: DatasetUseCase = Depends(get_dataset_usecase)):
    try:
        records = usecase.get_continents()
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return {"data": [record.to_dict() for record in records]}
