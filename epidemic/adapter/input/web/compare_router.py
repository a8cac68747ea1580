from fastapi import APIRouter, Depends

from epidemic.adapter.input.web.dependencies import get_comparison_usecase, to_http_exception
from epidemic.adapter.input.web.request.stats_requests import CompareRequest
from epidemic.application.usecase.comparison_usecase import ComparisonUseCase
from epidemic.domain.comparison import CompareMode
from epidemic.domain.errors import EpidemicStatsError

compare_router = APIRouter(tags=["compare"])


def _compare(mode: CompareMode, request: CompareRequest, usecase: ComparisonUseCase) -> dict:
    try:
        result = usecase.compare(mode, request.country_one, request.country_two)
    except EpidemicStatsError as exc:
        raise to_http_exception(exc) from exc
    return result.to_dict()


@compare_router.post("")
def compare_deaths(request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)):
    """
    Cumulative deaths per day since 2020-01-22 for both countries.
    """
    return _compare(CompareMode.RAW, request, usecase)


@compare_router.post("/firstdeath")
def compare_from_first_death(request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)):
    """
    Cumulative deaths, each country counted from its own first death.
    """
    return _compare(CompareMode.FROM_FIRST_EVENT, request, usecase)


@compare_router.post("/perday")
def compare_per_day_deaths(request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)):
    return _compare(CompareMode.PER_DAY, request, usecase)


@compare_router.post("/percent")
def compare_percentage_per_day_deaths(
    request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)
):
    """
    Daily growth of cumulative deaths in percent, from each country's first death.
    """
    return _compare(CompareMode.PERCENTAGE, request, usecase)


@compare_router.post("/recovery")
def compare_recovery(request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)):
    return _compare(CompareMode.RECOVERY, request, usecase)


@compare_router.post("/cases")
def compare_cases(request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)):
    return _compare(CompareMode.CASES, request, usecase)


@compare_router.post("/cases/unique")
def compare_unique_cases(request: CompareRequest, usecase: ComparisonUseCase = Depends(get_comparison_usecase)):
    """
    New cases per day.
    """
    return _compare(CompareMode.UNIQUE_CASES, request, usecase)
