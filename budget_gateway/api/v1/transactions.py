"""POST /v1/transactions/* - income/expense trend and expense breakdown"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from budget_gateway.api.v1.schemas import (
    CategoryBreakdownRequest,
    CategoryBreakdownResponse,
    CategoryTotalSchema,
    TrendPointSchema,
    TrendRequest,
    TrendResponse,
)
from budget_gateway.api.dependencies import get_request_id, get_settings
from budget_gateway.config import Settings
from budget_gateway.domain.exceptions import InvalidProjectionWindowError
from budget_gateway.domain.trends import category_breakdown, monthly_trend
from budget_gateway.infrastructure.observability.metrics import trend_counter

router = APIRouter()


@router.post("/transactions/trend", response_model=TrendResponse)
def get_monthly_trend(
    request_body: TrendRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Income vs expense per month for the bar chart.

    Returns:
        The trailing months up to today's month, oldest first, each present
        even when nothing was booked
    """
    request_id = get_request_id(request)
    months = request_body.months or config.trend_window_months

    try:
        points = monthly_trend(
            (t.to_domain() for t in request_body.transactions),
            request_body.today,
            months,
        )

    except InvalidProjectionWindowError as e:
        logging.warning(f"Invalid trend window: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    trend_counter.inc()

    return TrendResponse(
        months=months,
        periods=[
            TrendPointSchema(period=label, income=point.income, expense=point.expense)
            for label, point in points.items()
        ],
    )


@router.post("/transactions/categories", response_model=CategoryBreakdownResponse)
def get_category_breakdown(request_body: CategoryBreakdownRequest):
    """Expense totals per category for the pie chart, largest first"""
    totals = category_breakdown(t.to_domain() for t in request_body.transactions)
    return CategoryBreakdownResponse(
        categories=[CategoryTotalSchema(category=t.category, amount=t.amount) for t in totals]
    )
