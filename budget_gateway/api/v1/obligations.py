"""POST /v1/obligations/* - projection, urgency and cost of recurring obligations"""

import time
import logging
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Request

from budget_gateway.api.v1.schemas import (
    CostRequest,
    CostResponse,
    PeriodTotals,
    ProjectionRequest,
    ProjectionResponse,
    UrgencyGroupSchema,
    UrgencyItem,
    UrgencyRequest,
    UrgencyResponse,
)
from budget_gateway.api.dependencies import get_request_id, get_settings
from budget_gateway.config import Settings
from budget_gateway.domain.exceptions import InvalidProjectionWindowError, InvalidScheduleError
from budget_gateway.domain.models import RecurringObligation
from budget_gateway.domain.projection import group_keys, project, recurring_cost
from budget_gateway.domain.schedule import normalize
from budget_gateway.domain.urgency import day_offset, group_by_urgency
from budget_gateway.infrastructure.observability.logging import log_projection
from budget_gateway.infrastructure.observability.metrics import (
    invalid_schedule_counter,
    record_projection,
    record_urgency,
)

router = APIRouter()


@router.post("/obligations/projection", response_model=ProjectionResponse)
def create_projection(
    request_body: ProjectionRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Project recurring obligations onto the next months for a stacked chart.

    Flow:
    1. Catch each obligation's due date up to today
    2. Emit one occurrence per billing date inside the window
    3. Sum amounts per (month, group key), every month present
    """
    start_time = time.time()
    request_id = get_request_id(request)
    window_months = request_body.window_months or config.projection_window_months
    obligations = [o.to_domain() for o in request_body.obligations]

    try:
        buckets = project(
            obligations,
            request_body.today,
            window_months,
            max_months=config.catch_up_max_months,
        )

    except InvalidScheduleError as e:
        invalid_schedule_counter.inc()
        logging.warning(f"Invalid schedule: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except InvalidProjectionWindowError as e:
        logging.warning(f"Invalid projection window: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_projection(len(obligations))
    log_projection(request_id, len(obligations), window_months, duration_ms)

    return ProjectionResponse(
        window_months=window_months,
        group_keys=group_keys(obligations),
        periods=[PeriodTotals(period=label, totals=totals) for label, totals in buckets.items()],
    )


@router.post("/obligations/urgency", response_model=UrgencyResponse)
def classify_obligations(
    request_body: UrgencyRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Group obligations into Overdue / This Week / Next Week / This Month / Later.

    Buckets use the stored due date so stale records surface as overdue;
    normalized_due_date tells the client when the next bill actually lands.
    A record too stale to catch up keeps its bucket with normalized_due_date
    set to null instead of failing the whole classification.
    """
    request_id = get_request_id(request)
    obligations = [o.to_domain() for o in request_body.obligations]
    groups = group_by_urgency(obligations, request_body.today)

    def caught_up(obligation: RecurringObligation) -> Optional[date]:
        try:
            return normalize(
                obligation.next_due_date,
                obligation.cycle,
                request_body.today,
                config.catch_up_max_months,
            )
        except InvalidScheduleError as e:
            invalid_schedule_counter.inc()
            logging.warning(
                f"Invalid schedule: {e}",
                extra={"request_id": request_id, "obligation_id": obligation.id},
            )
            return None

    response_groups = [
        UrgencyGroupSchema(
            bucket=bucket,
            total=group.total,
            obligations=[
                UrgencyItem(
                    id=o.id,
                    name=o.name,
                    amount=o.amount,
                    group_key=o.group_key,
                    next_due_date=o.next_due_date,
                    normalized_due_date=caught_up(o),
                    day_offset=day_offset(o.next_due_date, request_body.today),
                )
                for o in group.obligations
            ],
        )
        for bucket, group in groups.items()
    ]

    record_urgency({bucket: len(group.obligations) for bucket, group in groups.items()})

    return UrgencyResponse(groups=response_groups)


@router.post("/obligations/cost", response_model=CostResponse)
def get_recurring_cost(request_body: CostRequest):
    """Monthly and yearly cost of all recurring obligations"""
    cost = recurring_cost(o.to_domain() for o in request_body.obligations)
    return CostResponse(monthly=cost.monthly, yearly=cost.yearly)
