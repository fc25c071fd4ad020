"""POST /v1/installments - split an expense into monthly installments"""

import uuid
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from budget_gateway.api.v1.schemas import InstallmentLegSchema, InstallmentPlanResponse, InstallmentRequest
from budget_gateway.api.dependencies import get_request_id, get_settings
from budget_gateway.config import Settings
from budget_gateway.domain.exceptions import InvalidInstallmentAmountError, InvalidInstallmentCountError
from budget_gateway.domain.installments import plan_installments
from budget_gateway.infrastructure.observability.logging import log_installment_plan
from budget_gateway.infrastructure.observability.metrics import record_installment_plan

router = APIRouter()


@router.post("/installments", response_model=InstallmentPlanResponse)
def create_installment_plan(
    request_body: InstallmentRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Allocate an installment plan.

    Returns:
        Legs one month apart with a shared plan_id; the client persists each
        leg as its own ledger entry tagged with plan_id, index and count.
    """
    request_id = get_request_id(request)
    count = request_body.count if request_body.count is not None else config.default_installment_count

    try:
        plan = plan_installments(request_body.total_amount, count, request_body.start_date)

    except (InvalidInstallmentCountError, InvalidInstallmentAmountError) as e:
        logging.warning(f"Invalid installment plan: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    plan_id = str(uuid.uuid4())
    record_installment_plan(plan.count)
    log_installment_plan(request_id, plan_id, plan.count, str(plan.total_amount))

    description = request_body.description or "Expense"
    return InstallmentPlanResponse(
        plan_id=plan_id,
        total_amount=plan.total_amount,
        count=plan.count,
        legs=[
            InstallmentLegSchema(
                index=leg.index,
                count=leg.count,
                amount=leg.amount,
                date=leg.date,
                description=leg.describe(description),
            )
            for leg in plan.legs
        ],
    )
