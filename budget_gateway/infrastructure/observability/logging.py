"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from budget_gateway.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_projection(
    request_id: str,
    obligation_count: int,
    window_months: int,
    duration_ms: float,
) -> None:
    """Log structured projection outcome"""
    logging.info(
        "Projection completed",
        extra={
            "request_id": request_id,
            "step": "projection_complete",
            "obligation_count": obligation_count,
            "window_months": window_months,
            "duration_ms": duration_ms,
        },
    )


def log_installment_plan(
    request_id: str,
    plan_id: str,
    count: int,
    total_amount: str,
) -> None:
    """Log structured installment plan creation"""
    logging.info(
        "Installment plan created",
        extra={
            "request_id": request_id,
            "step": "installment_plan_created",
            "plan_id": plan_id,
            "installment_count": count,
            "total_amount": total_amount,
        },
    )
