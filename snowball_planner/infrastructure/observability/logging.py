"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from snowball_planner.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
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

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_plan(
    request_id: str,
    debt_count: int,
    months_to_payoff: int,
    total_interest_saved: float,
    truncated: bool,
    duration_ms: float,
) -> None:
    """Log structured plan outcome for analysis"""
    logging.info(
        "Plan computed",
        extra={
            "request_id": request_id,
            "step": "plan_complete",
            "debt_count": debt_count,
            "months_to_payoff": months_to_payoff,
            "total_interest_saved": round(total_interest_saved, 2),
            "truncated": truncated,
            "duration_ms": duration_ms,
        },
    )
