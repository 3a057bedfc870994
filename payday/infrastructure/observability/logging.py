"""Structured JSON logging for CLI diagnostics"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from payday.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "WARNING") -> None:
    """Configure structured JSON logging on stderr (stdout is command output)"""
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_projection(
    current_day: int,
    reference_day: int,
    wraps: bool,
    due_count: int,
    total_due: Decimal,
) -> None:
    """Log structured projection outcome"""
    logging.getLogger("payday.projection").info(
        "Projection completed",
        extra={
            "step": "projection_complete",
            "current_day": current_day,
            "reference_day": reference_day,
            "wraps": wraps,
            "due_count": due_count,
            "total_due": str(total_due),
        },
    )


def log_adjustment(name: str, amount: Decimal | None, day_paid: int | None) -> None:
    """Log structured bill adjustment"""
    logging.getLogger("payday.adjust").info(
        "Payment adjusted",
        extra={
            "step": "adjust_complete",
            "payment": name,
            "amount": None if amount is None else str(amount),
            "day_paid": day_paid,
        },
    )
