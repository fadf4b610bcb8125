"""Structured JSON logging for dashboard computations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter

from cashpilot.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_dashboard_summary(
    scope: str,
    transaction_count: int,
    net_liquidity: float,
    runway_months: float,
    point_count: int,
) -> None:
    """Log structured dashboard outcome for analysis"""
    logging.getLogger("cashpilot.dashboard").info(
        "Dashboard summary computed",
        extra={
            "step": "dashboard_summary",
            "scope": scope,
            "transaction_count": transaction_count,
            "net_liquidity": net_liquidity,
            "runway_months": runway_months,
            "point_count": point_count,
        },
    )
