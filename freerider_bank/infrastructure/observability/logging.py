"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "freerider-bank"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


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


def log_transfer(
    request_id: str,
    from_bank: str,
    outcome: str,
    amount: int,
    duration_ms: float,
    transaction_id: str | None = None,
) -> None:
    """Log structured transfer outcome; account numbers and PINs stay out of logs"""
    logging.info(
        "Transfer completed" if transaction_id else "Transfer rejected",
        extra={
            "request_id": request_id,
            "step": "transfer_complete",
            "from_bank": from_bank,
            "transfer_outcome": outcome,
            "amount": amount,
            "transaction_id": transaction_id,
            "duration_ms": duration_ms,
        },
    )
