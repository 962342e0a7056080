"""Logging setup and SIEM-compatible security events.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until an application calls ``configure_logging``. Security events are emitted
as one JSON object per record on the ``passleak.siem`` logger, suitable for
ingestion by Splunk, ELK or QRadar.

Secrets, digests, prefixes and suffixes are never part of an event.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional

from passleak.config import (
    LOG_BACKUP_COUNT,
    LOG_DIR,
    LOG_FILE,
    LOG_LEVEL,
    LOG_MAX_BYTES,
    SIEM_LOG_FILE,
)


SIEM_LOGGER_NAME = "passleak.siem"

siem_logger = logging.getLogger(SIEM_LOGGER_NAME)

# Module-level state
_logging_configured = False


def configure_logging(level: str = LOG_LEVEL, log_dir: str = LOG_DIR) -> None:
    """Configure console and rotating file logging on first use.

    Application log lines go to ``passleak.log``; security events go to
    ``siem_events.jsonl`` only. Both files rotate at LOG_MAX_BYTES.

    Args:
        level: Log level name for the ``passleak`` logger
        log_dir: Directory for log files
    """
    global _logging_configured
    if _logging_configured:
        return

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, os.path.basename(LOG_FILE))
    siem_file = os.path.join(log_dir, os.path.basename(SIEM_LOG_FILE))

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
    )
    file_handler.setFormatter(formatter)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger = logging.getLogger("passleak")
    logger.setLevel(level)
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    # Raw JSON lines, kept out of the application log
    siem_handler = RotatingFileHandler(
        siem_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
    )
    siem_handler.setFormatter(logging.Formatter('%(message)s'))
    siem_logger.setLevel(logging.INFO)
    siem_logger.addHandler(siem_handler)
    siem_logger.propagate = False

    _logging_configured = True


def log_siem_event(
    event_type: str,
    status: str,
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of security event (e.g., 'breach_check', 'padding_violation')
        status: Event status (e.g., 'SUCCESS', 'BREACHED', 'FAILURE')
        details: Optional additional event details
    """
    event = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event_type": event_type,
        "status": status,
        "source": "passleak",
    }

    if details:
        event["details"] = details

    siem_logger.info(json.dumps(event))
